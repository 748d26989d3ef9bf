# Where each source's histogram goes: <input>.hist next to every input file,
# or stdout when reading from stdin.

import contextlib
import logging

import numpy as np

from fdhist.errors import ChannelOpenError

logger = logging.getLogger(__name__)

SUFFIX = ".hist"


def output_name(path):
    return path + SUFFIX


@contextlib.contextmanager
def open_sinks(paths, stdout):
    """
    Yields a dict mapping source id to a writable text stream. Files are
    opened (truncated) in order and closed on exit; stdout is left open.
    """
    if not paths:
        yield {0: stdout}
        return
    with contextlib.ExitStack() as stack:
        sinks = {}
        for i in range(0, len(paths)):
            name = output_name(paths[i])
            try:
                f = open(name, "w", encoding="utf-8")
            except OSError as err:
                raise ChannelOpenError(name, err.strerror or str(err)) from err
            sinks[i] = stack.enter_context(f)
            logger.debug("source %d -> %s", i, name)
        yield sinks


def write_rows(stream, rows):
    """
    Writes rows as "<bottom> <count>" lines and flushes the stream. A failed
    write raises ChannelOpenError naming the stream.
    """
    try:
        if rows:
            arr = np.array(rows, dtype=np.float64).reshape(-1, 2)
            np.savetxt(stream, arr, fmt="%g %d")
        stream.flush()
    except OSError as err:
        name = getattr(stream, "name", "<stdout>")
        raise ChannelOpenError(
            name, "write failed: %s" % (err.strerror or err)) from err
