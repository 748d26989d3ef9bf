# Reading one column of numbers from whitespace-delimited text.
# Every input is one source; its samples are tagged with the source id
# (its position on the command line, or 0 for stdin) and pooled into a
# single frame with columns "value" and "source".

import logging
import re
from typing import NamedTuple

import numpy as np
import pandas as pd

from fdhist.errors import ChannelOpenError, MalformedValue

logger = logging.getLogger(__name__)

# Plain decimal notation only: no nan/inf, hex, or digit-group underscores.
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class Sample(NamedTuple):
    value: float
    source: int


def parse_value(line, column):
    fields = line.split()
    if column > len(fields) or _NUMBER.fullmatch(fields[column - 1]) is None:
        raise MalformedValue(column, line.rstrip("\r\n"))
    return float(fields[column - 1])


def read_samples(stream, source, column=1, minimum=None, maximum=None):
    """
    Yields a Sample for every non-blank line of stream whose value in the
    one-based column lies within [minimum, maximum]. Either bound may be None.
    """
    for line in stream:
        if not line.strip():
            continue
        value = parse_value(line, column)
        if minimum is not None and value < minimum:
            continue
        if maximum is not None and value > maximum:
            continue
        yield Sample(value, source)


def empty_pool():
    return pd.DataFrame({
        "value": np.empty(0, dtype=np.float64),
        "source": np.empty(0, dtype=np.int64),
    })


def read_source(stream, source, column=1, minimum=None, maximum=None):
    samples = list(read_samples(stream, source, column, minimum, maximum))
    df = pd.DataFrame({
        "value": np.array([s.value for s in samples], dtype=np.float64),
        "source": np.array([s.source for s in samples], dtype=np.int64),
    })
    logger.debug("source %d: %d samples kept", source, len(df))
    return df


def read_named(stream, name, source, column=1, minimum=None, maximum=None):
    try:
        return read_source(stream, source, column, minimum, maximum)
    except (OSError, UnicodeDecodeError) as err:
        raise ChannelOpenError(name, str(err)) from err


def read_path(path, source, column=1, minimum=None, maximum=None):
    try:
        f = open(path, "r", encoding="utf-8")
    except OSError as err:
        raise ChannelOpenError(path, err.strerror or str(err)) from err
    with f:
        return read_named(f, path, source, column, minimum, maximum)


def read_files(paths, column=1, minimum=None, maximum=None):
    dfs = []
    for i in range(0, len(paths)):
        df = read_path(paths[i], i, column, minimum, maximum)
        dfs.append(df)
    return pool_sources(dfs)


def pool_sources(dfs):
    dfs = [df for df in dfs if len(df)]
    if not dfs:
        return empty_pool()
    return pd.concat(dfs, ignore_index=True)


def sort_pool(pool):
    # mergesort is stable, so ties keep ingestion order from run to run.
    return pool.sort_values("value", kind="mergesort", ignore_index=True)
