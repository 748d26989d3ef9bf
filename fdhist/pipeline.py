import logging

from fdhist.bins import aggregate
from fdhist.errors import DegenerateBinWidth
from fdhist.get_binw import get_binw, log_summary, summarize
from fdhist.read_cols import read_files, read_named, sort_pool
from fdhist.sinks import open_sinks, write_rows

logger = logging.getLogger(__name__)

STDIN_NAME = "<stdin>"


def ingest(config, stdin):
    # If there aren't any input files, then read from stdin as source 0.
    if config.input_files:
        pool = read_files(config.input_files, config.column,
                          config.minimum, config.maximum)
        source_ids = range(len(config.input_files))
    else:
        pool = read_named(stdin, STDIN_NAME, 0, config.column,
                          config.minimum, config.maximum)
        source_ids = [0]
    logger.debug("pooled %d samples from %d sources", len(pool), len(source_ids))
    return sort_pool(pool), list(source_ids)


def build(config, stdin):
    """
    Reads every source and bins the pooled values. Returns a dict mapping
    source id to its list of Rows. Nothing is written.
    """
    pool, source_ids = ingest(config, stdin)
    values = pool["value"].to_numpy()
    sources = pool["source"].to_numpy()

    try:
        binw = get_binw(values)
    except DegenerateBinWidth as err:
        if config.verbose and err.n:
            log_summary({
                "n": err.n,
                "p25": err.p25,
                "p75": err.p75,
                "bin_width": err.width,
                "min": float(values[0]),
                "max": float(values[-1]),
            })
        raise
    if config.verbose:
        log_summary(summarize(values, binw))

    return aggregate(values, sources, binw.width, source_ids,
                     emit_zero_bins=config.emit_zero_bins)


def run(config, stdin, stdout):
    histogram = build(config, stdin)
    with open_sinks(config.input_files, stdout) as sinks:
        logger.debug("writing %d histograms", len(sinks))
        for who, rows in histogram.items():
            write_rows(sinks[who], rows)
    return histogram
