# binw = 2 * (p75 - p25) / cbrt(n)
# Freedman-Diaconis with index-based percentiles: p = values[floor(q * n)]
# on the ascending values, no interpolation.

import logging
from typing import NamedTuple

import numpy as np

from fdhist.errors import DegenerateBinWidth

logger = logging.getLogger(__name__)


class BinWidth(NamedTuple):
    n: int
    p25: float
    p75: float
    width: float


def get_quantile(values, percent):
    """
    Returns the value at index floor(percent * n / 100) of the sorted array
    values. percent is an integer so the index is exact.
    """
    n = len(values)
    return float(values[(percent * n) // 100])


def get_binw(values):
    arr = np.asarray(values, dtype=np.float64)
    n = len(arr)
    if n == 0:
        raise DegenerateBinWidth(0)
    p25 = get_quantile(arr, 25)
    p75 = get_quantile(arr, 75)
    width = float(2 * (p75 - p25) / np.cbrt(n))
    if not np.isfinite(width) or width <= 0:
        raise DegenerateBinWidth(n, p25, p75, width)
    return BinWidth(n, p25, p75, width)


def summarize(values, binw):
    vmin = float(values[0])
    vmax = float(values[-1])
    return {
        "n": binw.n,
        "p25": binw.p25,
        "p75": binw.p75,
        "bin_width": binw.width,
        "min": vmin,
        "max": vmax,
        "num_bins": (vmax - vmin) / binw.width,
    }


def log_summary(stats):
    for key, value in stats.items():
        fmt = "%d" if key == "n" else "%g"
        logger.info("%s = %s", key, fmt % value)
