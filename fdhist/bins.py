# Single forward sweep over the sorted pool.
#
# Bins are half-open, [bottom, bottom + width), and shared by every source.
# Bin k spans [origin + k * width, origin + (k + 1) * width) where origin is
# the smallest value, so every source sees the same sequence of bounds.

import logging
import math
from typing import NamedTuple

from fdhist.errors import DegenerateBinWidth

logger = logging.getLogger(__name__)


class Row(NamedTuple):
    bottom: float
    count: int


class BinCursor:
    """
    Current bin of the sweep and the per-source counts collected in it.

    flush() appends one Row per source to the matching list in rows and
    resets the counts. Zero counts are written only when emit_zero_bins is
    set; otherwise add() jumps straight over empty bins.
    """

    def __init__(self, origin, width, source_ids, emit_zero_bins=False):
        self.origin = origin
        self.width = width
        self.emit_zero_bins = emit_zero_bins
        self.counts = {who: 0 for who in sorted(source_ids)}
        self.rows = {who: [] for who in self.counts}
        self.move_to(0)

    def bound(self, index):
        return self.origin + index * self.width

    def move_to(self, index):
        self.index = index
        self.bottom = self.bound(index)
        self.top = self.bound(index + 1)
        if not self.top > self.bottom:
            raise DegenerateBinWidth(None, width=self.width, bottom=self.bottom)

    def bin_of(self, value):
        offset = (value - self.origin) / self.width
        if not math.isfinite(offset):
            raise DegenerateBinWidth(None, width=self.width, bottom=self.bottom)
        index = math.floor(offset)
        # The quotient may round across a bound; settle on the compared bounds.
        while self.bound(index + 1) <= value:
            index += 1
        while index > 0 and self.bound(index) > value:
            index -= 1
        return index

    def add(self, value, who):
        if value >= self.top:
            self.flush()
            target = self.bin_of(value)
            if self.emit_zero_bins:
                for index in range(self.index + 1, target):
                    self.move_to(index)
                    self.flush()
            self.move_to(target)
        self.counts[who] += 1

    def flush(self):
        for who, count in self.counts.items():
            if count or self.emit_zero_bins:
                self.rows[who].append(Row(self.bottom, count))
            self.counts[who] = 0


def aggregate(values, sources, bin_width, source_ids, emit_zero_bins=False):
    """
    Counts values per source into bins of bin_width.

    values must be sorted ascending and sources holds the matching source id
    of each value. Returns a dict mapping every id in source_ids to its list
    of Rows in increasing order of bottom.
    """
    if not math.isfinite(bin_width) or bin_width <= 0:
        raise DegenerateBinWidth(len(values), width=bin_width)
    if len(values) == 0:
        return {who: [] for who in sorted(source_ids)}

    cursor = BinCursor(float(values[0]), bin_width, source_ids, emit_zero_bins)
    for value, who in zip(values, sources):
        cursor.add(float(value), int(who))
    # Output the final bin.
    cursor.flush()
    logger.debug("%d bins, last starts at %g", cursor.index + 1, cursor.bottom)
    return cursor.rows
