# Fatal errors of a histogram run. Nothing inside the package recovers from
# them; the command line front end reports them and exits non-zero.


class HistError(Exception):
    """Base class for errors that abort a run."""
    pass


class MalformedValue(HistError):
    """The requested column is missing or not a number on some line."""

    def __init__(self, column, line):
        self.column = column
        self.line = line
        super().__init__("Column %d is not a number in: %s" % (column, line))


class ChannelOpenError(HistError):
    """An input could not be read or an output could not be created."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__("Cannot open %s: %s" % (path, reason))


class DegenerateBinWidth(HistError):

    def __init__(self, n, p25=None, p75=None, width=None, bottom=None):
        self.n = n
        self.p25 = p25
        self.p75 = p75
        self.width = width
        self.bottom = bottom
        if bottom is not None:
            msg = ("Degenerate bin width %r: too small to move a bin bound "
                   "away from %r" % (width, bottom))
        elif n == 0 and width is None:
            msg = "Cannot compute a bin width: no samples"
        elif p25 is None:
            msg = "Degenerate bin width %r" % (width,)
        else:
            msg = ("Degenerate bin width %r from n = %d, p25 = %r, p75 = %r"
                   % (width, n, p25, p75))
        super().__init__(msg)
