"""
Automatic-width histograms of one column of whitespace-delimited text.
"""
__version__ = '0.1.0'

from fdhist.errors import (  # noqa: F401
    HistError, MalformedValue, ChannelOpenError, DegenerateBinWidth)
from fdhist.config import HistConfig  # noqa: F401
