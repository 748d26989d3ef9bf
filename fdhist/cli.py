# Command line front end:
#   fdhist [--column COLUMN] [--min MIN] [--max MAX] [--verbose]
#          [--emit-zero-bins] [INPUT_FILE ...]
# Writes INPUT_FILE.hist for every input file, or reads stdin and writes
# stdout when no files are given.

import argparse
import logging
import sys

from fdhist import __version__
from fdhist.config import HistConfig
from fdhist.errors import HistError
from fdhist.pipeline import run

logger = logging.getLogger("fdhist")

DESCRIPTION = """\
Histogram one column of whitespace-delimited text. The bin width is chosen
automatically as 2 * IQR / cbrt(n) over the values of all inputs together,
and every input gets its own counts over the same bins.
"""


def positive_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError("not an integer: %s" % text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1: %s" % text)
    return value


def real(text):
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError("not a real number: %s" % text)


def build_parser():
    parser = argparse.ArgumentParser(prog="fdhist", description=DESCRIPTION)
    parser.add_argument(
        "--column", type=positive_int, default=1,
        help="read values from this one-based column of each line "
             "(default: %(default)s)")
    parser.add_argument(
        "--min", dest="minimum", type=real, default=None,
        help="ignore lines whose value is less than MIN")
    parser.add_argument(
        "--max", dest="maximum", type=real, default=None,
        help="ignore lines whose value is greater than MAX")
    parser.add_argument(
        "--verbose", action="store_true",
        help="print statistics to standard error")
    parser.add_argument(
        "--emit-zero-bins", action="store_true",
        help="also write bins that hold no values for an input")
    parser.add_argument(
        "--version", action="version", version="%(prog)s " + __version__)
    parser.add_argument(
        "input_files", nargs="*", metavar="INPUT_FILE",
        help="files to read; standard input when none are given")
    return parser


def parse_args(argv=None):
    parser = build_parser()
    args, extra = parser.parse_known_intermixed_args(argv)
    for arg in extra:
        if arg.startswith("-"):
            parser.error(
                "argument %s looks like an unknown option. If it's actually "
                "the name of a file, then prefix it with \"./\"." % arg)
    if extra:
        parser.error("unrecognized arguments: %s" % " ".join(extra))
    try:
        return HistConfig(
            column=args.column,
            minimum=args.minimum,
            maximum=args.maximum,
            verbose=args.verbose,
            emit_zero_bins=args.emit_zero_bins,
            input_files=args.input_files,
        )
    except ValueError as err:
        parser.error(str(err))


def setup_logging(verbose):
    logging.basicConfig(stream=sys.stderr, format="%(message)s")
    logger.setLevel(logging.INFO if verbose else logging.WARNING)


def main(argv=None):
    config = parse_args(argv)
    setup_logging(config.verbose)
    try:
        run(config, sys.stdin, sys.stdout)
    except HistError as err:
        logger.error("fdhist: %s", err)
        return 1
    return 0
