"""
Command line options for bin2txt.

Grammar (the last argument is always the input file):

    bin2txt [-coe] [-<width>] <file>
"""

import logging
from dataclasses import dataclass

from bin2txt.errors import UsageError

logger = logging.getLogger(__name__)

MAX_WIDTH = 8
COE_FLAG = "-coe"

USAGE = """usage: bin2txt [-coe] [-<width>] <file>

  -coe      write a Xilinx .coe initialization file instead of plain text
  -<width>  number of most-significant bits per byte (1-8, default 8)

Writes <file>.txt (or <file>.coe) with one line of '0'/'1' per input byte."""


@dataclass(frozen=True)
class Options:
    width: int = MAX_WIDTH
    coe: bool = False

    def __post_init__(self):
        if self.width < 1:
            raise ValueError(f"width must be at least 1, got {self.width}")
        # Frozen, so clamp through object.__setattr__
        if self.width > MAX_WIDTH:
            object.__setattr__(self, "width", MAX_WIDTH)

    @property
    def suffix(self) -> str:
        return ".coe" if self.coe else ".txt"


@dataclass(frozen=True)
class Invocation:
    options: Options
    source: str


def parse_width(arg: str):
    """Return the width requested by a ``-<digits>`` argument, or None if it is not one."""
    digits = arg[1:]
    if not arg.startswith("-") or not digits.isascii() or not digits.isdigit():
        return None
    significant = digits.lstrip("0")
    if not significant:
        return None
    # Anything past one digit is at least 10; skip int() on huge strings
    if len(significant) > 1:
        return MAX_WIDTH
    return min(int(significant), MAX_WIDTH)


def parse_args(argv) -> Invocation:
    """Parse the arguments after the program name.

    Raises UsageError on a wrong argument count, an unknown or repeated
    flag, or a width of zero.
    """
    if len(argv) < 1:
        raise UsageError("missing input file")

    *flags, source = argv
    coe = False
    width = MAX_WIDTH

    for arg in flags:
        if arg == COE_FLAG and not coe:
            coe = True
            continue

        requested = parse_width(arg)
        if requested is None:
            raise UsageError(f"unexpected argument {arg!r}")
        width = requested

    options = Options(width=width, coe=coe)
    logger.debug("Parsed options: width=%d coe=%s source=%s", options.width, options.coe, source)
    return Invocation(options=options, source=source)
