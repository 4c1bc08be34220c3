"""
bin2txt command line entry point.

Usage:
    bin2txt [-coe] [-<width>] <file>

Exit status: 0 on success, 1 on a malformed invocation, 2 when the input
file cannot be read, 3 when the output file cannot be written.
"""

import logging
import os
import sys

from bin2txt.errors import Bin2TxtError, UsageError
from bin2txt.expander import convert
from bin2txt.options import USAGE, parse_args

logger = logging.getLogger(__name__)


def setup_logging():
    level = os.getenv("BIN2TXT_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run(argv) -> int:
    try:
        invocation = parse_args(argv)
        dest_path, count = convert(invocation.source, invocation.options)
    except UsageError as exc:
        logger.debug("Invocation rejected: %s", exc)
        print(USAGE, file=sys.stderr)
        return exc.exit_code
    except Bin2TxtError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_code

    print(f"Wrote {count} lines to {dest_path}")
    return 0


def main():
    setup_logging()
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
