"""
Expand a binary file into one line of '0'/'1' characters per byte.

The plain text output is suitable for $readmemb. With coe=True the lines
are wrapped in a Xilinx memory initialization (.coe) file:

    memory_initialization_radix=2;
    memory_initialization_vector=
    00000001,
    00000010;

Every line ends in CR LF.
"""

import logging

from bin2txt.errors import DestinationUnavailable, SourceUnavailable
from bin2txt.options import MAX_WIDTH, Options

logger = logging.getLogger(__name__)

EOL = "\r\n"
COE_HEADER = "memory_initialization_radix=2;" + EOL + "memory_initialization_vector=" + EOL


def byte_to_bits(value: int, width: int = MAX_WIDTH) -> str:
    """Return the `width` most-significant bits of `value`, MSB first."""
    bits = []
    mask = 1 << (MAX_WIDTH - 1)
    for _ in range(width):
        bits.append("1" if value & mask else "0")
        mask >>= 1
    return "".join(bits)


def bits_to_byte(bits: str) -> int:
    """Inverse of byte_to_bits: parse an MSB-first bit string."""
    if not 1 <= len(bits) <= MAX_WIDTH or set(bits) - {"0", "1"}:
        raise ValueError(f"Invalid bit string: {bits!r}")
    value = 0
    for bit in bits:
        value = (value << 1) | (bit == "1")
    return value


def iter_with_lookahead(stream):
    """Yield (byte, is_last) for every byte of a binary stream.

    Reads one byte ahead to know whether more input remains; the byte read
    ahead is held and yielded on the next step.
    """
    current = stream.read(1)
    while current:
        ahead = stream.read(1)
        yield current[0], not ahead
        current = ahead


def expand(source, dest, options: Options) -> int:
    """Write the bit lines for every byte of `source` to the text stream `dest`.

    Returns the number of bytes processed.
    """
    count = 0
    if options.coe:
        dest.write(COE_HEADER)

    for value, is_last in iter_with_lookahead(source):
        line = byte_to_bits(value, options.width)
        if options.coe:
            line += ";" if is_last else ","
        dest.write(line + EOL)
        count += 1

    return count


def output_path(source_path: str, options: Options) -> str:
    return str(source_path) + options.suffix


def convert(source_path: str, options: Options):
    """Convert `source_path` into its derived .txt/.coe file.

    The destination is only created once the source is open. Both files
    are closed on every exit path. Returns (dest_path, byte_count).
    """
    dest_path = output_path(source_path, options)

    try:
        source = open(source_path, "rb")
    except OSError as exc:
        raise SourceUnavailable(source_path) from exc

    with source:
        logger.debug("Opened source %s", source_path)
        try:
            dest = open(dest_path, "w", encoding="ascii", newline="")
        except OSError as exc:
            raise DestinationUnavailable(dest_path) from exc

        with dest:
            logger.debug("Writing %s (width=%d, coe=%s)", dest_path, options.width, options.coe)
            count = expand(source, dest, options)

    logger.debug("Expanded %d bytes from %s", count, source_path)
    return dest_path, count
