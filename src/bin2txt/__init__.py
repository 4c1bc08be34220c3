"""Convert binary files into bit-pattern text for HDL memory initialization."""

from bin2txt.errors import Bin2TxtError, DestinationUnavailable, SourceUnavailable, UsageError
from bin2txt.expander import bits_to_byte, byte_to_bits, convert, expand, output_path
from bin2txt.options import Options, parse_args

__version__ = "1.0.0"

__all__ = [
    "Bin2TxtError",
    "DestinationUnavailable",
    "Options",
    "SourceUnavailable",
    "UsageError",
    "bits_to_byte",
    "byte_to_bits",
    "convert",
    "expand",
    "output_path",
    "parse_args",
]
