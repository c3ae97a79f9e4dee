"""
Application-wide constants and configuration defaults.

This module defines the byte-order marks, sniffer thresholds, codec names and
default settings used throughout the eolaudit CLI application.
"""

from pathlib import Path
from typing import Final, Mapping

from models import EncodingKind

# Byte-order marks, checked in this order. The UTF-16 marks are two bytes long,
# so they are tested before the three-byte UTF-8 mark.
BOMS: Final[tuple[tuple[bytes, EncodingKind], ...]] = (
    (b"\xff\xfe", EncodingKind.UTF16_LE_BOM),
    (b"\xfe\xff", EncodingKind.UTF16_BE_BOM),
    (b"\xef\xbb\xbf", EncodingKind.UTF8_BOM),
)

# Percentage of NUL bytes in the "high" half of each UTF-16 code unit above
# which a buffer is considered UTF-16 text (ASCII-range characters only).
UTF16_EXPECTED_NULL_PERCENT: Final[int] = 70

# Percentage of NUL bytes in the "low" half of each code unit below which the
# buffer still qualifies as UTF-16 text.
UTF16_UNEXPECTED_NULL_PERCENT: Final[int] = 10

# Single-byte code page used for ExtendedAscii ("ANSI") files. Passed explicitly
# to the codec selector so decoding never depends on the host locale.
DEFAULT_CODE_PAGE: Final[str] = "cp1252"

# Python codec names for each decodable encoding. NO_TEXT is absent
# (binary buffers are never decoded) and EXTENDED_ASCII uses the configured
# code page instead of a fixed codec.
CODEC_NAMES: Final[Mapping[EncodingKind, str]] = {
    EncodingKind.ASCII: "ascii",
    EncodingKind.UTF8_BOM: "utf-8-sig",
    EncodingKind.UTF8_NO_BOM: "utf-8-sig",
    EncodingKind.UTF16_LE_BOM: "utf-16-le",
    EncodingKind.UTF16_LE_NO_BOM: "utf-16-le",
    EncodingKind.UTF16_BE_BOM: "utf-16-be",
    EncodingKind.UTF16_BE_NO_BOM: "utf-16-be",
}

# Malformed byte sequences are substituted with U+FFFD instead of raising.
DECODE_ERRORS: Final[str] = "replace"

# Path segments starting with this prefix are treated as hidden and skipped.
HIDDEN_PREFIX: Final[str] = "."

DEFAULT_MAX_WORKERS: Final[int] = 4

CONFIG_DIR: Final[Path] = Path.home() / ".eolaudit"
CONFIG_FILE: Final[Path] = CONFIG_DIR / "settings.json"

USAGE: Final[str] = "Usage: eolaudit <filename>|<dirname>"
