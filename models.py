"""
Type definitions and data models used across the eolaudit CLI application.

This module contains shared enums that are used throughout the codebase for
type safety and consistency, both by the core pipeline and the console report.
"""

from enum import StrEnum


class EncodingKind(StrEnum):
    """
    Closed set of encoding classifications produced by the encoding sniffer.

    Exactly one member applies to any byte buffer. The enum values are the
    human-readable names printed in the console report.
    """

    NO_TEXT = "Binary"
    ASCII = "ASCII"
    EXTENDED_ASCII = "ANSI"
    UTF8_BOM = "UTF-8 (BOM)"
    UTF8_NO_BOM = "UTF-8"
    UTF16_LE_BOM = "UTF-16 LE (BOM)"
    UTF16_LE_NO_BOM = "UTF-16 LE"
    UTF16_BE_BOM = "UTF-16 BE (BOM)"
    UTF16_BE_NO_BOM = "UTF-16 BE"


class LineEndingStyle(StrEnum):
    """
    The line-terminator convention a decoded text uses.

    MIXED is reported when more than one kind of break is present.
    """

    CRLF = "CRLF"
    LF = "LF"
    CR = "CR"
    MIXED = "Mixed"
