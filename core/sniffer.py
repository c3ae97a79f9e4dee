"""
Encoding classification for raw byte buffers.

This module provides the encoding sniffer used by the file auditor. The sniffer
looks at a complete byte buffer and returns exactly one `EncodingKind`. It never
fails: anything it cannot recognise as text is reported as ExtendedAscii or,
when NUL bytes are present, as binary (NO_TEXT).

Detection order:

1.  **Byte-order mark**: UTF-16 LE/BE and UTF-8 signatures.
2.  **UTF-8 validity**: a strict structural scan of lead and continuation bytes.
    A buffer that only contains 7-bit bytes is ASCII.
3.  **UTF-16 newlines**: CR/LF characters encoded as two-byte units reveal the
    byte order of BOM-less UTF-16.
4.  **UTF-16 NUL distribution**: mostly-Latin UTF-16 text has NUL in one half
    of nearly every code unit.
5.  **Fallback**: ExtendedAscii, or NO_TEXT if the buffer contains NUL bytes.
"""

from typing import Protocol

from constants import (
    BOMS,
    UTF16_EXPECTED_NULL_PERCENT,
    UTF16_UNEXPECTED_NULL_PERCENT,
)
from models import EncodingKind

_NEWLINE_BYTES = (0x0A, 0x0D)


class EncodingSniffer(Protocol):
    """Protocol for classifying a byte buffer into an `EncodingKind`."""

    def classify(self, data: bytes) -> EncodingKind:
        """
        Classify a byte buffer.

        Implementations must be pure, total and deterministic: the same buffer
        always yields the same classification and no input raises.
        """


class TextEncodingSniffer:
    """
    Heuristic encoding sniffer for BOM, ASCII, UTF-8 and UTF-16 text.

    Attributes:
        null_suggests_binary: If True, NUL bytes in a buffer that is not UTF-16
            make it binary. If False, such buffers fall back to ExtendedAscii.
        utf16_expected_null_percent: Minimum share of code units that must carry a
            NUL in their high byte for BOM-less UTF-16 detection.
        utf16_unexpected_null_percent: Maximum share of code units that may carry a
            NUL in their low byte for BOM-less UTF-16 detection.
    """

    def __init__(
        self,
        null_suggests_binary: bool = True,
        utf16_expected_null_percent: int = UTF16_EXPECTED_NULL_PERCENT,
        utf16_unexpected_null_percent: int = UTF16_UNEXPECTED_NULL_PERCENT,
    ):
        if not 0 <= utf16_unexpected_null_percent <= 100:
            raise ValueError("utf16_unexpected_null_percent must be between 0 and 100")
        if not 0 <= utf16_expected_null_percent <= 100:
            raise ValueError("utf16_expected_null_percent must be between 0 and 100")

        self.null_suggests_binary = null_suggests_binary
        self.utf16_expected_null_percent = utf16_expected_null_percent
        self.utf16_unexpected_null_percent = utf16_unexpected_null_percent

    def classify(self, data: bytes) -> EncodingKind:
        """
        Classify a byte buffer.

        Args:
            data: The complete content of a file.

        Returns:
            The detected EncodingKind. An empty buffer is ASCII.
        """
        for detect in (
            check_bom,
            self._check_utf8,
            check_utf16_newlines,
            self._check_utf16_ascii,
        ):
            encoding = detect(data)
            if encoding is not None:
                return encoding

        if b"\x00" not in data:
            return EncodingKind.EXTENDED_ASCII

        if self.null_suggests_binary:
            return EncodingKind.NO_TEXT
        return EncodingKind.EXTENDED_ASCII

    def _check_utf8(self, data: bytes) -> EncodingKind | None:
        """
        Check whether the buffer is structurally valid UTF-8.

        Returns:
            ASCII if only 7-bit bytes were seen, UTF8_NO_BOM if multi-byte
            sequences were seen and all of them were well formed, or None if the
            buffer is not UTF-8 (or contains NUL while NUL suggests binary).
        """
        only_ascii = True
        pos = 0
        size = len(data)

        while pos < size:
            ch = data[pos]
            pos += 1

            if ch == 0 and self.null_suggests_binary:
                return None

            if ch <= 0x7F:
                more = 0
            elif 0xC2 <= ch <= 0xDF:
                more = 1
            elif 0xE0 <= ch <= 0xEF:
                more = 2
            elif 0xF0 <= ch <= 0xF4:
                more = 3
            else:
                return None

            # A truncated sequence at the very end of the buffer is tolerated
            while more and pos < size:
                only_ascii = False
                ch = data[pos]
                pos += 1
                if not 0x80 <= ch <= 0xBF:
                    return None
                more -= 1

        return EncodingKind.ASCII if only_ascii else EncodingKind.UTF8_NO_BOM

    def _check_utf16_ascii(self, data: bytes) -> EncodingKind | None:
        """
        Detect BOM-less UTF-16 from the distribution of NUL bytes.

        Text made of characters below U+0100 has a NUL in the high byte of every
        code unit: the odd offsets for little endian, the even offsets for big
        endian.

        Returns:
            UTF16_LE_NO_BOM, UTF16_BE_NO_BOM, or None if the distribution is
            inconclusive.
        """
        size = len(data)
        if size < 2:
            return None

        even_nulls = data[0::2].count(0)
        odd_nulls = data[1::2].count(0)

        even_ratio = (even_nulls * 2.0) / size
        odd_ratio = (odd_nulls * 2.0) / size
        expected = self.utf16_expected_null_percent / 100.0
        unexpected = self.utf16_unexpected_null_percent / 100.0

        if even_ratio < unexpected and odd_ratio > expected:
            return EncodingKind.UTF16_LE_NO_BOM

        if odd_ratio < unexpected and even_ratio > expected:
            return EncodingKind.UTF16_BE_NO_BOM

        return None


def check_bom(data: bytes) -> EncodingKind | None:
    """Return the encoding announced by a leading byte-order mark, if any."""
    for bom, encoding in BOMS:
        if data.startswith(bom):
            return encoding
    return None


def check_utf16_newlines(data: bytes) -> EncodingKind | None:
    """
    Detect BOM-less UTF-16 from CR and LF encoded as two-byte units.

    Only complete code units are inspected. If newline units are found in a
    single byte order the buffer is UTF-16 in that order; if they are found in
    both orders, or not at all, the result is inconclusive.
    """
    le_control_chars = 0
    be_control_chars = 0

    for pos in range(0, len(data) - 1, 2):
        first, second = data[pos], data[pos + 1]
        if first == 0 and second in _NEWLINE_BYTES:
            be_control_chars += 1
        elif second == 0 and first in _NEWLINE_BYTES:
            le_control_chars += 1

    if le_control_chars and not be_control_chars:
        return EncodingKind.UTF16_LE_NO_BOM
    if be_control_chars and not le_control_chars:
        return EncodingKind.UTF16_BE_NO_BOM
    return None


class MockEncodingSniffer:
    """
    Mock implementation of EncodingSniffer for testing.

    Always returns the configured classification and records every buffer it
    was asked to classify.
    """

    def __init__(self, return_value: EncodingKind = EncodingKind.ASCII):
        self.return_value = return_value

        # Track calls for test inspection
        self.classify_calls: list[bytes] = []

    def classify(self, data: bytes) -> EncodingKind:
        self.classify_calls.append(data)
        return self.return_value
