"""
Mapping from encoding classifications to text decoders.

Every decoder returned here substitutes U+FFFD for malformed byte sequences, so
a corrupt byte never aborts the audit of a whole file. Byte-order marks are
consumed and never appear in the decoded text.
"""

import codecs
from typing import Callable

from constants import CODEC_NAMES, DECODE_ERRORS, DEFAULT_CODE_PAGE
from core.exceptions import (
    BinaryContentError,
    InvalidCodePageError,
    UnknownEncodingError,
)
from models import EncodingKind

Decoder = Callable[[bytes], str]

_BOM_CHAR = "\ufeff"


def validate_code_page(code_page: str) -> str:
    """
    Ensure the given code page is a codec known to Python.

    Args:
        code_page: A codec name such as "cp1252" or "latin-1".

    Returns:
        The canonical codec name.

    Raises:
        InvalidCodePageError: If Python has no codec by that name.
    """
    try:
        return codecs.lookup(code_page).name
    except LookupError as e:
        raise InvalidCodePageError(code_page, original_exception=e) from e


def select_codec(kind: EncodingKind, code_page: str = DEFAULT_CODE_PAGE) -> Decoder:
    """
    Return the decoder for a given encoding classification.

    Args:
        kind: The classification reported by the encoding sniffer.
        code_page: Single-byte codec used for EXTENDED_ASCII content.

    Returns:
        A callable that turns the full byte buffer into text.

    Raises:
        BinaryContentError: If kind is NO_TEXT. Callers must skip decoding for
            binary content instead of asking for a decoder.
        UnknownEncodingError: If kind is not an EncodingKind member.
        InvalidCodePageError: If kind is EXTENDED_ASCII and code_page is unknown.
    """
    if not isinstance(kind, EncodingKind):
        raise UnknownEncodingError(kind)

    if kind is EncodingKind.NO_TEXT:
        raise BinaryContentError()

    if kind is EncodingKind.EXTENDED_ASCII:
        return _make_decoder(validate_code_page(code_page), strip_bom=False)

    codec_name = CODEC_NAMES.get(kind)
    if codec_name is None:
        raise UnknownEncodingError(kind)

    # utf-8-sig removes the mark itself; the endian-specific UTF-16 codecs
    # keep it as U+FEFF.
    return _make_decoder(codec_name, strip_bom=codec_name.startswith("utf-16"))


def _make_decoder(codec_name: str, strip_bom: bool) -> Decoder:
    def decode(data: bytes) -> str:
        text = data.decode(codec_name, errors=DECODE_ERRORS)
        if strip_bom and text.startswith(_BOM_CHAR):
            return text[1:]
        return text

    return decode
