"""
Per-file audit pipeline.

The auditor reads a file's bytes, asks the encoding sniffer to classify them,
decodes the text with the matching codec, tallies the line breaks and derives
the consistency verdict. Apart from the single read it has no side effects, so
one instance can be shared by any number of worker threads.
"""

import logging
from pathlib import Path

from constants import DEFAULT_CODE_PAGE
from core.codec_selector import select_codec, validate_code_page
from core.file_io import FileReader, FilesystemFileReader
from core.line_breaks import count_line_breaks, dominant_style, is_consistent
from core.models import AuditResult, LineBreakTally
from core.sniffer import EncodingSniffer, TextEncodingSniffer
from models import EncodingKind

logger = logging.getLogger(__name__)


class FileAuditor:
    """
    Audits the line endings of individual files.

    Attributes:
        sniffer: Classifies raw bytes into an EncodingKind.
        reader: Reads the raw bytes of a file.
        code_page: Single-byte codec used for ExtendedAscii content.
        strict: If True, text files without any line break are reported as
            inconsistent instead of being let through.
    """

    def __init__(
        self,
        sniffer: EncodingSniffer | None = None,
        reader: FileReader | None = None,
        code_page: str = DEFAULT_CODE_PAGE,
        strict: bool = False,
    ):
        """
        Initialize the auditor.

        Args:
            sniffer: Optional encoding sniffer. Defaults to TextEncodingSniffer.
            reader: Optional file reader. Defaults to FilesystemFileReader.
            code_page: Codec for ExtendedAscii files. Defaults to cp1252.
            strict: Flag text files with zero line breaks as inconsistent.

        Raises:
            InvalidCodePageError: If code_page is not a known codec.
        """
        self.sniffer = sniffer if sniffer is not None else TextEncodingSniffer()
        self.reader = reader if reader is not None else FilesystemFileReader()
        self.code_page = validate_code_page(code_page)
        self.strict = strict

    def audit(self, file_path: Path) -> AuditResult:
        """
        Audit a single file.

        Args:
            file_path: The file to audit.

        Returns:
            The AuditResult for the file.

        Raises:
            FileReadError: If the file's bytes cannot be read.
            UnknownEncodingError: If the sniffer returns a classification outside
                the EncodingKind set.
        """
        data = self.reader.read_bytes(file_path)
        return self.audit_bytes(file_path, data)

    def audit_bytes(self, file_path: Path, data: bytes) -> AuditResult:
        """
        Run the audit pipeline on an in-memory buffer.

        Args:
            file_path: The path reported in the result.
            data: The raw content of the file.

        Returns:
            The AuditResult for the buffer.
        """
        encoding = self.sniffer.classify(data)
        logger.debug("%s classified as %s (%d bytes)", file_path, encoding, len(data))

        if encoding is EncodingKind.NO_TEXT:
            return AuditResult(
                file_path=file_path,
                encoding_kind=encoding,
                tally=LineBreakTally(),
                is_consistent=True,
            )

        decode = select_codec(encoding, self.code_page)
        tally = count_line_breaks(decode(data))
        consistent = is_consistent(tally)
        if self.strict and not tally.has_breaks:
            consistent = False

        logger.debug(
            "%s: %d breaks (CRLF=%d LF=%d CR=%d) style=%s consistent=%s",
            file_path,
            tally.total_breaks,
            tally.crlf_breaks,
            tally.lf_breaks,
            tally.cr_breaks,
            dominant_style(tally),
            consistent,
        )

        return AuditResult(
            file_path=file_path,
            encoding_kind=encoding,
            tally=tally,
            is_consistent=consistent,
        )
