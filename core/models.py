"""
Core data models for the audit pipeline.

This module defines the immutable results produced when a file is decoded and
its line breaks are tallied, plus the container for a whole batch run.
"""

from dataclasses import dataclass, field
from pathlib import Path

from core.exceptions import FileReadError
from models import EncodingKind


@dataclass(frozen=True)
class LineBreakTally:
    """
    Exact counts of the line breaks found in a decoded text.

    Each break is counted once, as exactly one of the three kinds, so
    ``total_breaks == crlf_breaks + lf_breaks + cr_breaks`` always holds.

    Attributes:
        crlf_breaks: Number of ``\\r\\n`` pairs.
        lf_breaks: Number of ``\\n`` not preceded by ``\\r``.
        cr_breaks: Number of ``\\r`` not followed by ``\\n``.
    """

    crlf_breaks: int = 0
    lf_breaks: int = 0
    cr_breaks: int = 0

    def __post_init__(self):
        if min(self.crlf_breaks, self.lf_breaks, self.cr_breaks) < 0:
            raise ValueError("Line break counts cannot be negative")

    @property
    def total_breaks(self) -> int:
        return self.crlf_breaks + self.lf_breaks + self.cr_breaks

    @property
    def has_breaks(self) -> bool:
        return self.total_breaks > 0


@dataclass(frozen=True)
class AuditResult:
    """
    Outcome of auditing a single file.

    Attributes:
        file_path: The audited file.
        encoding_kind: The classification reported by the encoding sniffer.
        tally: Line break counts. All zero for binary files.
        is_consistent: True when the file uses a single line-ending style
            (or has no line breaks at all).
    """

    file_path: Path
    encoding_kind: EncodingKind
    tally: LineBreakTally
    is_consistent: bool

    @property
    def is_binary(self) -> bool:
        return self.encoding_kind is EncodingKind.NO_TEXT


@dataclass(frozen=True)
class AuditFailure:
    """A file whose bytes could not be read, with the error that was raised."""

    file_path: Path
    error: FileReadError


@dataclass
class BatchReport:
    """
    Ordered outcome of a batch run.

    ``entries`` preserves traversal order and mixes results with failures so
    the console report can be printed in a reproducible order.
    """

    entries: list[AuditResult | AuditFailure] = field(default_factory=list)

    def append(self, entry: AuditResult | AuditFailure) -> None:
        self.entries.append(entry)

    @property
    def results(self) -> list[AuditResult]:
        return [e for e in self.entries if isinstance(e, AuditResult)]

    @property
    def failures(self) -> list[AuditFailure]:
        return [e for e in self.entries if isinstance(e, AuditFailure)]

    @property
    def inconsistent(self) -> list[AuditResult]:
        return [r for r in self.results if not r.is_consistent]

    @property
    def binary(self) -> list[AuditResult]:
        return [r for r in self.results if r.is_binary]
