"""
Shared fixtures for the test suite.

This module provides reusable pytest fixtures: mock readers and sniffers,
auditor factories, a capturing Rich console and a small file tree on disk.
"""

import io
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from core.auditor import FileAuditor
from core.exceptions import FileReadError
from core.file_io import MockFileReader
from core.sniffer import MockEncodingSniffer
from models import EncodingKind
from ui.progress_display import NoOpProgressDisplay


@pytest.fixture
def progress_display():
    """Progress display for testing."""
    return NoOpProgressDisplay()


@pytest.fixture
def auditor_factory():
    """Factory for FileAuditor instances backed by a stub sniffer and reader."""

    def _factory(
        data: bytes = b"",
        kind: EncodingKind = EncodingKind.ASCII,
        strict: bool = False,
        code_page: str = "cp1252",
    ) -> FileAuditor:
        return FileAuditor(
            sniffer=MockEncodingSniffer(kind),
            reader=MockFileReader(return_value=data),
            code_page=code_page,
            strict=strict,
        )

    return _factory


@pytest.fixture
def mock_file_reader_factory():
    """Factory for creating MockFileReader instances with file content mappings."""

    def _factory(file_contents: dict[str, bytes]):
        """
        Create a MockFileReader configured with file content mappings.

        Args:
            file_contents: Dictionary mapping file names to their content.
                Files absent from the mapping raise FileReadError.

        Returns:
            MockFileReader instance configured to return content based on file name.
        """

        def read_bytes_side_effect(path: Path) -> bytes:
            if path.name not in file_contents:
                raise FileReadError(
                    message=f"File not found: {path}", file_path=str(path)
                )
            return file_contents[path.name]

        return MockFileReader(read_bytes_fn=read_bytes_side_effect)

    return _factory


@pytest.fixture
def capture_console():
    """A Rich console writing plain text to an in-memory buffer."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None, highlight=False)
    return console, buffer


@pytest.fixture
def sample_tree(tmp_path):
    """
    A small directory tree with consistent, mixed, binary and hidden files.

    Layout:
        root/crlf.txt          CRLF only
        root/lf.txt            LF only
        root/sub/mixed.txt     CRLF + LF
        root/sub/image.bin     binary
        root/.git/config       hidden directory
        root/.hidden.txt       hidden file
    """
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    (root / ".git").mkdir()

    (root / "crlf.txt").write_bytes(b"a\r\nb\r\n")
    (root / "lf.txt").write_bytes(b"a\nb\nc\n")
    (root / "sub" / "mixed.txt").write_bytes(b"a\r\nb\nc")
    (root / "sub" / "image.bin").write_bytes(b"\x00\x01\x02\x00\xff")
    (root / ".git" / "config").write_bytes(b"x\r\ny\n")
    (root / ".hidden.txt").write_bytes(b"x\r\ny\n")
    return root


@pytest.fixture
def tracking_progress_display():
    """Progress display that tracks calls for testing."""
    mock = MagicMock()
    mock.calls = []

    # Track calls in format: (method_name, *args)
    def make_tracker(method_name):
        def tracker(*args, **kwargs):
            if method_name == "update":
                mock.calls.append((method_name, kwargs.get("advance", 1)))
            else:
                mock.calls.append((method_name, *args))

        return tracker

    mock.on_start = make_tracker("start")
    mock.on_update = make_tracker("update")
    mock.on_complete = make_tracker("complete")
    mock.__enter__ = MagicMock(return_value=mock)
    mock.__exit__ = MagicMock(return_value=None)

    return mock
