"""
Tests for the filesystem adapter.

Tests cover:
- is_hidden: dot segments below the root
- iter_audit_paths: recursive sorted traversal, hidden entries skipped,
  file roots, missing roots, unreadable directories
- walk_error: OSError to FileReadError conversion
"""

import os
from pathlib import Path

import pytest

from adapters.filesystem import is_hidden, iter_audit_paths, walk_error
from core.exceptions import FileReadError, InvalidFilePathError


# ============================================================================
# Tests for is_hidden
# ============================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "relative,expected",
    [
        ("a.txt", False),
        ("sub/a.txt", False),
        (".env", True),
        (".git/config", True),
        ("sub/.cache/x", True),
        ("dir.with.dots/file.tar.gz", False),
    ],
)
def test_is_hidden(relative, expected):
    root = Path("/repo")

    assert is_hidden(root / relative, root) is expected


@pytest.mark.unit
def test_is_hidden_ignores_root_segments():
    """A root that itself lives under a dot-directory is still audited."""
    root = Path("/home/user/.config/project")

    assert is_hidden(root / "settings.ini", root) is False


# ============================================================================
# Tests for iter_audit_paths
# ============================================================================


@pytest.mark.integration
def test_iter_audit_paths_skips_hidden_entries(sample_tree):
    paths = list(iter_audit_paths(sample_tree))
    relative = [p.relative_to(sample_tree).as_posix() for p in paths]

    assert relative == ["crlf.txt", "lf.txt", "sub/image.bin", "sub/mixed.txt"]


@pytest.mark.integration
def test_iter_audit_paths_is_lazy(sample_tree):
    iterator = iter_audit_paths(sample_tree)

    assert next(iterator).name == "crlf.txt"


@pytest.mark.integration
def test_iter_audit_paths_file_root(sample_tree):
    file_path = sample_tree / "lf.txt"

    assert list(iter_audit_paths(file_path)) == [file_path]


@pytest.mark.integration
def test_iter_audit_paths_hidden_file_root_is_audited(sample_tree):
    """An explicitly named file is audited even if its name is hidden."""
    file_path = sample_tree / ".hidden.txt"

    assert list(iter_audit_paths(file_path)) == [file_path]


@pytest.mark.integration
def test_iter_audit_paths_empty_directory(tmp_path):
    assert list(iter_audit_paths(tmp_path)) == []


@pytest.mark.integration
def test_iter_audit_paths_missing_root(tmp_path):
    missing = tmp_path / "missing"

    with pytest.raises(InvalidFilePathError) as exc_info:
        list(iter_audit_paths(missing))

    assert exc_info.value.file_path == str(missing)
    assert "does not exist" in exc_info.value.message


# ============================================================================
# Tests for unreadable directories
# ============================================================================


@pytest.fixture
def locked_tree(tmp_path, mocker):
    """A tree whose 'locked' subdirectory cannot be listed."""
    root = tmp_path / "root"
    (root / "locked").mkdir(parents=True)
    (root / "ok.txt").write_bytes(b"a\nb\n")
    (root / "locked" / "mixed.txt").write_bytes(b"a\r\nb\n")

    real_scandir = os.scandir

    def scandir(path):
        if Path(path).name == "locked":
            raise PermissionError(13, "Permission denied", str(path))
        return real_scandir(path)

    mocker.patch("os.scandir", side_effect=scandir)
    return root


@pytest.mark.integration
@pytest.mark.mock
def test_iter_audit_paths_reports_unreadable_directory(locked_tree):
    errors = []

    paths = list(iter_audit_paths(locked_tree, on_error=errors.append))

    assert [p.name for p in paths] == ["ok.txt"]
    assert len(errors) == 1
    assert isinstance(errors[0], FileReadError)
    assert errors[0].file_path == str(locked_tree / "locked")
    assert errors[0].message == f"Permission denied: {locked_tree / 'locked'}"
    assert isinstance(errors[0].original_exception, PermissionError)


@pytest.mark.integration
@pytest.mark.mock
def test_iter_audit_paths_logs_unreadable_directory_by_default(locked_tree, caplog):
    with caplog.at_level("WARNING", logger="adapters.filesystem"):
        paths = list(iter_audit_paths(locked_tree))

    assert [p.name for p in paths] == ["ok.txt"]
    assert "Permission denied" in caplog.text
    assert "locked" in caplog.text


@pytest.mark.unit
def test_walk_error_generic_os_error():
    error = walk_error(OSError(5, "I/O error", "/repo/broken"), Path("/repo"))

    assert error.message == "Failed to list directory: /repo/broken"
    assert error.file_path == "/repo/broken"


@pytest.mark.unit
def test_walk_error_without_filename_uses_root():
    error = walk_error(OSError("boom"), Path("/repo"))

    assert error.file_path == str(Path("/repo"))
