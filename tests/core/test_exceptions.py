"""
Tests for the exceptions module.

Tests cover:
- FileIOError: base exception for file I/O errors with diagnostic info
- FileReadError / InvalidFilePathError: default messages and inheritance
- UnknownEncodingError: carries the offending classification
- BinaryContentError: ValueError subclass
- ConfigError / InvalidCodePageError: configuration failures
"""

import os

import pytest

from core.exceptions import (
    BinaryContentError,
    ConfigError,
    FileIOError,
    FileReadError,
    InvalidCodePageError,
    InvalidFilePathError,
    UnknownEncodingError,
)


# ============================================================================
# Tests for FileIOError
# ============================================================================


@pytest.mark.unit
def test_file_io_error_default_message():
    """FileIOError should have a default message when none provided."""
    error = FileIOError()
    assert str(error) == "An error occurred during file I/O operation"
    assert error.message == "An error occurred during file I/O operation"
    assert error.file_path is None
    assert error.original_exception is None


@pytest.mark.unit
def test_file_io_error_diagnostic_info_without_exception():
    error = FileIOError()

    assert error.diagnostic_info["type"] == "Unknown"
    assert error.diagnostic_info["details"] == "No details"
    assert error.diagnostic_info["os_name"] == os.name


@pytest.mark.unit
@pytest.mark.parametrize(
    "exception_class,exception_message",
    [
        (OSError, "System error"),
        (PermissionError, "Access denied"),
        (FileNotFoundError, "File not found"),
    ],
)
def test_file_io_error_various_exception_types(exception_class, exception_message):
    original = exception_class(exception_message)
    error = FileIOError(file_path="/tmp/x", original_exception=original)

    assert error.file_path == "/tmp/x"
    assert error.original_exception is original
    assert error.diagnostic_info["type"] == exception_class.__name__
    assert error.diagnostic_info["details"] == exception_message


# ============================================================================
# Tests for FileReadError and InvalidFilePathError
# ============================================================================


@pytest.mark.unit
def test_file_read_error_default_message():
    error = FileReadError()

    assert error.message == "Failed to read file"
    assert isinstance(error, FileIOError)


@pytest.mark.unit
def test_file_read_error_custom_message():
    error = FileReadError(message="Permission denied: a.txt", file_path="a.txt")

    assert str(error) == "Permission denied: a.txt"
    assert error.file_path == "a.txt"


@pytest.mark.unit
def test_invalid_file_path_error():
    error = InvalidFilePathError(file_path="nowhere")

    assert error.message == "Invalid file path"
    assert error.file_path == "nowhere"
    assert isinstance(error, FileIOError)


# ============================================================================
# Tests for encoding errors
# ============================================================================


@pytest.mark.unit
def test_unknown_encoding_error():
    error = UnknownEncodingError("utf-32")

    assert error.encoding == "utf-32"
    assert "utf-32" in str(error)


@pytest.mark.unit
def test_binary_content_error_is_value_error():
    error = BinaryContentError()

    assert isinstance(error, ValueError)
    assert error.message == "Binary content has no text decoder"


# ============================================================================
# Tests for configuration errors
# ============================================================================


@pytest.mark.unit
def test_config_error_defaults():
    error = ConfigError()

    assert error.message == "Invalid configuration"
    assert error.config_path is None
    assert error.original_exception is None


@pytest.mark.unit
def test_invalid_code_page_error():
    original = LookupError("unknown encoding: foo")
    error = InvalidCodePageError("foo", original_exception=original)

    assert isinstance(error, ConfigError)
    assert error.code_page == "foo"
    assert error.message == "Unknown code page: 'foo'"
    assert error.original_exception is original
