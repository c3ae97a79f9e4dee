"""
Custom exception classes for the eolaudit CLI.

This module defines application-specific exceptions that are raised while
reading files, classifying their encoding, and loading configuration.
These exceptions provide structured error information and diagnostic data
to help with debugging and error reporting.
"""

import os
from typing import Optional


class FileIOError(Exception):
    """
    Base exception for file I/O errors.

    Attributes:
        message: A human-readable error message describing what went wrong.
        file_path: The path of the file involved in the failed operation, if known.
        original_exception: The underlying exception that caused this error, if any.
        diagnostic_info: A dictionary containing diagnostic information including
            exception type, details, and OS name.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.message = message or "An error occurred during file I/O operation"
        super().__init__(self.message)
        self.file_path = file_path
        self.original_exception = original_exception
        self.diagnostic_info = {
            "type": (
                type(original_exception).__name__ if original_exception else "Unknown"
            ),
            "details": str(original_exception) if original_exception else "No details",
            "os_name": os.name,
        }


class FileReadError(FileIOError):
    """
    Raised when the raw bytes of a file cannot be read.

    Covers missing files, permission problems, directories passed where a file
    was expected, and any other OS-level read failure. It aborts the audit of
    that single file only.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message or "Failed to read file",
            file_path=file_path,
            original_exception=original_exception,
        )


class InvalidFilePathError(FileIOError):
    """Raised when a path cannot be audited at all (e.g. it does not exist)."""

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message or "Invalid file path",
            file_path=file_path,
            original_exception=original_exception,
        )


class UnknownEncodingError(Exception):
    """
    Raised when an encoding classification falls outside the known set.

    This indicates a contract violation between the encoding sniffer and the
    codec selector. It is never recovered from: the audit fails loudly instead
    of silently picking a default codec.

    Attributes:
        message: A human-readable error message.
        encoding: The offending classification value.
    """

    def __init__(self, encoding: object, message: Optional[str] = None):
        self.encoding = encoding
        self.message = message or f"Unknown encoding classification: {encoding!r}"
        super().__init__(self.message)


class BinaryContentError(ValueError):
    """Raised when a decoder is requested for content classified as binary."""

    def __init__(self, message: Optional[str] = None):
        self.message = message or "Binary content has no text decoder"
        super().__init__(self.message)


class ConfigError(Exception):
    """
    Raised when the settings file or a settings value is invalid.

    Attributes:
        message: A human-readable error message.
        config_path: The settings file involved, if any.
        original_exception: The underlying exception that caused this error, if any.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        config_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.message = message or "Invalid configuration"
        super().__init__(self.message)
        self.config_path = config_path
        self.original_exception = original_exception


class InvalidCodePageError(ConfigError):
    """Raised when the configured ExtendedAscii code page is not a known codec."""

    def __init__(self, code_page: str, original_exception: Optional[Exception] = None):
        self.code_page = code_page
        super().__init__(
            message=f"Unknown code page: {code_page!r}",
            original_exception=original_exception,
        )
