from pathlib import Path
from typing import Callable, Protocol

from core.exceptions import FileReadError


class FileReader(Protocol):
    """
    Protocol defining the interface for reading raw file contents.

    This protocol allows different implementations for production (filesystem)
    and testing (mocks).
    """

    def read_bytes(self, file_path: Path) -> bytes:
        """
        Read the whole content of a file as bytes.

        Args:
            file_path: The path to the file to read.

        Returns:
            The raw bytes of the file.

        Raises:
            FileReadError: If the file cannot be read for any reason.
        """


class FilesystemFileReader:

    def read_bytes(self, file_path: Path) -> bytes:
        """
        Read the whole content of a file as bytes.

        Nothing is decoded or filtered here; encoding detection works on the
        exact bytes stored on disk.

        Args:
            file_path: The path to the file to read.

        Returns:
            The raw bytes of the file. An empty file yields ``b""``.

        Raises:
            FileReadError: If the file does not exist, is a directory, is not
                readable, or any other I/O error occurs.
        """
        try:
            with open(file_path, "rb") as f:
                return f.read()
        except FileNotFoundError as e:
            raise FileReadError(
                message=f"File not found: {file_path}",
                file_path=str(file_path),
                original_exception=e,
            ) from e
        except PermissionError as e:
            raise FileReadError(
                message=f"Permission denied: {file_path}",
                file_path=str(file_path),
                original_exception=e,
            ) from e
        except IsADirectoryError as e:
            raise FileReadError(
                message=f"Expected a file but found a directory: {file_path}",
                file_path=str(file_path),
                original_exception=e,
            ) from e
        except OSError as e:
            raise FileReadError(
                message=f"Failed to read file: {file_path}",
                file_path=str(file_path),
                original_exception=e,
            ) from e


class MockFileReader:
    """
    Mock implementation of FileReader for testing.

    Returns configurable file contents, allowing tests to control file reading
    behavior without requiring filesystem operations or actual file I/O.
    """

    def __init__(
        self,
        return_value: bytes | None = None,
        read_bytes_fn: Callable[[Path], bytes] | None = None,
    ):
        """
        Initialize MockFileReader with configurable reading behavior.

        Args:
            return_value: If provided, always returns this value regardless of input.
                Takes precedence over read_bytes_fn if both are provided.
            read_bytes_fn: Optional callable that takes a file path and returns file
                content. It may raise FileReadError to simulate unreadable files.
                If both are None, defaults to returning empty bytes.

        Attributes (for test inspection):
            read_bytes_calls: List of file paths passed to read_bytes()
        """
        self.return_value = return_value
        self.read_bytes_fn = read_bytes_fn

        # Track calls for test inspection
        self.read_bytes_calls: list[Path] = []

    def read_bytes(self, file_path: Path) -> bytes:
        """Return the configured content and record the call."""
        self.read_bytes_calls.append(file_path)
        if self.return_value is not None:
            return self.return_value
        if self.read_bytes_fn is not None:
            return self.read_bytes_fn(file_path)
        return b""
