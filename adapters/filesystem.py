"""
Filesystem adapter for discovering the files to audit.

This module turns the path given on the command line into a lazy stream of
files. Hidden entries (any path segment starting with a dot below the root)
are skipped, which keeps version-control metadata such as ``.git`` out of the
audit.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Generator

from constants import HIDDEN_PREFIX
from core.exceptions import FileReadError, InvalidFilePathError

logger = logging.getLogger(__name__)

WalkErrorHandler = Callable[[FileReadError], None]


def is_hidden(path: Path, root: Path) -> bool:
    """
    Check whether a path contains a hidden segment below the root.

    Args:
        path: The candidate path.
        root: The traversal root. Its own segments are never considered, so
            auditing a directory that itself lives under a dot-directory works.

    Returns:
        bool: True if any segment of path relative to root starts with a dot.
    """
    try:
        relative = path.relative_to(root)
    except ValueError:
        relative = path
    return any(part.startswith(HIDDEN_PREFIX) for part in relative.parts)


def iter_audit_paths(
    root: Path, on_error: WalkErrorHandler | None = None
) -> Generator[Path, None, None]:
    """
    Lazily yield every file to audit under a root.

    A file root yields itself. A directory root is walked recursively in sorted
    order; hidden directories are pruned and hidden files skipped.

    Args:
        root: A file or directory.
        on_error: Called with a FileReadError for every directory that cannot
            be listed. Defaults to logging a warning. The walk carries on with
            the remaining directories either way.

    Yields:
        Path: Each regular file to audit.

    Raises:
        InvalidFilePathError: If root does not exist.
    """
    if root.is_file():
        yield root
        return

    if not root.is_dir():
        raise InvalidFilePathError(
            message=f"Path does not exist: {root}", file_path=str(root)
        )

    handler = on_error if on_error is not None else log_walk_error

    def _on_walk_error(e: OSError) -> None:
        handler(walk_error(e, root))

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_walk_error):
        # Pruning in place stops os.walk from descending into hidden directories
        dirnames[:] = sorted(d for d in dirnames if not d.startswith(HIDDEN_PREFIX))
        for name in sorted(filenames):
            file_path = Path(dirpath) / name
            if not is_hidden(file_path, root) and file_path.is_file():
                yield file_path


def walk_error(e: OSError, root: Path) -> FileReadError:
    """Convert an OSError raised while listing a directory into a FileReadError."""
    dir_path = str(e.filename) if e.filename is not None else str(root)
    if isinstance(e, PermissionError):
        message = f"Permission denied: {dir_path}"
    else:
        message = f"Failed to list directory: {dir_path}"
    return FileReadError(message=message, file_path=dir_path, original_exception=e)


def log_walk_error(error: FileReadError) -> None:
    logger.warning("Skipping unreadable directory. %s", error.message)
