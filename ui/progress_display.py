"""
Progress reporting protocol for decoupling UI from the audit pipeline.

This module defines a protocol that allows progress reporting to be abstracted
away from the batch runner, making it easy to test and to swap implementations
(Rich progress bar, no-op).
"""

from enum import StrEnum
from types import TracebackType
from typing import Protocol

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


class ProgressState(StrEnum):
    """
    Progress bar states with their Rich color.

    Attributes:
        IN_PROGRESS: Magenta color for an audit that is still running.
        COMPLETE: Green color for a finished audit.
        WARNING: Yellow color for an audit that finished with unreadable files.
    """

    IN_PROGRESS = "magenta"
    COMPLETE = "green"
    WARNING = "yellow"


class ProgressDisplay(Protocol):
    """
    Protocol for progress reporting.

    The lifecycle is:
    1. Context manager entry (__enter__)
    2. on_start() - Called once at the beginning
    3. on_update() - Called once per audited file
    4. on_complete() - Called once at the end
    5. Context manager exit (__exit__)
    """

    def __enter__(self) -> "ProgressDisplay":
        """Enter the progress context."""

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the progress context."""

    def on_start(self, description: str, total: int | None) -> None:
        """
        Initialize progress reporting for a new batch.

        Args:
            description: Initial description text to display.
            total: Number of files to audit. If None, progress is indeterminate.
        """

    def on_update(self, *, advance: int = 1) -> None:
        """
        Advance the counter.

        Args:
            advance: Number of files audited since the last update.
        """

    def on_complete(
        self,
        description: str,
        completed: int,
        state: ProgressState = ProgressState.COMPLETE,
    ) -> None:
        """
        Mark the batch as complete.

        Args:
            description: Final description text to display.
            completed: Number of files that were audited.
            state: Final color of the description.
        """


class RichProgressDisplay:
    """
    Rich progress bar implementation of ProgressDisplay.

    The bar is transient by default so that it disappears once the audit is
    done and does not interleave with the report.
    """

    def __init__(self, console: Console | None = None, transient: bool = True) -> None:
        """Initialize the display. The Progress instance is created lazily."""
        self._console = console
        self._transient = transient
        self._progress: Progress | None = None
        self._task: TaskID | None = None

    def __enter__(self) -> "RichProgressDisplay":
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self._console,
            transient=self._transient,
        )
        self._progress.__enter__()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._progress:
            self._progress.__exit__(exc_type, exc_val, exc_tb)

    def on_start(self, description: str, total: int | None) -> None:
        """
        Create the progress task.

        Raises:
            RuntimeError: If not used as a context manager.
        """
        progress = self._require_progress()
        self._task = progress.add_task(
            f"[{ProgressState.IN_PROGRESS}]{description}", total=total
        )

    def on_update(self, *, advance: int = 1) -> None:
        """
        Advance the task.

        Raises:
            RuntimeError: If not used as a context manager or if on_start() was
                not called first.
            ValueError: If advance is not positive.
        """
        progress = self._require_progress()
        if self._task is None:
            raise RuntimeError("on_start() must be called before on_update()")

        if advance < 1:
            raise ValueError("advance must be at least 1")

        progress.update(self._task, advance=advance)

    def on_complete(
        self,
        description: str,
        completed: int,
        state: ProgressState = ProgressState.COMPLETE,
    ) -> None:
        """
        Mark the task as complete.

        Raises:
            RuntimeError: If not used as a context manager or if on_start() was
                not called first.
        """
        progress = self._require_progress()
        if self._task is None:
            raise RuntimeError("on_start() must be called before on_complete()")

        progress.update(
            self._task,
            completed=completed,
            description=f"[{state}]{description}",
        )

    def _require_progress(self) -> Progress:
        if not self._progress:
            raise RuntimeError(
                "RichProgressDisplay must be used as a context manager. "
                "Use: with RichProgressDisplay() as rpd:"
            )
        return self._progress


class NoOpProgressDisplay:
    """
    No-op implementation of ProgressDisplay for testing and single-file runs.
    """

    def __enter__(self) -> "NoOpProgressDisplay":
        return self

    def __exit__(self, *args) -> None:
        """Exit the progress context (no-op)."""

    def on_start(self, description: str, total: int | None) -> None:
        """No-op: does nothing."""

    def on_update(self, *, advance: int = 1) -> None:
        """No-op: does nothing."""

    def on_complete(
        self,
        description: str,
        completed: int,
        state: ProgressState = ProgressState.COMPLETE,
    ) -> None:
        """No-op: does nothing."""
