"""
General utility functions for the CLI application.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

console: Console = Console()
err_console: Console = Console(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    """
    Route the standard logging module through Rich.

    Diagnostics go to stderr so they never mix with the report on stdout.

    Args:
        verbose: If True, log at DEBUG level. Otherwise only warnings and errors
            are shown.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=verbose)],
        force=True,
    )
