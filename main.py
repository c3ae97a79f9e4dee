"""
eolaudit CLI Entry Point.

This module implements the command-line interface of eolaudit, a tool that
audits text files for mixed line endings. Given a file or a directory it
detects the character encoding of every file, decodes it, counts its CRLF,
LF and CR line breaks, and reports each file that mixes conventions.

The pipeline operates in three stages:

1.  **Discovery**: A directory argument is walked recursively, skipping hidden
    entries (any path segment starting with a dot). A file argument is audited
    on its own.
2.  **Audit**: Every file is read, classified by the encoding sniffer, decoded
    with the matching codec and scanned once for line breaks. Files are audited
    concurrently on a thread pool; the report keeps traversal order.
3.  **Report**: Inconsistent files (or all files with ``--show-all``) are
    printed, unreadable files are listed as warnings, and a summary table closes
    directory audits.

Usage:
    Run directly as a script or via the installed entry point.

    $ python main.py path/to/repo --show-all

Exit codes:
    0 when the audit ran, even if some files could not be read.
    1 when the path argument is missing, more than one path is given, or the
    settings file is invalid.

Dependencies:
    - Typer: CLI argument parsing and app structure.
    - Rich: Terminal UI, colors, progress and logging.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich import print as pr
from rich.markup import escape

from adapters.filesystem import iter_audit_paths
from constants import CONFIG_FILE, USAGE
from core.auditor import FileAuditor
from core.batch import audit_paths
from core.config import AuditSettings, load_settings, save_settings
from core.exceptions import ConfigError, FileReadError
from core.models import AuditFailure
from ui.progress_display import NoOpProgressDisplay, RichProgressDisplay
from ui.report import print_report, print_summary
from utils import configure_logging, err_console

app = typer.Typer(add_completion=False)


@app.command(context_settings={"allow_extra_args": True})
def main(
    ctx: typer.Context,
    path: Annotated[
        Path | None,
        typer.Argument(
            help="File or directory to audit",
            show_default=False,
        ),
    ] = None,
    show_all: Annotated[
        bool,
        typer.Option(
            "--show-all",
            "-a",
            help="Report every file, including consistent and binary ones.",
        ),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Treat text files without any line break as inconsistent.",
        ),
    ] = False,
    code_page: Annotated[
        str | None,
        typer.Option(
            "--code-page",
            help="Codec used for 8-bit (ANSI) files, e.g. cp1252 or latin-1.",
        ),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option("--workers", "-w", min=1, help="Number of worker threads."),
    ] = None,
    no_summary: Annotated[
        bool,
        typer.Option("--no-summary", help="Skip the summary table."),
    ] = False,
    config: Annotated[
        Path,
        typer.Option(
            "--config",
            dir_okay=False,
            help="Settings file (JSON).",
        ),
    ] = CONFIG_FILE,
    save_config: Annotated[
        bool,
        typer.Option(
            "--save-config",
            help="Save --code-page and --workers as defaults in the settings file and exit.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging on stderr."),
    ] = False,
):
    """
    Audit the line endings of a file or of every file under a directory.

    Args:
        ctx (typer.Context): Click context, used to detect extra positional arguments.
        path (Path | None): The file or directory to audit.
        show_all (bool): Report consistent and binary files too.
        strict (bool): Flag text files that have no line break at all.
        code_page (str | None): Codec for ExtendedAscii files. Overrides the settings file.
        workers (int | None): Thread count. Overrides the settings file.
        no_summary (bool): Skip the summary table after a directory audit.
        config (Path): The settings file to load.
        save_config (bool): Persist code page and worker count, then exit.
        verbose (bool): Enable debug logging.

    Raises:
        typer.Exit: With code 1 on a malformed invocation or invalid settings.
    """
    configure_logging(verbose)

    try:
        settings = load_settings(config).merged(
            code_page=code_page, max_workers=workers
        )
    except ConfigError as e:
        print_config_err(e)

    if save_config:
        store_settings(settings, config)
        raise typer.Exit(0)

    if path is None or ctx.args:
        pr(USAGE)
        raise typer.Exit(code=1)

    settings = settings.merged(
        show_all=show_all or settings.show_all,
        strict=strict or settings.strict,
        summary=settings.summary and not no_summary,
    )

    try:
        report = run_audit(path, settings)
    except KeyboardInterrupt:
        pr("\n[yellow]Audit interrupted.[/yellow]")
        raise typer.Exit(code=130)
    except Exception as e:  # noqa: BLE001
        # Catch-all for any unexpected errors - ensures users always see
        # a friendly message instead of a raw Python stack trace
        print_unexpected_err(e)

    print_report(report, show_all=settings.show_all)
    if settings.summary and path.is_dir():
        print_summary(report)


def run_audit(path: Path, settings: AuditSettings):
    """
    Audit a single file or a whole directory tree.

    A path that is not a directory is audited as a file, so a missing path
    surfaces as an unreadable-file warning rather than a crash. Directories
    that cannot be listed are reported as unreadable after the audited files.
    """
    auditor = FileAuditor(code_page=settings.code_page, strict=settings.strict)

    if path.is_dir():
        walk_errors: list[FileReadError] = []
        report = audit_paths(
            iter_audit_paths(path, on_error=walk_errors.append),
            auditor,
            max_workers=settings.max_workers,
            progress_display=RichProgressDisplay(console=err_console),
        )
        for error in walk_errors:
            report.append(AuditFailure(file_path=Path(error.file_path), error=error))
        return report

    return audit_paths(
        [path],
        auditor,
        max_workers=1,
        progress_display=NoOpProgressDisplay(),
    )


def store_settings(settings: AuditSettings, config: Path) -> None:
    try:
        save_settings(settings, config)
    except ConfigError as e:
        print_config_err(e)
    pr(f"[green]Config saved to {escape(str(config))}.[/green]")


def print_config_err(e: ConfigError) -> None:
    """
    Displays a user-friendly error message for invalid settings.

    Args:
        e (ConfigError): The exception that was raised, containing the message
            and the settings file involved.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("❌ [bold red]Configuration Error[/bold red]")
    pr(f"The settings could not be loaded: {escape(e.message)}")
    if e.config_path:
        pr(f"Settings file: [yellow]{escape(e.config_path)}[/yellow]")

    pr("\n[yellow]Quick Fix:[/yellow] Fix or delete the settings file, or pass valid options.")
    if e.original_exception:
        pr(f"\nTechnical details: {escape(str(e.original_exception))}")

    raise typer.Exit(code=1) from e


def print_unexpected_err(e: Exception) -> None:
    """
    Displays a user-friendly error message for unexpected errors.

    This catch-all handler ensures that any unhandled exceptions are presented
    to the user in a friendly way, rather than showing a raw Python stack trace.

    Args:
        e (Exception): The unexpected exception that was raised.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("❌ [bold red]Unexpected Error[/bold red]")
    pr("An unexpected error occurred while auditing.")
    pr(f"\n[yellow]Error Type:[/yellow] {type(e).__name__}")
    pr(f"[yellow]Error Message:[/yellow] {escape(str(e))}")

    pr("\n--- PLEASE REPORT THIS ---")
    pr(f"Error Type: {type(e).__name__}")
    pr(f"Error Message: {escape(str(e))}")
    if e.__cause__:
        pr(f"Caused by: {escape(str(e.__cause__))}")

    raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
