"""
Console report for audit results.

Each reported file is printed as a small block::

    File: docs/readme.txt
    Encoding: UTF-8
    Lines: 12    CRLF: 7    LF: 5    CR: 0
    Result: INCONSISTENCE!

By default only inconsistent files are reported. Unreadable files are printed
as warnings, and an optional summary table closes the report.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core.models import AuditFailure, AuditResult, BatchReport
from utils import console as default_console

PERFECT = "PERFECT!"
INCONSISTENT = "INCONSISTENCE!"
BINARY = "BINARY"


def should_report(result: AuditResult, show_all: bool = False) -> bool:
    """Only inconsistent files are reported unless show_all is set."""
    return show_all or not result.is_consistent


def verdict_label(result: AuditResult) -> str:
    if result.is_binary:
        return BINARY
    return PERFECT if result.is_consistent else INCONSISTENT


def print_result(result: AuditResult, console: Console | None = None) -> None:
    """Print the report block of a single audited file."""
    out = console if console is not None else default_console
    tally = result.tally
    verdict = verdict_label(result)
    color = {PERFECT: "green", INCONSISTENT: "bold red", BINARY: "dim"}[verdict]

    out.print(f"File: [cyan]{escape(str(result.file_path))}[/cyan]", soft_wrap=True)
    out.print(f"Encoding: {result.encoding_kind}")
    out.print(
        f"Lines: {tally.total_breaks}\tCRLF: {tally.crlf_breaks}"
        f"\tLF: {tally.lf_breaks}\tCR: {tally.cr_breaks}"
    )
    out.print(f"Result: [{color}]{verdict}[/{color}]")
    out.print()


def print_failure(failure: AuditFailure, console: Console | None = None) -> None:
    """Print a warning line for a file that could not be read."""
    out = console if console is not None else default_console
    out.print(
        f"[yellow]⚠ Warning:[/yellow] {escape(failure.error.message)}",
        soft_wrap=True,
    )


def print_report(
    report: BatchReport, show_all: bool = False, console: Console | None = None
) -> None:
    """
    Print every reportable entry of a batch in order.

    Args:
        report: The batch outcome.
        show_all: Also print consistent and binary files.
        console: Optional console. Defaults to the shared stdout console.
    """
    for entry in report.entries:
        if isinstance(entry, AuditFailure):
            print_failure(entry, console)
        elif should_report(entry, show_all):
            print_result(entry, console)


def build_summary_table(report: BatchReport) -> Table:
    results = report.results
    binary = len(report.binary)
    inconsistent = len(report.inconsistent)

    table = Table(title="Line ending audit", title_justify="left")
    table.add_column("Files audited", justify="right")
    table.add_column("Consistent", justify="right", style="green")
    table.add_column("Inconsistent", justify="right", style="red")
    table.add_column("Binary", justify="right", style="dim")
    table.add_column("Unreadable", justify="right", style="yellow")
    table.add_row(
        str(len(results)),
        str(len(results) - inconsistent - binary),
        str(inconsistent),
        str(binary),
        str(len(report.failures)),
    )
    return table


def print_summary(report: BatchReport, console: Console | None = None) -> None:
    out = console if console is not None else default_console
    out.print(build_summary_table(report))
