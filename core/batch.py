"""
Batch auditing of many files.

Each file is audited independently by a shared, stateless FileAuditor. With
more than one worker the audits run on a thread pool; the report always keeps
the order in which the paths were given so that output is reproducible.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable

from constants import DEFAULT_MAX_WORKERS
from core.auditor import FileAuditor
from core.exceptions import FileReadError
from core.models import AuditFailure, AuditResult, BatchReport
from ui.progress_display import ProgressDisplay, ProgressState, RichProgressDisplay

logger = logging.getLogger(__name__)


def audit_file(auditor: FileAuditor, file_path: Path) -> AuditResult | AuditFailure:
    """
    Audit one file, converting a read failure into an AuditFailure.

    Only FileReadError is captured. Anything else (an UnknownEncodingError for
    instance) is a programming error and propagates.
    """
    try:
        return auditor.audit(file_path)
    except FileReadError as e:
        logger.debug("Could not read %s: %s", file_path, e.message)
        return AuditFailure(file_path=file_path, error=e)


def audit_paths(
    paths: Iterable[Path],
    auditor: FileAuditor | None = None,
    max_workers: int = DEFAULT_MAX_WORKERS,
    progress_display: ProgressDisplay | None = None,
) -> BatchReport:
    """
    Audit every path and collect the outcomes in input order.

    Args:
        paths: Files to audit, typically produced by the filesystem traversal.
        auditor: Optional auditor. Defaults to a FileAuditor with default settings.
        max_workers: Number of worker threads. Values below 2 audit the files
            sequentially in the calling thread.
        progress_display: Optional progress display. Defaults to a Rich progress bar.

    Returns:
        BatchReport with one entry per path.

    Note:
        If the run is interrupted (e.g. KeyboardInterrupt), audits that have not
        started yet are cancelled while audits already in flight are allowed to
        finish before the exception propagates.
    """
    auditor = auditor if auditor is not None else FileAuditor()
    display = progress_display if progress_display is not None else RichProgressDisplay()
    files = list(paths)
    report = BatchReport()

    with display as rpd:
        rpd.on_start("Auditing line endings...", len(files))

        if max_workers < 2 or len(files) < 2:
            for file_path in files:
                report.append(audit_file(auditor, file_path))
                rpd.on_update(advance=1)
        else:
            executor = ThreadPoolExecutor(
                max_workers=max_workers, thread_name_prefix="eolaudit-worker"
            )
            try:
                futures = [
                    executor.submit(audit_file, auditor, file_path)
                    for file_path in files
                ]
                for future in futures:
                    report.append(future.result())
                    rpd.on_update(advance=1)
            finally:
                executor.shutdown(wait=True, cancel_futures=True)

        failed = len(report.failures)
        if failed:
            rpd.on_complete(
                f"Audited {len(files) - failed} files, {failed} unreadable.",
                len(files),
                ProgressState.WARNING,
            )
        else:
            rpd.on_complete(f"Audited {len(files)} files.", len(files))

    logger.debug(
        "Batch finished: %d audited, %d failed", len(report.results), len(report.failures)
    )
    return report
