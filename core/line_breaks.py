"""
Line break counting and line-ending consistency checks.

A decoded text is scanned once, front to back. A ``\\r`` immediately followed by
``\\n`` is one CRLF break; any other ``\\r`` is a lone CR and any other ``\\n``
is a lone LF. Lines are not counted, only breaks, so an unterminated last line
contributes nothing.
"""

from core.models import LineBreakTally
from models import LineEndingStyle


def count_line_breaks(text: str) -> LineBreakTally:
    """
    Tally the line breaks of a decoded text by kind.

    Args:
        text: The decoded file content.

    Returns:
        LineBreakTally with separate CRLF, LF and CR counts.
    """
    crlf = lf = cr = 0
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        if ch == "\r":
            # CRLF must be matched before the lone CR
            if i + 1 < n and text[i + 1] == "\n":
                crlf += 1
                i += 2
                continue
            cr += 1
        elif ch == "\n":
            lf += 1
        i += 1

    return LineBreakTally(crlf_breaks=crlf, lf_breaks=lf, cr_breaks=cr)


def is_consistent(tally: LineBreakTally) -> bool:
    """
    Decide whether a tally shows a single line-ending convention.

    A text is consistent when at most one of CRLF, lone LF and lone CR occurs.
    A text without any line break has nothing to be inconsistent about and is
    reported as consistent; callers wanting strict auditing check
    ``tally.has_breaks`` as well.
    """
    kinds_present = sum(
        1 for count in (tally.crlf_breaks, tally.lf_breaks, tally.cr_breaks) if count
    )
    return kinds_present <= 1


def dominant_style(tally: LineBreakTally) -> LineEndingStyle | None:
    """
    Name the line-ending convention of a tally.

    Returns:
        The single style in use, MIXED if several are present, or None when the
        text has no line breaks.
    """
    if not tally.has_breaks:
        return None
    if not is_consistent(tally):
        return LineEndingStyle.MIXED
    if tally.crlf_breaks:
        return LineEndingStyle.CRLF
    if tally.lf_breaks:
        return LineEndingStyle.LF
    return LineEndingStyle.CR
