"""
Bug Report Parser
=================
Converts the reviewer model's free-form bug report into BugItem objects.

Pipeline:
    1. Split report on newlines
    2. Drop empty / whitespace-only lines
    3. Number surviving lines 1..N (report position, not source line)
    4. Classify severity: "error" substring (any case) → error, else warning
    5. Strip leading enumeration marker (digits, '-', '.', '*') and trim

Contract:
    - DETERMINISTIC: same report → same BugItems, always.
    - No I/O, no LLM.
    - Best effort: the only malformed input is a blank line.
"""
import re
from typing import List

from buglens.models.bug_item import BugItem

# Matched against the raw line, so leading whitespace keeps the marker.
_MARKER_RE = re.compile(r"^[\d\-.*]+\s*")


def classify_severity(line: str) -> str:
    """Return "error" if the line mentions an error, otherwise "warning"."""
    return "error" if "error" in line.lower() else "warning"


def strip_marker(line: str) -> str:
    """Remove a leading list marker such as "1. ", "- " or "* " and trim."""
    return _MARKER_RE.sub("", line, count=1).strip()


def parse_bugs(text: str) -> List[BugItem]:
    """
    Parse a raw bug report into BugItems, one per non-blank line.

    Parameters
    ----------
    text : str
        Raw text returned by the bug-detection call.

    Returns
    -------
    list[BugItem]
        Ordered findings. ``len(result)`` equals the number of non-blank
        lines in ``text``.
    """
    lines = [line for line in text.split("\n") if line.strip()]
    return [
        BugItem(
            line=index,
            severity=classify_severity(line),
            message=strip_marker(line),
        )
        for index, line in enumerate(lines, start=1)
    ]
