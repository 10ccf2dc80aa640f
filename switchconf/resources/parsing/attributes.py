"""Line-pattern attribute extraction within a single section."""

from __future__ import annotations

import re


def _compile(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern, re.MULTILINE)


def parse_scalar(pattern: str | re.Pattern[str], section: str) -> str:
    """Return the first capture group of the first line matching *pattern*.

    Args:
        pattern: Regex with one capture group; compiled with ``re.MULTILINE``
            so ``^``/``$`` anchor to section lines.
        section: Section text as returned by the section extractor.

    Returns:
        The captured value (surrounding whitespace stripped) or ``""``.
    """
    if not section:
        return ""
    match = _compile(pattern).search(section)
    if not match:
        return ""
    return match.group(1).strip()


def parse_list(pattern: str | re.Pattern[str], section: str) -> list[str]:
    """Return one value per line matching *pattern*, in file order.

    Duplicates are kept.
    """
    if not section:
        return []
    return [m.group(1).strip() for m in _compile(pattern).finditer(section)]
