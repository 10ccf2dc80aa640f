"""Indentation-aware section extraction from running-configuration text.

A section is a top-level header line followed by every indented line
below it, e.g.::

    vlan 10
       name BIGDATA
       state active
    !

The block ends at the next unindented line, at a blank line, or at the
end of the text. Headers are only matched in column 0, so nested blocks
such as ``   vlan 20`` under ``router bgp`` are never taken for a resource.
"""

from __future__ import annotations

import re


def _indent(line: str) -> int:
    expanded = line.expandtabs()
    return len(expanded) - len(expanded.lstrip())


def header_pattern(header: str) -> re.Pattern[str]:
    """Compile a pattern matching *header* as a whole, unindented line.

    Trailing text is not allowed, so ``vlan 1`` never matches ``vlan 10``.
    """
    return re.compile(r"^" + re.escape(header.strip()) + r"\s*$")


def get_section(config: str, header: str) -> str:
    """Return the block of *config* that starts with *header*.

    Args:
        config: Full running-configuration text.
        header: Header line as it appears in the config (e.g. ``"vlan 10"``).

    Returns:
        The header line plus its indented members, verbatim (original
        indentation and line breaks kept), or ``""`` if no line matches.
    """
    if not config or not header.strip():
        return ""

    pattern = header_pattern(header)
    lines = config.splitlines(keepends=True)

    for idx, line in enumerate(lines):
        if not pattern.match(line):
            continue

        header_indent = _indent(line)
        block = [line]
        for member in lines[idx + 1 :]:
            if not member.strip() or _indent(member) <= header_indent:
                break
            block.append(member)
        return "".join(block)

    return ""


def find_headers(config: str, pattern: str | re.Pattern[str]) -> list[str]:
    """Return the first capture group of every top-level header matching *pattern*.

    Order is the order of first appearance in *config*; repeated headers
    are reported once.

    Args:
        config: Full running-configuration text.
        pattern: Regex with one capture group, matched against unindented lines.
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    found: dict[str, None] = {}
    for line in config.splitlines():
        if _indent(line) > 0:
            continue
        match = regex.match(line.rstrip())
        if match:
            found.setdefault(match.group(1), None)
    return list(found)
