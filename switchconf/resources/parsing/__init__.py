"""Running-configuration text parsing."""

from switchconf.resources.parsing.attributes import parse_list, parse_scalar
from switchconf.resources.parsing.diff import find_diff, reconcile
from switchconf.resources.parsing.sections import find_headers, get_section, header_pattern

__all__ = [
    "get_section",
    "find_headers",
    "header_pattern",
    "parse_scalar",
    "parse_list",
    "find_diff",
    "reconcile",
]
