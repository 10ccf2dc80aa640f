"""List reconciliation for multi-valued attributes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def find_diff(first: Sequence[str], second: Iterable[str]) -> list[str]:
    """Return the elements of *first* that are absent from *second*.

    Not symmetric. The result keeps the order of *first*::

        >>> find_diff(["a", "c", "e"], ["c", "d", "f"])
        ['a', 'e']
    """
    exclude = set(second)
    return [item for item in first if item not in exclude]


def reconcile(current: Sequence[str], desired: Sequence[str]) -> tuple[list[str], list[str]]:
    """Compute ``(to_remove, to_add)`` turning *current* into *desired*."""
    return find_diff(current, desired), find_diff(desired, current)
