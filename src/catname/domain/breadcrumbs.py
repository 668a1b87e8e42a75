"""Breadcrumb labels for categories whose names collide.

A full root-to-leaf path gets long fast and is hard to scan. Picking an
"optimal" unique suffix would need the whole sibling tree, so the label is
always the immediate parent plus the category itself (e.g. ``Men > Shoes``).
"""

from __future__ import annotations

from collections.abc import Sequence

BREADCRUMB_DEPTH = 2


def format_breadcrumb(parts: Sequence[str], separator: str) -> str:
    """Join the last two breadcrumb *parts* with *separator*.

    Fewer parts are joined as-is: ``[]`` gives ``""`` and a single part is
    returned without a separator.
    """
    return separator.join(list(parts)[-BREADCRUMB_DEPTH:])


class BreadcrumbFormatter:
    """Breadcrumb formatter bound to a configured separator."""

    def __init__(self, separator: str) -> None:
        self.separator = separator

    def format(self, parts: Sequence[str]) -> str:
        return format_breadcrumb(parts, self.separator)
