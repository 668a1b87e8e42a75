"""Command group: duplicate-name cache maintenance."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from catname.commands._base import CatGroup

if TYPE_CHECKING:
    from catname.commands._context import AppContext


@click.group(cls=CatGroup, examples="  catname cache clear")
def cache() -> None:
    """Manage the duplicate-name cache."""


@cache.command(examples="  catname cache clear")
@click.pass_obj
def clear(app: AppContext) -> None:
    """Drop cached duplicate-name lists.

    Run after renaming or adding categories; cached lists are never
    refreshed on their own.
    """
    app.emit(app.category_service().clear_cache())
