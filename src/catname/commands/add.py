"""Command: add a category to the catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from catname.commands._base import CatCommand, scope_options

if TYPE_CHECKING:
    from catname.commands._context import AppContext


@click.command(
    cls=CatCommand,
    examples="""\
  catname add Men
  catname add Shoes --parent 1
  catname add Chaussures --parent 1 --shop 1 --lang 2""",
)
@click.argument("category_name")
@click.option("--parent", "parent_id", type=click.IntRange(min=1), default=None, help="Parent id.")
@scope_options
@click.pass_obj
def add(
    app: AppContext,
    category_name: str,
    parent_id: int | None,
    shop_id: int,
    language_id: int,
) -> None:
    """Add a category named CATEGORY_NAME."""
    from catname.domain.scope import ScopeKey

    scope = ScopeKey(shop_id=shop_id, language_id=language_id)
    app.emit(app.category_service().add(category_name, scope, parent_id=parent_id))
