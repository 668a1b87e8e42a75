"""Command: list category names shared within a scope."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from catname.commands._base import CatCommand, scope_options

if TYPE_CHECKING:
    from catname.commands._context import AppContext


@click.command(
    cls=CatCommand,
    examples="""\
  catname duplicates
  catname duplicates --shop 2 --lang 1 --no-cache""",
)
@scope_options
@click.option("--no-cache", is_flag=True, help="Bypass the duplicate-name cache.")
@click.pass_obj
def duplicates(app: AppContext, shop_id: int, language_id: int, no_cache: bool) -> None:
    """List names carried by more than one category."""
    from catname.domain.scope import ScopeKey

    use_cache = app.settings.display.use_cache and not no_cache
    scope = ScopeKey(shop_id=shop_id, language_id=language_id)
    app.emit(app.category_service().duplicates(scope, use_cache=use_cache))
