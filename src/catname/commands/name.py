"""Command: resolve the display name of a category."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from catname.commands._base import CatCommand, scope_options

if TYPE_CHECKING:
    from catname.commands._context import AppContext


@click.command(
    cls=CatCommand,
    examples="""\
  catname name 42
  catname name 42 --shop 2 --lang 3
  catname --json name 42 --no-cache""",
)
@click.argument("category_id", type=click.IntRange(min=1))
@scope_options
@click.option("--no-cache", is_flag=True, help="Bypass the duplicate-name cache.")
@click.pass_obj
def name(
    app: AppContext,
    category_id: int,
    shop_id: int,
    language_id: int,
    no_cache: bool,
) -> None:
    """Show the display name of CATEGORY_ID."""
    from catname.domain.scope import ScopeKey

    use_cache = app.settings.display.use_cache and not no_cache
    scope = ScopeKey(shop_id=shop_id, language_id=language_id)
    app.emit(app.category_service().display_name(category_id, scope, use_cache=use_cache))
