"""Command: create the catname database."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from catname.commands._base import CatCommand

if TYPE_CHECKING:
    from catname.commands._context import AppContext


@click.command(
    "init",
    cls=CatCommand,
    examples="""\
  catname init
  catname -c ./shop/catname.toml init""",
)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create the category database (safe to re-run)."""
    from catname.infrastructure.database.engine import init_database
    from catname.services.result import ServiceResult

    init_database(app.settings.db_path).dispose()
    app.emit(ServiceResult(ok=True, op="init", data={"database": str(app.settings.db_path)}))
