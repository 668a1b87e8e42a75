"""AppContext - shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. The database is opened lazily so ``--help`` and
``--version`` never touch it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from catname.config.logging import configure_logging
from catname.output.formatters import format_result

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from catname.config.settings import CatnameSettings
    from catname.infrastructure.cache import CacheStore
    from catname.services.category import CategoryService
    from catname.services.result import ServiceResult


class AppContext:
    """Settings plus lazily built engine and service."""

    def __init__(self, settings: CatnameSettings) -> None:
        self.settings = settings
        self._engine: Engine | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            from catname.infrastructure.database.engine import init_database

            self._engine = init_database(self.settings.db_path)
        return self._engine

    def cache_store(self) -> CacheStore:
        from catname.infrastructure.cache import InMemoryCacheStore, SqlCacheStore

        if self.settings.cache.backend == "memory":
            return InMemoryCacheStore()
        return SqlCacheStore(self.engine)

    def category_service(self) -> CategoryService:
        from catname.infrastructure.repositories.category import SqlCategoryRepository
        from catname.services.category import CategoryService

        return CategoryService(
            SqlCategoryRepository(self.engine),
            self.cache_store(),
            breadcrumb_separator=self.settings.display.breadcrumb_separator,
        )

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def emit(self, result: ServiceResult) -> None:
        """Print a ServiceResult.

        * Success: stdout, normal return.
        * Failure: stderr, exit code 1.
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
