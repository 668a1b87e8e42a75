"""Shared pytest fixtures for catname tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from catname.domain.scope import ScopeKey
from catname.infrastructure.database.engine import init_database
from catname.infrastructure.repositories.category import SqlCategoryRepository


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path / "catname.db")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def scope() -> ScopeKey:
    return ScopeKey(shop_id=1, language_id=1)


@pytest.fixture
def repository(db_engine: Engine) -> SqlCategoryRepository:
    return SqlCategoryRepository(db_engine)


@pytest.fixture
def catalog(repository: SqlCategoryRepository, scope: ScopeKey) -> dict[str, int]:
    """Seed a small tree with two categories named "Shoes".

    Home
    ├── Men
    │   └── Shoes
    ├── Women
    │   └── Shoes
    └── Boots
    """
    home = repository.add_category("Home", scope)
    men = repository.add_category("Men", scope, parent_id=home)
    women = repository.add_category("Women", scope, parent_id=home)
    return {
        "home": home,
        "men": men,
        "women": women,
        "men_shoes": repository.add_category("Shoes", scope, parent_id=men),
        "women_shoes": repository.add_category("Shoes", scope, parent_id=women),
        "boots": repository.add_category("Boots", scope, parent_id=home),
    }


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp directory with no inherited config.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.delenv("CATNAME_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
