"""Category repository: duplicate-name and breadcrumb lookups.

:class:`CategoryRepository` is the read contract the display-name resolver
consumes. :class:`SqlCategoryRepository` implements it on the SQLAlchemy
schema and adds the few writes the CLI needs to seed a catalog.

Every ``SQLAlchemyError`` leaves this module as a ``RepositoryFailure``.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Protocol

from sqlalchemy import func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from catname.domain.errors import CategoryNotFoundError, RepositoryFailure
from catname.infrastructure.database.schema import categories, category_lang, category_shop

if TYPE_CHECKING:
    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from catname.domain.scope import ScopeKey


class CategoryRepository(Protocol):
    def get_duplicate_names(self, scope: ScopeKey) -> list[str]:
        """Return names carried by more than one category within *scope*."""

    def get_breadcrumb_parts(self, category_id: int, language_id: int) -> list[str]:
        """Return ancestor names, root first, ending with the category itself.

        There is no shop argument: each name comes from the lowest-numbered
        shop that names the category in *language_id*, which may differ
        from the shop being displayed.
        """


@contextmanager
def _translate_errors(action: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        raise RepositoryFailure(f"Failed to {action}: {exc}") from exc


class SqlCategoryRepository:
    """Encapsulates SQL for category names and the category tree."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_duplicate_names(self, scope: ScopeKey) -> list[str]:
        stmt = (
            select(category_lang.c.name)
            .join(
                category_shop,
                (category_shop.c.category_id == category_lang.c.category_id)
                & (category_shop.c.shop_id == category_lang.c.shop_id),
            )
            .where(
                category_lang.c.shop_id == scope.shop_id,
                category_lang.c.language_id == scope.language_id,
            )
            .group_by(category_lang.c.name)
            .having(func.count(category_lang.c.category_id.distinct()) > 1)
            .order_by(category_lang.c.name)
        )
        with _translate_errors(f"fetch duplicate names for {scope}"):
            with self._engine.connect() as conn:
                rows = conn.execute(stmt).fetchall()
        return [str(row.name) for row in rows]

    def get_breadcrumb_parts(self, category_id: int, language_id: int) -> list[str]:
        with _translate_errors(f"fetch breadcrumb for category {category_id}"):
            with self._engine.connect() as conn:
                return self._walk_up(conn, category_id, language_id)

    def _walk_up(self, conn: Connection, category_id: int, language_id: int) -> list[str]:
        parts: list[str] = []
        seen: set[int] = set()
        current: int | None = category_id

        while current is not None:
            if current in seen:
                raise RepositoryFailure(f"Category tree has a cycle at category {current}")
            seen.add(current)

            parent = conn.execute(
                select(categories.c.parent_id).where(categories.c.id == current)
            ).first()
            if parent is None:
                raise CategoryNotFoundError(current)

            # Lowest shop id wins when a category is named in several shops.
            name = conn.execute(
                select(category_lang.c.name)
                .where(
                    category_lang.c.category_id == current,
                    category_lang.c.language_id == language_id,
                )
                .order_by(category_lang.c.shop_id)
                .limit(1)
            ).scalar_one_or_none()
            if name is not None:
                parts.append(str(name))
            current = parent.parent_id

        parts.reverse()
        return parts

    def get_category_name(self, category_id: int, scope: ScopeKey) -> str:
        """Return the name of *category_id* within *scope*."""
        stmt = select(category_lang.c.name).where(
            category_lang.c.category_id == category_id,
            category_lang.c.shop_id == scope.shop_id,
            category_lang.c.language_id == scope.language_id,
        )
        with _translate_errors(f"fetch name of category {category_id}"):
            with self._engine.connect() as conn:
                name = conn.execute(stmt).scalar_one_or_none()
        if name is None:
            raise CategoryNotFoundError(category_id)
        return str(name)

    def add_category(self, name: str, scope: ScopeKey, *, parent_id: int | None = None) -> int:
        """Insert a category named *name* in *scope* and return its id.

        Raises:
            CategoryNotFoundError: If *parent_id* does not exist.
        """
        with _translate_errors(f"add category {name!r}"):
            with self._engine.begin() as conn:
                if parent_id is not None and not self._exists(conn, parent_id):
                    raise CategoryNotFoundError(parent_id)
                result = conn.execute(insert(categories).values(parent_id=parent_id))
                (category_id,) = result.inserted_primary_key
                conn.execute(
                    insert(category_shop).values(category_id=category_id, shop_id=scope.shop_id)
                )
                conn.execute(
                    insert(category_lang).values(
                        category_id=category_id,
                        shop_id=scope.shop_id,
                        language_id=scope.language_id,
                        name=name,
                    )
                )
        return int(category_id)

    def set_name(self, category_id: int, scope: ScopeKey, name: str) -> None:
        """Create or replace the name of *category_id* within *scope*."""
        with _translate_errors(f"rename category {category_id}"):
            with self._engine.begin() as conn:
                if not self._exists(conn, category_id):
                    raise CategoryNotFoundError(category_id)
                linked = conn.execute(
                    select(category_shop.c.category_id).where(
                        category_shop.c.category_id == category_id,
                        category_shop.c.shop_id == scope.shop_id,
                    )
                ).first()
                if linked is None:
                    conn.execute(
                        insert(category_shop).values(
                            category_id=category_id, shop_id=scope.shop_id
                        )
                    )
                updated = conn.execute(
                    update(category_lang)
                    .where(
                        category_lang.c.category_id == category_id,
                        category_lang.c.shop_id == scope.shop_id,
                        category_lang.c.language_id == scope.language_id,
                    )
                    .values(name=name)
                )
                if updated.rowcount == 0:
                    conn.execute(
                        insert(category_lang).values(
                            category_id=category_id,
                            shop_id=scope.shop_id,
                            language_id=scope.language_id,
                            name=name,
                        )
                    )

    @staticmethod
    def _exists(conn: Connection, category_id: int) -> bool:
        row = conn.execute(select(categories.c.id).where(categories.c.id == category_id)).first()
        return row is not None
