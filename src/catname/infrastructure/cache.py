"""Cache stores for duplicate-name lookups.

Two backends satisfy the :class:`CacheStore` protocol:

- :class:`InMemoryCacheStore` - process-local dict, lives as long as the
  store object.
- :class:`SqlCacheStore` - ``cache_entries`` table, survives between CLI
  invocations. Values are stored as JSON.

Neither store expires entries on its own; entries go away on ``clear()``.
"""

from __future__ import annotations

import copy
import json
import threading
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Protocol

from sqlalchemy import delete, func, select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError

from catname.domain.errors import CacheFailure
from catname.infrastructure.database.schema import cache_entries

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from catname.domain.scope import ScopeKey

DUPLICATE_NAMES_NAMESPACE = "Category::duplicateCategoryNames"


def build_cache_key(scope: ScopeKey, namespace: str = DUPLICATE_NAMES_NAMESPACE) -> str:
    """Return ``{namespace}_shop_{shop}_lang_{lang}`` for *scope*.

    Both ids are integers, so the ``_shop_``/``_lang_`` markers keep keys
    of distinct scopes distinct.
    """
    return f"{namespace}_shop_{scope.shop_id}_lang_{scope.language_id}"


class CacheStore(Protocol):
    def is_stored(self, key: str) -> bool:
        """Return whether a value exists under *key*."""

    def retrieve(self, key: str) -> Any:
        """Return the value stored under *key*."""

    def store(self, key: str, value: Any) -> None:
        """Store *value* under *key*, replacing any previous value."""

    def clear(self) -> int:
        """Drop every entry and return how many were removed."""


class InMemoryCacheStore:
    """Dict-backed cache store, safe to share between threads.

    Values are copied on the way in and out, so callers never share a
    mutable object with the store.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}
        self._lock = threading.Lock()

    def is_stored(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def retrieve(self, key: str) -> Any:
        with self._lock:
            try:
                return copy.deepcopy(self._entries[key])
            except KeyError:
                raise CacheFailure(f"No cache entry for {key!r}") from None

    def store(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = copy.deepcopy(value)

    def clear(self) -> int:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        return count


class SqlCacheStore:
    """Cache store persisted in the ``cache_entries`` table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def is_stored(self, key: str) -> bool:
        stmt = select(func.count()).select_from(cache_entries).where(cache_entries.c.key == key)
        try:
            with self._engine.connect() as conn:
                return bool(conn.execute(stmt).scalar_one())
        except SQLAlchemyError as exc:
            raise CacheFailure(f"Cache lookup failed for {key!r}: {exc}") from exc

    def retrieve(self, key: str) -> Any:
        stmt = select(cache_entries.c.value).where(cache_entries.c.key == key)
        try:
            with self._engine.connect() as conn:
                raw = conn.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise CacheFailure(f"Cache read failed for {key!r}: {exc}") from exc
        if raw is None:
            raise CacheFailure(f"No cache entry for {key!r}")
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise CacheFailure(f"Corrupt cache entry for {key!r}: {exc}") from exc

    def store(self, key: str, value: Any) -> None:
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as exc:
            raise CacheFailure(f"Cannot serialize cache value for {key!r}: {exc}") from exc

        now = datetime.now(UTC).isoformat()
        stmt = sqlite_insert(cache_entries).values(key=key, value=payload, created=now)
        stmt = stmt.on_conflict_do_update(
            index_elements=[cache_entries.c.key],
            set_={"value": payload, "created": now},
        )
        try:
            with self._engine.begin() as conn:
                conn.execute(stmt)
        except SQLAlchemyError as exc:
            raise CacheFailure(f"Cache write failed for {key!r}: {exc}") from exc

    def clear(self) -> int:
        try:
            with self._engine.begin() as conn:
                return conn.execute(delete(cache_entries)).rowcount
        except SQLAlchemyError as exc:
            raise CacheFailure(f"Cache clear failed: {exc}") from exc
