"""CategoryService - catalog operations for the CLI.

This is the calling layer the resolver core leaves error handling to:
every :class:`CatnameError` raised below becomes a failed
:class:`ServiceResult` carrying the error's code and message.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from catname.domain.errors import CatnameError
from catname.services.display_name import DisplayNameResolver, DuplicateNameProvider
from catname.services.result import ServiceResult

if TYPE_CHECKING:
    from catname.domain.scope import ScopeKey
    from catname.infrastructure.cache import CacheStore
    from catname.infrastructure.repositories.category import SqlCategoryRepository

logger = logging.getLogger(__name__)


def _failure(op: str, exc: CatnameError) -> ServiceResult:
    logger.debug("%s failed", op, exc_info=True)
    return ServiceResult.failure(op, exc.code, str(exc), **exc.detail)


class CategoryService:
    """Adds categories and resolves their display names."""

    def __init__(
        self,
        repository: SqlCategoryRepository,
        cache: CacheStore,
        *,
        breadcrumb_separator: str,
    ) -> None:
        self._repository = repository
        self._cache = cache
        self._duplicates = DuplicateNameProvider(repository, cache)
        self._resolver = DisplayNameResolver(repository, cache, breadcrumb_separator)

    def add(self, name: str, scope: ScopeKey, *, parent_id: int | None = None) -> ServiceResult:
        op = "add_category"
        try:
            category_id = self._repository.add_category(name, scope, parent_id=parent_id)
        except CatnameError as exc:
            return _failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": category_id, "name": name, "parent_id": parent_id},
        )

    def display_name(
        self,
        category_id: int,
        scope: ScopeKey,
        *,
        use_cache: bool = True,
    ) -> ServiceResult:
        op = "display_name"
        try:
            name = self._repository.get_category_name(category_id, scope)
            display = self._resolver.build(name, scope, category_id, use_cache=use_cache)
        except CatnameError as exc:
            return _failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": category_id,
                "name": name,
                "display_name": display,
                "disambiguated": display != name,
            },
        )

    def duplicates(self, scope: ScopeKey, *, use_cache: bool = True) -> ServiceResult:
        op = "duplicates"
        try:
            names = self._duplicates.get_duplicate_names(scope, use_cache)
        except CatnameError as exc:
            return _failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "shop_id": scope.shop_id,
                "language_id": scope.language_id,
                "names": list(names),
                "count": len(names),
            },
        )

    def clear_cache(self) -> ServiceResult:
        op = "clear_cache"
        try:
            removed = self._cache.clear()
        except CatnameError as exc:
            return _failure(op, exc)
        return ServiceResult(ok=True, op=op, data={"removed": removed})
