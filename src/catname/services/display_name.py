"""Display names that tell identically named categories apart.

If several categories in one shop/language share a name, showing the bare
name is ambiguous, so the resolver substitutes a short breadcrumb instead:

    "Shoes"  ->  "Men > Shoes"

INVARIANT: nothing here catches or wraps errors. Repository and cache
store failures reach the caller unchanged, and no partial name is
returned.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from catname.domain.breadcrumbs import BreadcrumbFormatter
from catname.infrastructure.cache import build_cache_key

if TYPE_CHECKING:
    from catname.domain.scope import ScopeKey
    from catname.infrastructure.cache import CacheStore
    from catname.infrastructure.repositories.category import CategoryRepository

logger = logging.getLogger(__name__)


class DuplicateNameProvider:
    """Answers which category names are duplicated within a scope.

    Lookups through the cache are read-then-maybe-write with no locking:
    two callers missing on the same scope both fetch and both store, and
    the last write wins. The fetch is deterministic, so this only costs a
    redundant query.
    """

    def __init__(self, repository: CategoryRepository, cache: CacheStore) -> None:
        self._repository = repository
        self._cache = cache

    def get_duplicate_names(self, scope: ScopeKey, use_cache: bool = True) -> list[str]:
        if not use_cache:
            return self._repository.get_duplicate_names(scope)

        key = build_cache_key(scope)
        if self._cache.is_stored(key):
            logger.debug("Duplicate names cache hit: %s", key)
            return self._cache.retrieve(key)

        logger.debug("Duplicate names cache miss: %s", key)
        names = self._repository.get_duplicate_names(scope)
        self._cache.store(key, names)
        return names


class DisplayNameResolver:
    """Resolves the name to display for a category.

    Usage::

        resolver = DisplayNameResolver(repo, InMemoryCacheStore(), " > ")
        resolver.build("Shoes", ScopeKey(shop_id=1, language_id=1), 42)
    """

    def __init__(
        self,
        repository: CategoryRepository,
        cache: CacheStore,
        breadcrumb_separator: str,
    ) -> None:
        self._repository = repository
        self._duplicates = DuplicateNameProvider(repository, cache)
        self._formatter = BreadcrumbFormatter(breadcrumb_separator)

    def build(
        self,
        category_name: str,
        scope: ScopeKey,
        category_id: int,
        use_cache: bool = True,
    ) -> str:
        """Return *category_name*, or a breadcrumb label if the name is shared."""
        if not self._is_duplicate(category_name, scope, use_cache):
            return category_name

        parts = self._repository.get_breadcrumb_parts(category_id, scope.language_id)
        return self._formatter.format(parts)

    def build_with_breadcrumbs(
        self,
        category_name: str,
        scope: ScopeKey,
        breadcrumb_parts: Sequence[str],
        use_cache: bool = True,
    ) -> str:
        """Like :meth:`build`, for callers that already hold the breadcrumb.

        Skips the repository round trip for the breadcrumb parts.
        """
        if not self._is_duplicate(category_name, scope, use_cache):
            return category_name
        return self._formatter.format(breadcrumb_parts)

    def _is_duplicate(self, category_name: str, scope: ScopeKey, use_cache: bool) -> bool:
        duplicates = self._duplicates.get_duplicate_names(scope, use_cache)
        if category_name in duplicates:
            logger.debug("Name %r is shared within %s, using breadcrumb", category_name, scope)
            return True
        return False
