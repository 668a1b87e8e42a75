"""Tests for DuplicateNameProvider and DisplayNameResolver."""

from __future__ import annotations

from typing import Any

import pytest

from catname.domain.errors import CacheFailure, RepositoryFailure
from catname.domain.scope import ScopeKey
from catname.infrastructure.cache import InMemoryCacheStore, build_cache_key
from catname.services.display_name import DisplayNameResolver, DuplicateNameProvider

SEPARATOR = " > "


class FakeCategoryRepository:
    """Repository double that records calls and can be told to fail."""

    def __init__(
        self,
        duplicates: list[str] | None = None,
        breadcrumbs: list[str] | None = None,
    ) -> None:
        self.duplicates = duplicates if duplicates is not None else []
        self.breadcrumbs = breadcrumbs if breadcrumbs is not None else []
        self.duplicate_calls: list[ScopeKey] = []
        self.breadcrumb_calls: list[tuple[int, int]] = []
        self.fail_with: Exception | None = None
        self.breadcrumb_fail_with: Exception | None = None

    def get_duplicate_names(self, scope: ScopeKey) -> list[str]:
        self.duplicate_calls.append(scope)
        if self.fail_with is not None:
            raise self.fail_with
        return list(self.duplicates)

    def get_breadcrumb_parts(self, category_id: int, language_id: int) -> list[str]:
        self.breadcrumb_calls.append((category_id, language_id))
        if self.breadcrumb_fail_with is not None:
            raise self.breadcrumb_fail_with
        return list(self.breadcrumbs)


class BrokenCacheStore(InMemoryCacheStore):
    def store(self, key: str, value: Any) -> None:
        raise CacheFailure("disk full")


@pytest.fixture
def repo() -> FakeCategoryRepository:
    return FakeCategoryRepository(duplicates=["Shoes"], breadcrumbs=["Home", "Men", "Shoes"])


@pytest.fixture
def cache() -> InMemoryCacheStore:
    return InMemoryCacheStore()


@pytest.fixture
def resolver(repo: FakeCategoryRepository, cache: InMemoryCacheStore) -> DisplayNameResolver:
    return DisplayNameResolver(repo, cache, SEPARATOR)


class TestDuplicateNameProvider:
    def test_without_cache_always_fetches(
        self, repo: FakeCategoryRepository, cache: InMemoryCacheStore, scope: ScopeKey
    ) -> None:
        provider = DuplicateNameProvider(repo, cache)
        provider.get_duplicate_names(scope, use_cache=False)
        provider.get_duplicate_names(scope, use_cache=False)
        assert len(repo.duplicate_calls) == 2

    def test_without_cache_leaves_cache_untouched(
        self, repo: FakeCategoryRepository, cache: InMemoryCacheStore, scope: ScopeKey
    ) -> None:
        DuplicateNameProvider(repo, cache).get_duplicate_names(scope, use_cache=False)
        assert cache.is_stored(build_cache_key(scope)) is False

    def test_without_cache_ignores_stored_value(
        self, repo: FakeCategoryRepository, cache: InMemoryCacheStore, scope: ScopeKey
    ) -> None:
        cache.store(build_cache_key(scope), ["Stale"])
        names = DuplicateNameProvider(repo, cache).get_duplicate_names(scope, use_cache=False)
        assert names == ["Shoes"]

    def test_miss_populates_cache(
        self, repo: FakeCategoryRepository, cache: InMemoryCacheStore, scope: ScopeKey
    ) -> None:
        names = DuplicateNameProvider(repo, cache).get_duplicate_names(scope)
        assert names == ["Shoes"]
        assert cache.retrieve(build_cache_key(scope)) == ["Shoes"]

    def test_hit_skips_repository(
        self, repo: FakeCategoryRepository, cache: InMemoryCacheStore, scope: ScopeKey
    ) -> None:
        provider = DuplicateNameProvider(repo, cache)
        first = provider.get_duplicate_names(scope)
        second = provider.get_duplicate_names(scope)
        assert first == second
        assert len(repo.duplicate_calls) == 1

    def test_hit_returns_stored_value_verbatim(
        self, repo: FakeCategoryRepository, cache: InMemoryCacheStore, scope: ScopeKey
    ) -> None:
        cache.store(build_cache_key(scope), ["Hats", "Socks"])
        names = DuplicateNameProvider(repo, cache).get_duplicate_names(scope)
        assert names == ["Hats", "Socks"]
        assert repo.duplicate_calls == []

    def test_scopes_cached_separately(
        self, repo: FakeCategoryRepository, cache: InMemoryCacheStore
    ) -> None:
        provider = DuplicateNameProvider(repo, cache)
        provider.get_duplicate_names(ScopeKey(shop_id=1, language_id=1))
        provider.get_duplicate_names(ScopeKey(shop_id=1, language_id=2))
        provider.get_duplicate_names(ScopeKey(shop_id=2, language_id=1))
        assert len(repo.duplicate_calls) == 3

    def test_repository_failure_propagates(
        self, repo: FakeCategoryRepository, cache: InMemoryCacheStore, scope: ScopeKey
    ) -> None:
        repo.fail_with = RepositoryFailure("connection lost")
        with pytest.raises(RepositoryFailure, match="connection lost"):
            DuplicateNameProvider(repo, cache).get_duplicate_names(scope)
        assert cache.is_stored(build_cache_key(scope)) is False

    def test_caller_mutation_does_not_leak_into_cache(
        self, repo: FakeCategoryRepository, cache: InMemoryCacheStore, scope: ScopeKey
    ) -> None:
        provider = DuplicateNameProvider(repo, cache)
        provider.get_duplicate_names(scope).append("Boots")
        provider.get_duplicate_names(scope).append("Hats")
        assert provider.get_duplicate_names(scope) == ["Shoes"]
        assert len(repo.duplicate_calls) == 1

    def test_cache_failure_propagates(self, repo: FakeCategoryRepository, scope: ScopeKey) -> None:
        provider = DuplicateNameProvider(repo, BrokenCacheStore())
        with pytest.raises(CacheFailure, match="disk full"):
            provider.get_duplicate_names(scope)


class TestBuild:
    def test_unique_name_passes_through(
        self, resolver: DisplayNameResolver, repo: FakeCategoryRepository, scope: ScopeKey
    ) -> None:
        assert resolver.build("Boots", scope, 7) == "Boots"
        assert repo.breadcrumb_calls == []

    def test_duplicate_name_uses_breadcrumb(
        self, resolver: DisplayNameResolver, scope: ScopeKey
    ) -> None:
        assert resolver.build("Shoes", scope, 7) == "Men > Shoes"

    def test_breadcrumb_fetched_in_scope_language(
        self, resolver: DisplayNameResolver, repo: FakeCategoryRepository
    ) -> None:
        resolver.build("Shoes", ScopeKey(shop_id=3, language_id=5), 7)
        assert repo.breadcrumb_calls == [(7, 5)]

    def test_match_is_case_sensitive(self, resolver: DisplayNameResolver, scope: ScopeKey) -> None:
        assert resolver.build("shoes", scope, 7) == "shoes"

    def test_single_part_breadcrumb(self, cache: InMemoryCacheStore, scope: ScopeKey) -> None:
        repo = FakeCategoryRepository(duplicates=["Shoes"], breadcrumbs=["Shoes"])
        resolver = DisplayNameResolver(repo, cache, SEPARATOR)
        assert resolver.build("Shoes", scope, 7) == "Shoes"

    def test_repeatable_without_cache(
        self, resolver: DisplayNameResolver, repo: FakeCategoryRepository, scope: ScopeKey
    ) -> None:
        results = {resolver.build("Shoes", scope, 7, use_cache=False) for _ in range(3)}
        assert results == {"Men > Shoes"}
        assert len(repo.duplicate_calls) == 3

    def test_second_call_served_from_cache(
        self, resolver: DisplayNameResolver, repo: FakeCategoryRepository, scope: ScopeKey
    ) -> None:
        resolver.build("Shoes", scope, 7)
        resolver.build("Boots", scope, 8)
        assert len(repo.duplicate_calls) == 1

    def test_repository_failure_propagates(
        self, resolver: DisplayNameResolver, repo: FakeCategoryRepository, scope: ScopeKey
    ) -> None:
        repo.fail_with = RepositoryFailure("timeout")
        with pytest.raises(RepositoryFailure):
            resolver.build("Shoes", scope, 7)


    def test_mutated_duplicates_keep_unique_names_plain(
        self, resolver: DisplayNameResolver, cache: InMemoryCacheStore, scope: ScopeKey
    ) -> None:
        resolver.build("Shoes", scope, 7)
        cache.retrieve(build_cache_key(scope)).append("Boots")
        assert resolver.build("Boots", scope, 8) == "Boots"

    def test_breadcrumb_failure_fails_whole_build(
        self, resolver: DisplayNameResolver, repo: FakeCategoryRepository, scope: ScopeKey
    ) -> None:
        repo.breadcrumb_fail_with = RepositoryFailure("breadcrumb store offline")
        with pytest.raises(RepositoryFailure, match="breadcrumb store offline"):
            resolver.build("Shoes", scope, 7)
        assert repo.breadcrumb_calls == [(7, scope.language_id)]

    def test_breadcrumb_not_consulted_for_unique_name(
        self, resolver: DisplayNameResolver, repo: FakeCategoryRepository, scope: ScopeKey
    ) -> None:
        repo.breadcrumb_fail_with = RepositoryFailure("breadcrumb store offline")
        assert resolver.build("Boots", scope, 7) == "Boots"


class TestBuildWithBreadcrumbs:
    def test_unique_name_passes_through(
        self, resolver: DisplayNameResolver, scope: ScopeKey
    ) -> None:
        assert resolver.build_with_breadcrumbs("Boots", scope, ["Home", "Boots"]) == "Boots"

    def test_uses_supplied_breadcrumb(
        self, resolver: DisplayNameResolver, repo: FakeCategoryRepository, scope: ScopeKey
    ) -> None:
        label = resolver.build_with_breadcrumbs("Shoes", scope, ["Home", "Women", "Shoes"])
        assert label == "Women > Shoes"
        assert repo.breadcrumb_calls == []

    @pytest.mark.parametrize(
        "parts",
        [["Home", "Men", "Shoes"], ["Shoes"], [], ["A", "B", "C", "Shoes"]],
    )
    def test_matches_build(
        self, cache: InMemoryCacheStore, scope: ScopeKey, parts: list[str]
    ) -> None:
        repo = FakeCategoryRepository(duplicates=["Shoes"], breadcrumbs=parts)
        resolver = DisplayNameResolver(repo, cache, SEPARATOR)
        assert resolver.build_with_breadcrumbs("Shoes", scope, parts) == resolver.build(
            "Shoes", scope, 7
        )

    def test_repository_failure_propagates(
        self, resolver: DisplayNameResolver, repo: FakeCategoryRepository, scope: ScopeKey
    ) -> None:
        repo.fail_with = RepositoryFailure("timeout")
        with pytest.raises(RepositoryFailure):
            resolver.build_with_breadcrumbs("Shoes", scope, ["Men", "Shoes"], use_cache=False)
