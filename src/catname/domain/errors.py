"""Error taxonomy shared by repositories, cache stores, and services.

INVARIANT: the resolver core never raises these itself and never catches
them. Adapters at the edges (SQL repository, SQL cache store) translate
backend exceptions into this taxonomy; the service layer turns them into
structured ``ServiceError`` payloads.
"""

from __future__ import annotations

from typing import Any


class CatnameError(Exception):
    """Base class for all catname failures."""

    code = "CATNAME_ERROR"

    @property
    def detail(self) -> dict[str, Any]:
        """Structured context for error payloads."""
        return {}


class RepositoryFailure(CatnameError):
    """Category data could not be fetched (connectivity, schema, lookup)."""

    code = "REPOSITORY_FAILURE"


class CategoryNotFoundError(RepositoryFailure):
    """No category exists with the requested id."""

    code = "CATEGORY_NOT_FOUND"

    def __init__(self, category_id: int) -> None:
        super().__init__(f"Category {category_id} not found")
        self.category_id = category_id

    @property
    def detail(self) -> dict[str, Any]:
        return {"category_id": self.category_id}


class CacheFailure(CatnameError):
    """The cache store could not read or write an entry."""

    code = "CACHE_FAILURE"
