"""Scope identifiers for name-uniqueness checks.

A category name is only ambiguous relative to other categories of the
same shop, rendered in the same language. ``ScopeKey`` captures that pair.
"""

from __future__ import annotations

from pydantic import BaseModel, PositiveInt


class ScopeKey(BaseModel):
    """The (shop, language) pair within which category names must be unique."""

    model_config = {"frozen": True}

    shop_id: PositiveInt
    language_id: PositiveInt

    def __str__(self) -> str:
        return f"shop={self.shop_id} lang={self.language_id}"
