"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, catname.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    breadcrumb_separator: str = " > "
    use_cache: bool = True


class CacheConfig(BaseModel):
    """[cache] section.

    ``sqlite`` keeps duplicate-name lists in the database between runs;
    ``memory`` only lasts for one process.
    """

    model_config = {"frozen": True}

    backend: Literal["sqlite", "memory"] = "sqlite"


class DatabaseConfig(BaseModel):
    """[database] section. Relative paths resolve against the project root."""

    model_config = {"frozen": True}

    path: str = "catname.db"

