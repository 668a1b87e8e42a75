"""SQLAlchemy Core table definitions for the catname database.

Categories form a tree through ``parent_id``. A category is associated to
one or more shops, and carries one name per (shop, language).
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
)

metadata = MetaData()

categories = Table(
    "categories",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("parent_id", Integer, ForeignKey("categories.id")),  # NULL for top level
)

category_shop = Table(
    "category_shop",
    metadata,
    Column("category_id", Integer, ForeignKey("categories.id"), nullable=False),
    Column("shop_id", Integer, nullable=False),
    UniqueConstraint("category_id", "shop_id"),
)

category_lang = Table(
    "category_lang",
    metadata,
    Column("category_id", Integer, ForeignKey("categories.id"), nullable=False),
    Column("shop_id", Integer, nullable=False),
    Column("language_id", Integer, nullable=False),
    Column("name", Text, nullable=False),
    UniqueConstraint("category_id", "shop_id", "language_id"),
)

cache_entries = Table(
    "cache_entries",
    metadata,
    Column("key", Text, primary_key=True),
    Column("value", Text, nullable=False),  # JSON
    Column("created", Text, nullable=False),
)

Index("ix_categories_parent", categories.c.parent_id)
Index("ix_category_shop_shop", category_shop.c.shop_id)
Index("ix_category_lang_scope", category_lang.c.shop_id, category_lang.c.language_id)
