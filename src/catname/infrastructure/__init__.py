"""Infrastructure layer - database, repositories, and cache stores.

This layer depends on stdlib, SQLAlchemy, and the domain error taxonomy.
It must never import from services, commands, or output.
"""
