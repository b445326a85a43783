"""ORM Models — SQLAlchemy declarative models for the catalog.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete for create_all and alembic
"""

from artist_catalog.models.artist import Artist  # noqa: F401
