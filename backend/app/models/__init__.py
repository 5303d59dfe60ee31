"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every Item references exactly one User (items.user_id)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all / alembic
"""

from app.models.user import User  # noqa: F401
from app.models.item import Item  # noqa: F401
