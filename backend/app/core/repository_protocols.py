"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; the pure authorization
      functions that consume their results are never async themselves
"""

from datetime import datetime
from typing import Protocol

from app.core.domain_types import ActorId, ItemId


class ActorLike(Protocol):
    """Structural contract for the signed-in actor (the User ORM row in practice)."""
    id: ActorId
    email: str


class ItemLike(Protocol):
    """Structural contract for Item records returned by the store."""
    id: ItemId
    text: str
    user_id: ActorId
    created_at: datetime


class ItemStore(Protocol):
    """Contract for item persistence — implemented by shell."""
    async def create(self, owner_id: ActorId, text: str) -> ItemLike: ...
    async def find(self, item_id: ItemId) -> ItemLike | None: ...
    async def update(self, item_id: ItemId, text: str) -> bool: ...
    async def delete(self, item_id: ItemId) -> bool: ...
    async def list_by_owner(self, owner_id: ActorId) -> list[ItemLike]: ...
    async def count(self) -> int: ...
