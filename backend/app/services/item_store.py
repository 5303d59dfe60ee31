"""Item Store — SQLAlchemy implementation of the ItemStore protocol.

Invariants:
    - Every mutation commits before returning (one request = one unit of work)
    - update/delete are single statements: atomic per record, no read-modify-write
    - update never touches user_id (ownership is immutable)
    - find/update/delete on a missing id return None/False, never raise
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select, update, delete, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ActorId, ItemId
from app.models.item import Item

logger = logging.getLogger(__name__)


class SqlItemStore:
    """Item persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, owner_id: ActorId, text: str) -> Item:
        item = Item(user_id=owner_id, text=text)
        self.db.add(item)
        await self.db.commit()
        await self.db.refresh(item)
        logger.info(
            "Item created", extra={"item_id": item.id, "actor_id": owner_id},
        )
        return item

    async def find(self, item_id: ItemId) -> Item | None:
        result = await self.db.execute(
            select(Item).where(Item.id == item_id),
        )
        return result.scalar_one_or_none()

    async def update(self, item_id: ItemId, text: str) -> bool:
        result = await self.db.execute(
            update(Item)
            .where(Item.id == item_id)
            .values(text=text, updated_at=datetime.now(timezone.utc)),
        )
        await self.db.commit()
        return result.rowcount > 0

    async def delete(self, item_id: ItemId) -> bool:
        result = await self.db.execute(
            delete(Item).where(Item.id == item_id),
        )
        await self.db.commit()
        return result.rowcount > 0

    async def list_by_owner(self, owner_id: ActorId) -> list[Item]:
        result = await self.db.execute(
            select(Item)
            .where(Item.user_id == owner_id)
            .order_by(Item.created_at.asc()),
        )
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(Item))
        return result.scalar_one()
