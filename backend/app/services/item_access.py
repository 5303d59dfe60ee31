"""Item Access Controller — mediates every item operation for the current actor.

Invariants:
    - The current actor is an explicit argument (User or None), never ambient state
    - Order per request: authenticate → load target (member actions) → ownership → validate → store
    - Every operation goes through decide_access (core/authorize_item.py), no inline guards
    - Rejections return AccessResult, never raise; the store is untouched on rejection
    - Missing or malformed item ids are handled exactly like items owned by someone else
    - Body validation runs only after access is granted (ItemValidationError → 400)

Design Decisions:
    - Returns AccessResult(outcome, payload) and leaves HTTP rendering to the route,
      so the controller is testable with a plain store and no request
    - Raw request data passed in as Any: parsing is part of the guarded operation
"""

import logging
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from pydantic import ValidationError

from app.core.authorize_item import (
    decide_access, is_authenticated, success_outcome,
)
from app.core.domain_types import ActorId, ItemAction, AccessOutcome, parse_item_id
from app.core.errors import ItemValidationError
from app.core.format_items import (
    format_item_list, format_new_form, format_edit_form,
)
from app.core.repository_protocols import ActorLike, ItemLike, ItemStore
from app.schemas.item import ItemParams

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccessResult:
    """Terminal outcome of one controller call.

    granted separates an allowed mutation from a NotOwner rejection: both
    end in REDIRECT_ROOT.
    """
    action: ItemAction
    outcome: AccessOutcome
    granted: bool
    payload: dict | None = None


def _actor_id(actor: ActorLike | None) -> ActorId | None:
    return ActorId(actor.id) if actor is not None else None


def parse_item_params(data: Any) -> ItemParams:
    """Validate submitted item data, mapping pydantic errors to ItemValidationError."""
    try:
        return ItemParams.model_validate(data)
    except ValidationError as e:
        details = [
            {
                "field": ".".join(str(loc) for loc in err["loc"]) or "item",
                "message": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise ItemValidationError(
            "Invalid item data", field=details[0]["field"], details=details,
        )


class ItemAccessController:
    """List/new/create/edit/update/delete with authentication + ownership checks."""

    def __init__(self, store: ItemStore):
        self.store = store

    # ─── Collection actions ─────────────────────────────────────

    async def list_own(self, actor: ActorLike | None) -> AccessResult:
        rejected = self._reject(actor, ItemAction.LIST)
        if rejected:
            return rejected
        items = await self.store.list_by_owner(_actor_id(actor))
        return self._allow(ItemAction.LIST, format_item_list(items))

    async def show_new_form(self, actor: ActorLike | None) -> AccessResult:
        rejected = self._reject(actor, ItemAction.NEW)
        if rejected:
            return rejected
        return self._allow(ItemAction.NEW, format_new_form())

    async def create(self, actor: ActorLike | None, data: Any) -> AccessResult:
        rejected = self._reject(actor, ItemAction.CREATE)
        if rejected:
            return rejected
        params = parse_item_params(data)
        await self.store.create(_actor_id(actor), params.text)
        return self._allow(ItemAction.CREATE)

    # ─── Member actions ─────────────────────────────────────────

    async def show_edit_form(
        self, actor: ActorLike | None, raw_item_id: str | UUID,
    ) -> AccessResult:
        item, rejected = await self._load_owned(actor, raw_item_id, ItemAction.EDIT)
        if rejected:
            return rejected
        return self._allow(ItemAction.EDIT, format_edit_form(item))

    async def update(
        self, actor: ActorLike | None, raw_item_id: str | UUID, data: Any,
    ) -> AccessResult:
        item, rejected = await self._load_owned(actor, raw_item_id, ItemAction.UPDATE)
        if rejected:
            return rejected
        params = parse_item_params(data)
        await self.store.update(item.id, params.text)
        return self._allow(ItemAction.UPDATE)

    async def delete(
        self, actor: ActorLike | None, raw_item_id: str | UUID,
    ) -> AccessResult:
        item, rejected = await self._load_owned(actor, raw_item_id, ItemAction.DELETE)
        if rejected:
            return rejected
        await self.store.delete(item.id)
        return self._allow(ItemAction.DELETE)

    # ─── Guards ─────────────────────────────────────────────────

    async def _load_owned(
        self, actor: ActorLike | None, raw_item_id: str | UUID, action: ItemAction,
    ) -> tuple[ItemLike | None, AccessResult | None]:
        """Fetch the addressed item and check ownership. Store is not read for anonymous actors."""
        if not is_authenticated(_actor_id(actor)):
            return None, self._reject(actor, action, item_id=raw_item_id)
        item_id = parse_item_id(raw_item_id)
        item = await self.store.find(item_id) if item_id is not None else None
        owner_id = ActorId(item.user_id) if item is not None else None
        rejected = self._reject(actor, action, owner_id, item_id=raw_item_id)
        return item, rejected

    def _reject(
        self,
        actor: ActorLike | None,
        action: ItemAction,
        owner_id: ActorId | None = None,
        item_id: str | UUID | None = None,
    ) -> AccessResult | None:
        actor_id = _actor_id(actor)
        outcome = decide_access(actor_id, action, owner_id)
        if outcome is None:
            return None
        logger.info(
            f"Item {action.value} rejected",
            extra={
                "actor_id": actor_id, "item_id": item_id,
                "action": action.value, "outcome": outcome.value,
            },
        )
        return AccessResult(action, outcome, granted=False)

    def _allow(self, action: ItemAction, payload: dict | None = None) -> AccessResult:
        return AccessResult(action, success_outcome(action), True, payload)
