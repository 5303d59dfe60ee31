"""Items — HTTP routes for the owner-scoped to-do resource.

Invariants:
    - Every route resolves the actor via get_current_actor and delegates to ItemAccessController
    - REDIRECT_SIGN_IN → 303 to settings.sign_in_path; REDIRECT_ROOT → 303 to settings.root_path
    - Request bodies are read raw and validated inside the controller, after the access check
    - Item ids arrive as plain strings; malformed ids behave like unknown ids

Design Decisions:
    - 303 See Other for every redirect: the follow-up request is always a GET,
      even after PATCH/DELETE
    - GET / and GET /items are the same list view (root)
    - PUT accepted as an alias of PATCH
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, RedirectResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.domain_types import AccessOutcome
from app.infrastructure.database import get_db
from app.models.user import User
from app.services.identity import get_current_actor
from app.services.item_access import AccessResult, ItemAccessController
from app.services.item_store import SqlItemStore

logger = logging.getLogger(__name__)
router = APIRouter(tags=["items"])


def get_controller(db: AsyncSession = Depends(get_db)) -> ItemAccessController:
    return ItemAccessController(SqlItemStore(db))


async def read_json_body(request: Request) -> Any:
    """Request body as JSON, or None when empty or not JSON."""
    try:
        return await request.json()
    except ValueError:
        return None


def render_result(result: AccessResult) -> Response:
    """Map a controller outcome onto an HTTP response."""
    settings = get_settings()
    if result.outcome == AccessOutcome.REDIRECT_SIGN_IN:
        return RedirectResponse(
            settings.sign_in_path, status_code=status.HTTP_303_SEE_OTHER,
        )
    if result.outcome == AccessOutcome.REDIRECT_ROOT:
        return RedirectResponse(
            settings.root_path, status_code=status.HTTP_303_SEE_OTHER,
        )
    return JSONResponse(status_code=status.HTTP_200_OK, content=result.payload)


@router.get("/")
@router.get("/items")
async def list_items(
    actor: User | None = Depends(get_current_actor),
    controller: ItemAccessController = Depends(get_controller),
):
    """List the signed-in actor's own items."""
    return render_result(await controller.list_own(actor))


@router.get("/items/new")
async def new_item(
    actor: User | None = Depends(get_current_actor),
    controller: ItemAccessController = Depends(get_controller),
):
    """Describe the new-item form."""
    return render_result(await controller.show_new_form(actor))


@router.post("/items")
async def create_item(
    request: Request,
    actor: User | None = Depends(get_current_actor),
    controller: ItemAccessController = Depends(get_controller),
):
    """Create an item owned by the signed-in actor."""
    data = await read_json_body(request)
    return render_result(await controller.create(actor, data))


@router.get("/items/{item_id}/edit")
async def edit_item(
    item_id: str,
    actor: User | None = Depends(get_current_actor),
    controller: ItemAccessController = Depends(get_controller),
):
    """Describe the edit form for one of the actor's items."""
    return render_result(await controller.show_edit_form(actor, item_id))


@router.patch("/items/{item_id}")
@router.put("/items/{item_id}")
async def update_item(
    item_id: str,
    request: Request,
    actor: User | None = Depends(get_current_actor),
    controller: ItemAccessController = Depends(get_controller),
):
    """Replace the text of one of the actor's items."""
    data = await read_json_body(request)
    return render_result(await controller.update(actor, item_id, data))


@router.delete("/items/{item_id}")
async def delete_item(
    item_id: str,
    actor: User | None = Depends(get_current_actor),
    controller: ItemAccessController = Depends(get_controller),
):
    """Delete one of the actor's items."""
    return render_result(await controller.delete(actor, item_id))
