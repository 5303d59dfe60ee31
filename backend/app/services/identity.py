"""Identity Provider — resolves the current actor from the signed session cookie.

Invariants:
    - The session stores only the actor id (as str) under ACTOR_SESSION_KEY
    - current actor is None when the cookie is absent, malformed, or names a deleted user
    - A stale actor id is dropped from the session on first use
    - Nothing here decides access; it only answers "who is asking"
"""

import logging
from uuid import UUID

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ActorId
from app.infrastructure.database import get_db
from app.models.user import User

logger = logging.getLogger(__name__)

ACTOR_SESSION_KEY = "actor_id"


def sign_in(request: Request, user: User) -> None:
    """Bind the request's session to user (replaces any previous binding)."""
    request.session.clear()
    request.session[ACTOR_SESSION_KEY] = str(user.id)
    logger.info("Signed in", extra={"actor_id": user.id})


def sign_out(request: Request) -> None:
    request.session.clear()


def session_actor_id(request: Request) -> ActorId | None:
    raw = request.session.get(ACTOR_SESSION_KEY)
    if not raw:
        return None
    try:
        return ActorId(UUID(str(raw)))
    except ValueError:
        logger.warning("Malformed actor id in session")
        return None


async def get_current_actor(
    request: Request, db: AsyncSession = Depends(get_db),
) -> User | None:
    """FastAPI dependency: the signed-in User, or None for anonymous requests."""
    actor_id = session_actor_id(request)
    if actor_id is None:
        request.session.pop(ACTOR_SESSION_KEY, None)
        return None
    user = await db.get(User, actor_id)
    if user is None:
        logger.info("Session names unknown actor", extra={"actor_id": actor_id})
        request.session.pop(ACTOR_SESSION_KEY, None)
    return user
