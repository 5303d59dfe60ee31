"""Registrations — account creation; a new account is signed in immediately.

Invariants:
    - Duplicate email → 409 EMAIL_TAKEN, nothing created
    - Success → session bound to the new user, 303 to root
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.infrastructure.database import get_db
from app.schemas.user import Credentials
from app.services.accounts import register_user
from app.services.identity import sign_in

router = APIRouter(prefix="/users", tags=["registrations"])


@router.post("")
async def create_registration(
    body: Credentials, request: Request, db: AsyncSession = Depends(get_db),
):
    user = await register_user(db, body)
    sign_in(request, user)
    return RedirectResponse(
        get_settings().root_path, status_code=status.HTTP_303_SEE_OTHER,
    )
