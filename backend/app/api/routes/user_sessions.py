"""User Sessions — sign in and sign out (binds/unbinds the session cookie).

Invariants:
    - Successful sign-in → 303 to root; failure → 401 INVALID_CREDENTIALS, session untouched
    - Sign-out always clears the session and redirects to the sign-in path
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.infrastructure.database import get_db
from app.schemas.user import Credentials
from app.services.accounts import authenticate_user
from app.services.identity import sign_in, sign_out

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["sessions"])


@router.get("/sign_in")
async def show_sign_in():
    """Describe the sign-in form."""
    return {
        "form": {
            "method": "POST",
            "action": "/users/sign_in",
            "fields": [
                {"name": "email", "type": "email", "required": True},
                {"name": "password", "type": "password", "required": True},
            ],
        },
    }


@router.post("/sign_in")
async def create_user_session(
    body: Credentials, request: Request, db: AsyncSession = Depends(get_db),
):
    user = await authenticate_user(db, body)
    sign_in(request, user)
    return RedirectResponse(
        get_settings().root_path, status_code=status.HTTP_303_SEE_OTHER,
    )


@router.delete("/sign_out")
async def destroy_user_session(request: Request):
    sign_out(request)
    return RedirectResponse(
        get_settings().sign_in_path, status_code=status.HTTP_303_SEE_OTHER,
    )
