"""Accounts — registration and credential checks for actors.

Invariants:
    - Passwords only ever stored as passlib hashes
    - Unknown email and wrong password raise the same InvalidCredentialsError
    - Emails arrive already normalized (schemas/user.py)
"""

import logging

from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import EmailTakenError, InvalidCredentialsError
from app.models.user import User
from app.schemas.user import Credentials

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


async def read_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def register_user(db: AsyncSession, credentials: Credentials) -> User:
    """Create an account. Raises EmailTakenError for a duplicate email."""
    if await read_user_by_email(db, credentials.email):
        raise EmailTakenError(credentials.email)
    user = User(
        email=credentials.email,
        password_hash=get_password_hash(credentials.password),
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        # lost a race against a concurrent registration
        await db.rollback()
        raise EmailTakenError(credentials.email)
    await db.refresh(user)
    logger.info("User registered", extra={"actor_id": user.id})
    return user


async def authenticate_user(db: AsyncSession, credentials: Credentials) -> User:
    """Return the user for valid credentials, else raise InvalidCredentialsError."""
    user = await read_user_by_email(db, credentials.email)
    if user is None or not verify_password(credentials.password, user.password_hash):
        logger.info("Sign-in rejected")
        raise InvalidCredentialsError()
    return user
