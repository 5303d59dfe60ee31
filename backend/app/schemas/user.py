"""User Schemas — credentials submitted to sign-in and registration.

Invariants:
    - email: stripped, lower-cased, must contain a single "@" with text on both sides
    - password: 6-128 chars, never stripped or echoed back
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator


class Credentials(BaseModel):
    """Email + password pair, accepted bare or inside a "user" envelope."""
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=6, max_length=128)

    @model_validator(mode="before")
    @classmethod
    def unwrap_user_envelope(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("user"), dict):
            return data["user"]
        return data

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        v = v.strip().lower()
        local, sep, domain = v.partition("@")
        if not sep or not local or not domain or "@" in domain:
            raise ValueError("email must look like name@domain")
        return v
