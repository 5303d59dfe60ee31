"""Item Schemas — Pydantic models with field-level validation for item form data.

Invariants:
    - ItemParams.text: stripped, 1-1000 chars, non-empty
    - Both {"item": {"text": ...}} and {"text": ...} bodies accepted

Design Decisions:
    - Unwrap the "item" envelope in a before-validator so field errors keep plain locations
    - Validated explicitly by the controller AFTER the authentication check,
      never as a FastAPI body parameter (anonymous requests must redirect, not 400)
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from app.core.format_items import TEXT_MAX_LENGTH


class ItemParams(BaseModel):
    """Create/update form data for a single item."""
    text: str = Field(min_length=1, max_length=TEXT_MAX_LENGTH)

    @model_validator(mode="before")
    @classmethod
    def unwrap_item_envelope(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("item"), dict):
            return data["item"]
        return data

    @field_validator("text")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("text cannot be empty or whitespace")
        return v
