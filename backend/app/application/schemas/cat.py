"""Pydantic DTOs (Data Transfer Objects) for the Cat feature."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator
from pydantic_core import PydanticCustomError

from app.domain.validation import (
    AGE_MAX,
    AGE_MIN,
    BLANK,
    NAME_MAX_LENGTH,
    NOT_A_NUMBER,
    NOTES_MIN_LENGTH,
)


class CatCreate(BaseModel):
    """Schema for creating a new cat.

    Unknown keys (ids, timestamps) are ignored, so callers can only set
    ``name``, ``age`` and ``notes``.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., max_length=NAME_MAX_LENGTH, examples=["Felix"])
    age: int = Field(..., ge=AGE_MIN, le=AGE_MAX, examples=[2])
    notes: str | None = Field(
        None, min_length=NOTES_MIN_LENGTH, examples=["Walks in the park"],
    )

    @field_validator("name", mode="before")
    @classmethod
    def _name_present(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise PydanticCustomError("blank", BLANK)
        return value

    @field_validator("age", mode="before")
    @classmethod
    def _age_present(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise PydanticCustomError("blank", BLANK)
        # bool is an int subclass; True is not an age
        if isinstance(value, bool):
            raise PydanticCustomError("not_a_number", NOT_A_NUMBER)
        return value


class CatEnvelope(BaseModel):
    """Request body wrapper: ``{"cat": {...}}``."""

    cat: CatCreate


class CatResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    name: str
    age: int
    notes: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ValidationErrorResponse(RootModel[dict[str, list[str]]]):
    """422 body — field name to violation messages."""
