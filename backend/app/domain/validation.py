"""Field error set for rejected cat candidates.

Type and constraint checks run in pydantic (see ``CatCreate``); this module
turns pydantic's error entries into the field → messages body clients see.
"""

from typing import Any

BLANK = "can't be blank"
INVALID = "is invalid"
NOT_A_NUMBER = "is not a number"
NOT_AN_INTEGER = "must be an integer"
OUT_OF_RANGE = "is out of range"

NAME_MAX_LENGTH = 255
NOTES_MIN_LENGTH = 10
AGE_MIN = 0
AGE_MAX = 100

TOO_SHORT = f"is too short (minimum is {NOTES_MIN_LENGTH} characters)"

_NOT_A_NUMBER_TYPES = frozenset({
    "int_parsing",
    "int_type",
    "finite_number",
    "not_a_number",
})


class ValidationErrors(dict[str, list[str]]):
    """Field name → ordered violation messages."""

    def add(self, field: str, message: str) -> None:
        self.setdefault(field, []).append(message)

    def to_dict(self) -> dict[str, list[str]]:
        return {name: list(messages) for name, messages in self.items()}


def message_for(error: dict[str, Any]) -> str:
    """Human-readable message for one pydantic error entry."""
    error_type = error.get("type")
    ctx = error.get("ctx") or {}

    if error_type in ("missing", "blank"):
        return BLANK
    if error_type in _NOT_A_NUMBER_TYPES:
        return NOT_A_NUMBER
    if error_type == "int_from_float":
        return NOT_AN_INTEGER
    if error_type == "int_parsing_size":
        return OUT_OF_RANGE
    if error_type == "string_too_short":
        return f"is too short (minimum is {ctx.get('min_length', NOTES_MIN_LENGTH)} characters)"
    if error_type == "string_too_long":
        return f"is too long (maximum is {ctx.get('max_length', NAME_MAX_LENGTH)} characters)"
    if error_type == "greater_than_equal":
        return f"must be greater than or equal to {ctx.get('ge', AGE_MIN)}"
    if error_type == "less_than_equal":
        return f"must be less than or equal to {ctx.get('le', AGE_MAX)}"
    return INVALID


def to_field_errors(errors: list[dict[str, Any]]) -> ValidationErrors:
    """Group pydantic error entries by the field they point at."""
    result = ValidationErrors()
    for error in errors:
        loc = error.get("loc") or ()
        field = str(loc[-1]) if loc else "base"
        result.add(field, message_for(error))
    return result
