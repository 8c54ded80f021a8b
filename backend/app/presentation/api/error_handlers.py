"""Global exception handlers.

- CatValidationError → 422, field name → messages
- RequestValidationError → 422, same shape, built from pydantic's error list
- Exception (catch-all) → 500 without internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.exceptions import CatValidationError
from app.domain.validation import ValidationErrors, message_for

logger = logging.getLogger(__name__)

_BODY_FIELD = "cat"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(CatValidationError)
    async def cat_validation_error_handler(request: Request, exc: CatValidationError):
        return JSONResponse(
            status_code=422,
            content=exc.errors.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning("Rejected request on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=422,
            content=build_field_errors(exc.errors()).to_dict(),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception on %s: %s", request.url.path, exc, exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An unexpected error occurred"},
        )


def build_field_errors(errors: list[dict]) -> ValidationErrors:
    """Collapse FastAPI's request errors into the field → messages shape.

    Errors on the envelope itself (``("body",)``, ``("body", "cat")`` or a
    JSON decode offset) are reported under ``cat``; errors inside it carry
    the field name.
    """
    result = ValidationErrors()
    for error in errors:
        error_type = error.get("type")
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]

        if error_type == "json_invalid" or loc in ([], [_BODY_FIELD]):
            if error_type == "missing":
                message = "is missing"
            else:
                message = "is invalid"
            result.add(_BODY_FIELD, message)
            continue

        result.add(loc[-1], message_for(error))
    return result
