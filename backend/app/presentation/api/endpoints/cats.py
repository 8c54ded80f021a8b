"""Cat endpoints — list, create and show.

Handlers are registered from ``CAT_ROUTES`` so the full method/path surface
is visible in one table.
"""

from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.schemas import CatEnvelope, CatResponse, ValidationErrorResponse
from app.application.services import CatService
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_cat_service


async def list_cats(
    service: CatService = Depends(get_cat_service),
) -> list[CatResponse]:
    """Return every stored cat in creation order."""
    cats = await service.list_cats()
    return [CatResponse.model_validate(c, from_attributes=True) for c in cats]


async def create_cat(
    payload: CatEnvelope,
    service: CatService = Depends(get_cat_service),
) -> CatResponse:
    """Create a cat, or answer 422 with per-field errors.

    ``CatValidationError`` is translated by the global error handlers.
    """
    cat = await service.create_cat(payload.cat)
    return CatResponse.model_validate(cat, from_attributes=True)


async def get_cat(
    cat_id: int,
    service: CatService = Depends(get_cat_service),
) -> CatResponse:
    """Retrieve a single cat by ID."""
    try:
        cat = await service.get_cat(cat_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return CatResponse.model_validate(cat, from_attributes=True)


# (method, path) → handler and route options
CAT_ROUTES: list[tuple[str, str, Callable[..., Any], dict[str, Any]]] = [
    ("GET", "", list_cats, {"response_model": list[CatResponse]}),
    (
        "POST",
        "",
        create_cat,
        {
            "response_model": CatResponse,
            "status_code": status.HTTP_201_CREATED,
            "responses": {
                422: {"model": ValidationErrorResponse},
            },
        },
    ),
    ("GET", "/{cat_id}", get_cat, {"response_model": CatResponse}),
]


def build_router() -> APIRouter:
    """Build the ``/cats`` router from the route table."""
    router = APIRouter(prefix="/cats", tags=["Cats"])
    for method, path, handler, options in CAT_ROUTES:
        router.add_api_route(path, handler, methods=[method], **options)
    return router


router = build_router()
