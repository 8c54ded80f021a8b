"""Health check endpoint — reports whether the cat store answers."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.application.services import CatService
from app.config import get_settings
from app.infrastructure.dependencies import get_cat_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(service: CatService = Depends(get_cat_service)):
    """Returns 200 with the stored cat count, or 503 when the database is unreachable."""
    settings = get_settings()
    info = {
        "version": settings.app_version,
        "environment": settings.app_env,
    }
    try:
        cats = await service.count_cats()
    except SQLAlchemyError as exc:
        logger.error("Health check could not reach the database: %s", exc)
        return JSONResponse(
            status_code=503,
            content={"status": "degraded", "database": "unreachable", **info},
        )
    return {"status": "healthy", "database": "ok", "cats": cats, **info}
