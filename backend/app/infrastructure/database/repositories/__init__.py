from .cat_repository import SQLAlchemyCatRepository

__all__ = ["SQLAlchemyCatRepository"]
