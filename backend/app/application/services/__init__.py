from .cat_service import CatService

__all__ = ["CatService"]
