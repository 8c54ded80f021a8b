from .cat_repository import CatRepository

__all__ = ["CatRepository"]
