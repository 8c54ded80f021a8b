from .cat import CatModel

__all__ = ["CatModel"]
