from .cat import Cat

__all__ = ["Cat"]
