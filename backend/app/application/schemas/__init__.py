from .cat import CatCreate, CatEnvelope, CatResponse, ValidationErrorResponse

__all__ = [
    "CatCreate",
    "CatEnvelope",
    "CatResponse",
    "ValidationErrorResponse",
]
