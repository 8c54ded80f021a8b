"""Client side of the cat registry: HTTP gateway and view state."""

from .cat_gateway import CatGateway, SubmissionResult
from .view_state import CatViewController, CatViewState, SubmissionStatus

__all__ = [
    "CatGateway",
    "SubmissionResult",
    "CatViewController",
    "CatViewState",
    "SubmissionStatus",
]
