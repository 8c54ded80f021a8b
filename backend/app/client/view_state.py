"""UI-facing state for the cat list and the create form.

``CatViewController`` is the only writer of ``CatViewState``. Navigation after
a create is driven by the SUCCEEDED status, never by request completion.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from app.client.cat_gateway import CatGateway, SubmissionResult
from app.domain.entities import Cat
from app.domain.exceptions import GatewayError, SubmissionInProgressError

logger = logging.getLogger(__name__)


class SubmissionStatus(str, Enum):
    """Lifecycle of a single create submission."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class CatViewState:
    """Last known server list plus the outcome of the latest submission."""

    cats: list[Cat] = field(default_factory=list)
    status: SubmissionStatus = SubmissionStatus.IDLE
    errors: dict[str, list[str]] = field(default_factory=dict)
    transport_error: GatewayError | None = None

    @property
    def last_write_succeeded(self) -> bool:
        return self.status is SubmissionStatus.SUCCEEDED

    @property
    def can_submit(self) -> bool:
        return self.status is not SubmissionStatus.SUBMITTING


class CatViewController:
    """Drives ``CatViewState`` through the gateway."""

    def __init__(
        self,
        gateway: CatGateway,
        on_success: Callable[[Cat], None] | None = None,
    ):
        self._gateway = gateway
        self._on_success = on_success
        self.state = CatViewState()

    async def load(self) -> list[Cat]:
        """Replace the cached list with the server's. Leaves it untouched on failure."""
        cats = await self._gateway.fetch_cats()
        self.state.cats = list(cats)
        return self.state.cats

    async def submit(self, candidate: dict[str, Any]) -> SubmissionResult:
        """Send one create request and record its outcome.

        Raises:
            SubmissionInProgressError: if a previous submission has not resolved.
            GatewayError: on transport failure; the state is left FAILED.
            Cancellation or any other error also leaves the state FAILED.
        """
        if not self.state.can_submit:
            raise SubmissionInProgressError()

        self.state.status = SubmissionStatus.SUBMITTING
        self.state.errors = {}
        self.state.transport_error = None

        try:
            result = await self._gateway.submit_cat(candidate)
        except GatewayError as exc:
            self.state.status = SubmissionStatus.FAILED
            self.state.transport_error = exc
            raise
        except BaseException:
            self.state.status = SubmissionStatus.FAILED
            raise

        if result.ok and result.cat is not None and result.cat.is_persisted:
            self.state.cats = [*self.state.cats, result.cat]
            self.state.status = SubmissionStatus.SUCCEEDED
            logger.debug("Cat %s created", result.cat.id)
            if self._on_success is not None:
                self._on_success(result.cat)
        else:
            self.state.errors = dict(result.errors)
            self.state.status = SubmissionStatus.FAILED

        return result

    def reset(self) -> None:
        """Return to IDLE, e.g. when the form is reopened."""
        if not self.state.can_submit:
            raise SubmissionInProgressError()
        self.state.status = SubmissionStatus.IDLE
        self.state.errors = {}
        self.state.transport_error = None
