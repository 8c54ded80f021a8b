"""HTTP gateway to the cat endpoints.

Stateless: every call is a single round trip and nothing is retained between
calls. No retries, no caching.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Literal

import httpx
from pydantic import ValidationError

from app.application.schemas import CatResponse, ValidationErrorResponse
from app.config import get_settings
from app.domain.entities import Cat
from app.domain.exceptions import GatewayError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a create request, tagged by ``kind``."""

    kind: Literal["ok", "error"]
    cat: Cat | None = None
    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.kind == "ok"

    @classmethod
    def accepted(cls, cat: Cat) -> "SubmissionResult":
        return cls(kind="ok", cat=cat)

    @classmethod
    def rejected(cls, errors: dict[str, list[str]]) -> "SubmissionResult":
        return cls(kind="error", errors=errors)


class CatGateway:
    """Client adapter for the ``/cats`` resource.

    An injected ``httpx.AsyncClient`` is reused as-is; otherwise a client is
    created and closed for each call.
    """

    def __init__(
        self,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        settings = get_settings()
        self._base_url = (base_url or settings.api_base_url).rstrip("/")
        self._http_client = http_client
        self._timeout = timeout if timeout is not None else settings.client_timeout

    @property
    def cats_url(self) -> str:
        return f"{self._base_url}/cats"

    def _get_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        client = await self._get_client()
        should_close = self._http_client is None
        logger.debug("%s %s", method, url)
        try:
            return await client.request(method, url, headers=self._get_headers(), **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise GatewayError(f"{method} {url} failed: {exc}") from exc
        finally:
            if should_close:
                await client.aclose()

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise GatewayError(
                "Response body is not valid JSON", status_code=response.status_code
            ) from exc

    @staticmethod
    def _to_cat(data: Any) -> Cat:
        dto = CatResponse.model_validate(data)
        return Cat(
            id=dto.id,
            name=dto.name,
            age=dto.age,
            notes=dto.notes,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )

    async def fetch_cats(self) -> list[Cat]:
        """GET the full list of cats."""
        response = await self._send("GET", self.cats_url)
        if response.status_code != 200:
            raise GatewayError("Could not list cats", status_code=response.status_code)

        data = self._json(response)
        if not isinstance(data, list):
            raise GatewayError("Expected a JSON array of cats", status_code=200)
        try:
            return [self._to_cat(item) for item in data]
        except ValidationError as exc:
            raise GatewayError(f"Malformed cat in list: {exc}", status_code=200) from exc

    async def fetch_cat(self, cat_id: int) -> Cat:
        """GET a single cat by ID."""
        response = await self._send("GET", f"{self.cats_url}/{cat_id}")
        if response.status_code != 200:
            raise GatewayError(
                f"Could not fetch cat {cat_id}", status_code=response.status_code
            )
        try:
            return self._to_cat(self._json(response))
        except ValidationError as exc:
            raise GatewayError(f"Malformed cat: {exc}", status_code=200) from exc

    async def submit_cat(self, candidate: dict[str, Any]) -> SubmissionResult:
        """POST a candidate wrapped as ``{"cat": {...}}``.

        The HTTP status decides the outcome: a 2xx body must carry an ``id``
        to count as created, a 422 body is the field error set, and anything
        else raises ``GatewayError``.
        """
        response = await self._send("POST", self.cats_url, json={"cat": candidate})
        data = self._json(response)

        if response.status_code == 422:
            try:
                errors = ValidationErrorResponse.model_validate(data).root
            except ValidationError as exc:
                raise GatewayError(
                    f"Malformed validation errors: {exc}", status_code=422
                ) from exc
            logger.debug("Cat rejected: %s", sorted(errors))
            return SubmissionResult.rejected(errors)

        if 200 <= response.status_code < 300:
            if not isinstance(data, dict) or data.get("id") is None:
                raise GatewayError(
                    "Create response has no id", status_code=response.status_code
                )
            try:
                return SubmissionResult.accepted(self._to_cat(data))
            except ValidationError as exc:
                raise GatewayError(
                    f"Malformed cat: {exc}", status_code=response.status_code
                ) from exc

        raise GatewayError("Could not create cat", status_code=response.status_code)
