"""Cliente HTTP del servicio de generación de pedidos.

Contrato:
- `POST /api/generate-order` con `{listMenu, currentOrders, mode}`.
- 2xx -> `{generatedMessage}`; no-2xx -> `{error}`.
- `GET /health` -> 200 si el servicio está accesible.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError as PydanticValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import TransportError
from core.domain.models import ErrorResponse, GenerationRequest, GenerationResponse
from core.interfaces.generator import OrderGenerator

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate-order"
HEALTH_PATH = "/health"

FAILED_TO_GENERATE = "Failed to generate order"
NETWORK_FALLBACK = "An error occurred"


def _error_reason(response: httpx.Response) -> str:
    try:
        body = ErrorResponse.model_validate(response.json())
    except (ValueError, PydanticValidationError):
        return FAILED_TO_GENERATE
    return body.error or FAILED_TO_GENERATE


class HttpOrderGenerator(OrderGenerator):
    """Implementación httpx de `OrderGenerator`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return build_async_client(
            self._settings,
            extra_headers={"Content-Type": "application/json"},
            transport=self._transport,
        )

    async def generate(self, request: GenerationRequest) -> str:
        try:
            async with self._client() as client:
                response = await client.post(GENERATE_PATH, json=request.to_payload())
        except httpx.HTTPError as exc:
            logger.warning("Request to %s failed: %r", GENERATE_PATH, exc)
            raise TransportError(str(exc) or NETWORK_FALLBACK) from exc

        if not response.is_success:
            reason = _error_reason(response)
            logger.info("Service answered HTTP %s: %s", response.status_code, reason)
            raise TransportError(reason, status_code=response.status_code)

        try:
            body = GenerationResponse.model_validate(response.json())
        except (ValueError, PydanticValidationError) as exc:
            logger.warning("Malformed response from %s: %s", GENERATE_PATH, exc)
            raise TransportError(FAILED_TO_GENERATE, status_code=response.status_code) from exc

        return body.generated_message

    async def check_health(self) -> tuple[bool, str]:
        """Sondea `/health`; nunca lanza."""

        try:
            async with self._client() as client:
                response = await client.get(HEALTH_PATH)
        except httpx.HTTPError as exc:
            return False, str(exc) or exc.__class__.__name__
        return response.status_code == 200, f"HTTP {response.status_code}"
