"""Contrato del servicio de generación de mensajes.

El orquestador depende de este Protocol; la implementación httpx vive en
`adapters.order_api`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import GenerationRequest


@runtime_checkable
class OrderGenerator(Protocol):
    """Convierte (menú, pedidos, modo) en el mensaje final.

    Reglas de diseño:
    - `generate` es asíncrono porque típicamente hará I/O (HTTP).
    - Ante cualquier fallo lanza `core.domain.errors.TransportError`.
    """

    async def generate(self, request: GenerationRequest) -> str:
        """Devuelve el `generatedMessage` del servicio."""

        ...
