"""Modelos del dominio (Pydantic v2).

Notas:
- El payload de red usa claves camelCase (`listMenu`, `currentOrders`); los
  atributos siguen en snake_case vía `alias`.
- Los modelos son inmutables: cada ciclo de envío crea los suyos.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.mode import Mode


class RawInputPair(BaseModel):
    """Texto libre pegado por el operador, tal cual se escribió."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    list_menu: str = Field(
        default="",
        alias="listMenu",
        description="Menú del restaurante (opcional en modo nitro).",
    )
    current_orders: str = Field(
        default="",
        alias="currentOrders",
        description="Lista de pedidos en curso (vacía en modo first-touch).",
    )


class GenerationRequest(BaseModel):
    """Payload enviado a `POST /api/generate-order`."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    list_menu: str = Field(default="", alias="listMenu")
    current_orders: str = Field(default="", alias="currentOrders")
    mode: Mode = Field(
        ...,
        description="Modo detectado a partir de las entradas; nunca elegido aparte.",
    )

    @classmethod
    def from_pair(cls, pair: RawInputPair, mode: Mode) -> "GenerationRequest":
        return cls(list_menu=pair.list_menu, current_orders=pair.current_orders, mode=mode)

    def to_payload(self) -> dict[str, str]:
        """Cuerpo JSON con las claves exactas del contrato."""

        return self.model_dump(mode="json", by_alias=True)


class GenerationResponse(BaseModel):
    """Respuesta satisfactoria del servicio de generación."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    generated_message: str = Field(
        ...,
        alias="generatedMessage",
        description="Mensaje listo para pegar en WhatsApp.",
    )


class ErrorResponse(BaseModel):
    """Cuerpo de una respuesta no-2xx."""

    model_config = ConfigDict(extra="ignore")

    error: str | None = None


class ValidationOutcome(BaseModel):
    """Resultado de la validación previa al envío."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    reason: str | None = None

    @classmethod
    def accepted(cls) -> "ValidationOutcome":
        return cls(ok=True)

    @classmethod
    def rejected(cls, reason: str) -> "ValidationOutcome":
        return cls(ok=False, reason=reason)


class StatusKind(str, Enum):
    IDLE = "idle"
    SUCCESS = "success"
    ERROR = "error"


class UiStatus(BaseModel):
    """Lo que el usuario ve en el banner de estado."""

    model_config = ConfigDict(frozen=True)

    kind: StatusKind = StatusKind.IDLE
    message: str = ""

    @classmethod
    def idle(cls) -> "UiStatus":
        return cls()

    @classmethod
    def success(cls, message: str) -> "UiStatus":
        return cls(kind=StatusKind.SUCCESS, message=message)

    @classmethod
    def error(cls, message: str) -> "UiStatus":
        return cls(kind=StatusKind.ERROR, message=message)
