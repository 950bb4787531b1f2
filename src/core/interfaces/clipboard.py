"""Contrato del portapapeles del sistema (solo escritura)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Clipboard(Protocol):
    """Capacidad inyectada para copiar el mensaje generado.

    Lanza `core.domain.errors.ClipboardError` si la escritura no es posible
    (permiso denegado, sin terminal, etc.).
    """

    def write(self, text: str) -> None:
        ...
