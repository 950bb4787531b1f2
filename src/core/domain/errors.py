"""Errores del dominio.

Todas las fallas que el orquestador convierte en un estado de error heredan
de `FastOrderError`; los adaptadores las lanzan y nadie más las atrapa.
"""

from __future__ import annotations


class FastOrderError(Exception):
    """Raíz de la jerarquía de errores de fast-order."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(FastOrderError):
    """Entradas rechazadas localmente, antes de cualquier llamada de red."""


class TransportError(FastOrderError):
    """El servicio de generación no respondió con un mensaje utilizable."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ClipboardError(FastOrderError):
    """El mensaje se generó pero no pudo copiarse al portapapeles."""
