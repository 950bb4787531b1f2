"""Modos de operación de una petición de pedido.

Este módulo vive en el dominio para que la CLI, la TUI y el orquestador
compartan una única fuente de verdad sobre los tres modos y sus etiquetas.
"""

from __future__ import annotations

from enum import Enum


class Mode(str, Enum):
    """Clasificación de una pareja (menú, pedidos)."""

    NORMAL = "normal"
    NITRO = "nitro"
    FIRST_TOUCH = "first-touch"

    def label(self) -> str:
        """Etiqueta legible para la barra de estado."""

        return _LABELS[self]


_LABELS: dict[Mode, str] = {
    Mode.NORMAL: "Normal Mode",
    Mode.NITRO: "Nitro Mode",
    Mode.FIRST_TOUCH: "First-Touch Mode",
}
