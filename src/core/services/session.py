"""Sesión de pedido y atajos de teclado globales.

La sesión guarda el texto que el operador está editando. Los atajos se
resuelven contra la sesión en el momento del despacho, nunca contra una
copia capturada al registrarlos.
"""

from __future__ import annotations

import logging
from enum import Enum

from core.domain.mode import Mode
from core.domain.models import RawInputPair
from core.domain.rules import classify
from core.services.order_orchestrator import OrderOrchestrator, SubmissionResult

logger = logging.getLogger(__name__)


class ShortcutAction(str, Enum):
    CLEAR_ALL = "clear_all"
    GENERATE = "generate"


# Nombres de tecla tal como los emite textual.
SHORTCUTS: dict[str, ShortcutAction] = {
    "escape": ShortcutAction.CLEAR_ALL,
    "ctrl+shift+c": ShortcutAction.GENERATE,
}

SHORTCUT_HINT = "Shortcuts: ENTER to generate • ESC to clear • Ctrl+Shift+C to generate"


class OrderSession:
    """Estado mutable de una sesión de la página/terminal."""

    def __init__(self, orchestrator: OrderOrchestrator) -> None:
        self.orchestrator = orchestrator
        self.list_menu = ""
        self.current_orders = ""

    @property
    def mode(self) -> Mode:
        return classify(self.list_menu, self.current_orders)

    @property
    def is_loading(self) -> bool:
        return self.orchestrator.is_loading

    def pair(self) -> RawInputPair:
        return RawInputPair(list_menu=self.list_menu, current_orders=self.current_orders)

    def clear_all(self) -> None:
        """Vacía ambos campos y devuelve el estado a idle."""

        self.list_menu = ""
        self.current_orders = ""
        self.orchestrator.reset()

    async def generate(self) -> SubmissionResult:
        return await self.orchestrator.submit(self.pair())

    async def handle_shortcut(self, key: str) -> SubmissionResult | None:
        """Ejecuta la acción asociada a `key`; las teclas desconocidas se ignoran."""

        action = SHORTCUTS.get(key)
        if action is None:
            return None

        logger.debug("Shortcut %s -> %s", key, action.value)
        if action is ShortcutAction.CLEAR_ALL:
            self.clear_all()
            return None
        return await self.generate()
