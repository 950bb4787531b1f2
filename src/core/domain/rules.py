"""Detección de modo y validación de entradas.

Funciones puras: no hacen I/O y se pueden invocar en cada pulsación.
"""

from __future__ import annotations

from core.domain.errors import ValidationError
from core.domain.mode import Mode
from core.domain.models import ValidationOutcome

LIST_MENU_REQUIRED = "List menu required for first-touch mode"
CURRENT_ORDERS_REQUIRED = "Current orders is required"


def classify(list_menu: str, current_orders: str) -> Mode:
    """Clasifica la pareja de entradas; gana la primera regla que aplique.

    - Sin pedidos en curso -> `first-touch` (aunque tampoco haya menú).
    - Sin menú -> `nitro` (el servidor ya conoce el menú).
    - Ambos presentes -> `normal`.
    """

    if not current_orders.strip():
        return Mode.FIRST_TOUCH
    if not list_menu.strip():
        return Mode.NITRO
    return Mode.NORMAL


def validate(mode: Mode, list_menu: str, current_orders: str) -> ValidationOutcome:
    """Aplica la regla de rechazo del modo indicado."""

    if mode is Mode.FIRST_TOUCH:
        if not list_menu.strip():
            return ValidationOutcome.rejected(LIST_MENU_REQUIRED)
        return ValidationOutcome.accepted()

    if not current_orders.strip():
        return ValidationOutcome.rejected(CURRENT_ORDERS_REQUIRED)
    return ValidationOutcome.accepted()


def ensure_valid(mode: Mode, list_menu: str, current_orders: str) -> None:
    """Como `validate`, pero lanza `ValidationError` con el motivo del rechazo."""

    outcome = validate(mode, list_menu, current_orders)
    if outcome.reason is not None:
        raise ValidationError(outcome.reason)
