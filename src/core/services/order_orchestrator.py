"""Orquestación de una petición de pedido.

Este módulo concentra el ciclo clasificar -> validar -> pedir -> copiar. Los
front-ends (CLI, TUI) solo leen el estado publicado y muestran el banner;
ningún efecto visual vive aquí.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from core.domain.errors import ClipboardError, TransportError, ValidationError
from core.domain.mode import Mode
from core.domain.models import GenerationRequest, RawInputPair, UiStatus
from core.domain.rules import classify, ensure_valid
from core.interfaces.clipboard import Clipboard
from core.interfaces.generator import OrderGenerator

logger = logging.getLogger(__name__)

GENERIC_ERROR = "An error occurred"
SUCCESS_TEMPLATE = "Order copied to clipboard! ({label}) Press Ctrl+V to paste in WhatsApp"


class SubmissionPhase(str, Enum):
    """Máquina de estados de un envío.

    idle -> validating -> loading -> success | error, con error alcanzable
    directamente desde validating.
    """

    IDLE = "idle"
    VALIDATING = "validating"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class OrchestratorHooks:
    """Callbacks opcionales para capas de UI (re-render)."""

    status_changed: Callable[[UiStatus], None] | None = None
    loading_changed: Callable[[bool], None] | None = None


@dataclass(frozen=True)
class SubmissionResult:
    """Salida de una invocación de `submit`."""

    status: UiStatus
    accepted: bool = True
    mode: Mode | None = None
    generated_message: str | None = None


def success_message(mode: Mode) -> str:
    return SUCCESS_TEMPLATE.format(label=mode.label())


class OrderOrchestrator:
    """Envía una pareja de entradas al generador y publica el estado.

    Un único envío a la vez: mientras hay uno en vuelo, las llamadas
    posteriores se ignoran (sin cola, sin cancelación).
    """

    def __init__(
        self,
        generator: OrderGenerator,
        clipboard: Clipboard,
        *,
        hooks: OrchestratorHooks | None = None,
    ) -> None:
        self._generator = generator
        self._clipboard = clipboard
        self._hooks = hooks or OrchestratorHooks()
        self._phase = SubmissionPhase.IDLE
        self._message = ""

    @property
    def phase(self) -> SubmissionPhase:
        return self._phase

    @property
    def is_loading(self) -> bool:
        return self._phase is SubmissionPhase.LOADING

    @property
    def status(self) -> UiStatus:
        """Estado visible, derivado de la fase actual."""

        if self._phase is SubmissionPhase.SUCCESS:
            return UiStatus.success(self._message)
        if self._phase is SubmissionPhase.ERROR:
            return UiStatus.error(self._message)
        return UiStatus.idle()

    def reset(self) -> None:
        """Vuelve a idle. No hace nada con un envío en vuelo."""

        if self.is_loading:
            return
        self._transition(SubmissionPhase.IDLE)

    async def submit(self, pair: RawInputPair) -> SubmissionResult:
        if self.is_loading:
            logger.debug("Submission ignored: a request is already in flight")
            return SubmissionResult(status=self.status, accepted=False)

        self._transition(SubmissionPhase.VALIDATING)
        mode = classify(pair.list_menu, pair.current_orders)
        logger.debug("Detected mode: %s", mode.value)

        # Se revalida en cada envío: las entradas pueden haber cambiado.
        try:
            ensure_valid(mode, pair.list_menu, pair.current_orders)
        except ValidationError as exc:
            logger.warning("Submission rejected (%s): %s", mode.value, exc.message)
            self._transition(SubmissionPhase.ERROR, exc.message)
            return SubmissionResult(status=self.status, mode=mode)

        request = GenerationRequest.from_pair(pair, mode)
        generated: str | None = None
        final_phase = SubmissionPhase.ERROR
        final_message = GENERIC_ERROR

        try:
            self._transition(SubmissionPhase.LOADING)
            generated = await self._generator.generate(request)
            self._copy(generated)
            final_phase = SubmissionPhase.SUCCESS
            final_message = success_message(mode)
        except TransportError as exc:
            logger.warning("Generation failed (%s): %s", mode.value, exc.message)
            final_message = exc.message or GENERIC_ERROR
        except ClipboardError as exc:
            logger.warning("Generated message could not be copied: %s", exc.message)
            final_message = exc.message or GENERIC_ERROR
        except Exception as exc:
            logger.exception("Unexpected failure while generating order")
            final_message = str(exc) or GENERIC_ERROR
        finally:
            # Libera el guard en toda salida, incluida la cancelación de la tarea.
            self._transition(final_phase, final_message)

        return SubmissionResult(status=self.status, mode=mode, generated_message=generated)

    def _copy(self, text: str) -> None:
        try:
            self._clipboard.write(text)
        except ClipboardError:
            raise
        except Exception as exc:
            raise ClipboardError(f"Failed to copy to clipboard: {exc}") from exc

    def _transition(self, phase: SubmissionPhase, message: str = "") -> None:
        was_loading = self.is_loading
        before = self.status
        self._phase = phase
        self._message = message if phase in (SubmissionPhase.SUCCESS, SubmissionPhase.ERROR) else ""

        if was_loading != self.is_loading:
            self._notify(self._hooks.loading_changed, self.is_loading)
        after = self.status
        if after != before:
            self._notify(self._hooks.status_changed, after)

    def _notify(self, hook: Callable[[Any], None] | None, value: Any) -> None:
        # Un observador roto no debe dejar el guard tomado ni escapar de submit.
        if hook is None:
            return
        try:
            hook(value)
        except Exception:
            logger.exception("Status hook %r failed", hook)
