"""Adaptadores de portapapeles.

Ambos usan la secuencia OSC 52: la terminal (local o vía SSH) es quien
escribe en el portapapeles del sistema.
"""

from __future__ import annotations

import base64
import sys
from typing import TYPE_CHECKING, TextIO

from core.domain.errors import ClipboardError
from core.interfaces.clipboard import Clipboard

if TYPE_CHECKING:
    from textual.app import App


def osc52_sequence(text: str) -> str:
    payload = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return f"\x1b]52;c;{payload}\a"


class TerminalClipboard(Clipboard):
    """Escribe OSC 52 directamente en la terminal (uso desde la CLI)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, text: str) -> None:
        stream = self._stream or sys.stdout
        if not stream.isatty():
            raise ClipboardError("Clipboard unavailable: output is not a terminal")
        try:
            stream.write(osc52_sequence(text))
            stream.flush()
        except OSError as exc:
            raise ClipboardError(f"Failed to copy to clipboard: {exc}") from exc


class AppClipboard(Clipboard):
    """Delegado en `App.copy_to_clipboard` de una app textual en ejecución."""

    def __init__(self, app: "App") -> None:
        self._app = app

    def write(self, text: str) -> None:
        try:
            self._app.copy_to_clipboard(text)
        except Exception as exc:
            raise ClipboardError(f"Failed to copy to clipboard: {exc}") from exc
