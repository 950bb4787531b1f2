"""Componentes de UI para CLI (Rich).

Separa los detalles visuales de los comandos para reutilizar paneles en
`generate`, `mode` y `doctor`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from core.domain.mode import Mode
from core.domain.models import StatusKind, UiStatus

_STATUS_STYLES: dict[StatusKind, str] = {
    StatusKind.IDLE: "dim",
    StatusKind.SUCCESS: "green",
    StatusKind.ERROR: "red",
}


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("FAST ORDER", style="bold cyan")
    subtitle = Text("Menu • Orders • WhatsApp", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def mode_text(mode: Mode) -> Text:
    style = {
        Mode.NORMAL: "bold white",
        Mode.NITRO: "bold magenta",
        Mode.FIRST_TOUCH: "bold yellow",
    }[mode]
    return Text(mode.label(), style=style)


def build_status_panel(status: UiStatus) -> Panel:
    """Panel del banner de estado (idle/success/error)."""

    style = _STATUS_STYLES[status.kind]
    body = Text(status.message or "Ready", style=style)
    return Panel(body, title=status.kind.value.upper(), border_style=style)


def build_message_panel(message: str) -> Panel:
    """Panel con el mensaje generado, para copiarlo a mano."""

    return Panel(Text(message), title="Generated message", border_style="cyan")
