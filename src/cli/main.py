"""fast-order command line interface."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console

from adapters.clipboard import TerminalClipboard
from adapters.order_api import HttpOrderGenerator
from cli import doctor
from cli.ui_components import build_message_panel, build_status_panel, mode_text
from core.config import AppSettings
from core.domain.models import RawInputPair, StatusKind
from core.domain.rules import classify
from core.interfaces.clipboard import Clipboard
from core.interfaces.generator import OrderGenerator
from core.logging_setup import configure_logging
from core.services.order_orchestrator import OrderOrchestrator

app = typer.Typer(
    no_args_is_help=True,
    help="Turn a pasted menu and running order list into a WhatsApp-ready message.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()

MENU_OPTION = typer.Option(None, "--menu", "-m", help="File with the list menu ('-' reads stdin).")
ORDERS_OPTION = typer.Option(None, "--orders", "-o", help="File with the current orders ('-' reads stdin).")


def build_generator(settings: AppSettings) -> OrderGenerator:
    return HttpOrderGenerator(settings)


def build_clipboard() -> Clipboard:
    return TerminalClipboard()


def _read_input(path: Path | None) -> str:
    if path is None:
        return ""
    if str(path) == "-":
        return sys.stdin.read()
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise typer.BadParameter(f"cannot read {path}: {exc}") from exc


def _read_pair(menu: Path | None, orders: Path | None) -> RawInputPair:
    if menu is not None and orders is not None and str(menu) == "-" and str(orders) == "-":
        raise typer.BadParameter("only one of --menu/--orders can read stdin")
    return RawInputPair(list_menu=_read_input(menu), current_orders=_read_input(orders))


@app.callback()
def main(
    log_level: str | None = typer.Option(None, "--log-level", help="Override FAST_ORDER_LOG_LEVEL."),
) -> None:
    if log_level is None:
        configure_logging()
        return
    try:
        settings = AppSettings(log_level=log_level)
    except PydanticValidationError as exc:
        raise typer.BadParameter(f"unknown log level: {log_level!r}", param_hint="--log-level") from exc
    configure_logging(settings)


@app.command()
def generate(
    menu: Path | None = MENU_OPTION,
    orders: Path | None = ORDERS_OPTION,
    print_message: bool = typer.Option(
        False,
        "--print/--no-print",
        help="Also print the generated message (always printed when copying fails).",
    ),
) -> None:
    """Generate the order message and copy it to the clipboard."""

    pair = _read_pair(menu, orders)
    settings = AppSettings()
    orchestrator = OrderOrchestrator(build_generator(settings), build_clipboard())

    result = asyncio.run(orchestrator.submit(pair))

    if result.generated_message is not None and (print_message or result.status.kind is StatusKind.ERROR):
        _console.print(build_message_panel(result.generated_message))
    _console.print(build_status_panel(result.status))

    if result.status.kind is StatusKind.ERROR:
        raise typer.Exit(code=1)


@app.command()
def mode(
    menu: Path | None = MENU_OPTION,
    orders: Path | None = ORDERS_OPTION,
) -> None:
    """Print the mode the inputs would be submitted with."""

    pair = _read_pair(menu, orders)
    _console.print(mode_text(classify(pair.list_menu, pair.current_orders)))


@app.command()
def tui() -> None:
    """Open the interactive terminal UI."""

    from cli.tui import FastOrderApp  # noqa: PLC0415

    settings = AppSettings()
    FastOrderApp(build_generator(settings)).run()


def run() -> None:
    app()


if __name__ == "__main__":
    run()
