"""Textual front-end: paste the menu, paste the orders, press ENTER."""

from __future__ import annotations

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Button, Header, Static, TextArea

from adapters.clipboard import AppClipboard
from cli.ui_components import mode_text
from core.domain.models import StatusKind, UiStatus
from core.interfaces.generator import OrderGenerator
from core.services.order_orchestrator import OrchestratorHooks, OrderOrchestrator
from core.services.session import SHORTCUT_HINT, SHORTCUTS, OrderSession, ShortcutAction


class OrdersArea(TextArea):
    """Text area where ENTER submits and Shift+Enter inserts a newline."""

    class Submitted(Message):
        pass

    def _on_key(self, event: events.Key) -> None:
        if event.key == "enter":
            event.prevent_default()
            event.stop()
            self.post_message(self.Submitted())
        elif event.key == "shift+enter":
            event.prevent_default()
            event.stop()
            self.insert("\n")


class FastOrderApp(App):
    """Two fields, a live mode label and a status banner."""

    TITLE = "FAST ORDER"
    SUB_TITLE = "Menu → WhatsApp"

    CSS = """
    Screen {
        layout: vertical;
    }

    #form {
        height: 1fr;
        padding: 0 1;
    }

    .field-label {
        text-style: bold;
        margin-top: 1;
    }

    .field-hint {
        color: $text-muted;
    }

    #list-menu, #current-orders {
        height: 1fr;
        border: round $secondary;
    }

    #generate {
        width: 100%;
        margin-top: 1;
    }

    #status {
        height: auto;
        padding: 0 1;
        margin-top: 1;
    }

    #status.success {
        background: $success 30%;
    }

    #status.error {
        background: $error 30%;
    }
    """

    BINDINGS = [
        Binding(key, f"shortcut('{key}')", action.value.replace("_", " ").title(), priority=True)
        for key, action in SHORTCUTS.items()
    ] + [Binding("ctrl+q", "quit", "Quit")]

    def __init__(self, generator: OrderGenerator) -> None:
        super().__init__()
        orchestrator = OrderOrchestrator(
            generator,
            AppClipboard(self),
            hooks=OrchestratorHooks(
                status_changed=self._show_status,
                loading_changed=self._show_loading,
            ),
        )
        self.session = OrderSession(orchestrator)

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="form"):
            yield Static("LIST MENU", classes="field-label")
            yield Static("Optional - leave empty for Nitro Mode", classes="field-hint")
            yield TextArea(id="list-menu")
            yield Static("CURRENT ORDERS", classes="field-label")
            yield Static(id="mode-label", classes="field-hint")
            yield OrdersArea(id="current-orders")
            yield Button("GENERATE", id="generate", variant="primary")
            yield Static(id="status")

    def on_mount(self) -> None:
        self._refresh_mode()
        self._show_status(self.session.orchestrator.status)
        self.query_one("#list-menu", TextArea).focus()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if event.text_area.id == "list-menu":
            self.session.list_menu = event.text_area.text
        elif event.text_area.id == "current-orders":
            self.session.current_orders = event.text_area.text
        self._refresh_mode()

    def on_orders_area_submitted(self, event: OrdersArea.Submitted) -> None:
        self.action_generate()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "generate":
            self.action_generate()

    def action_generate(self) -> None:
        # El guard se consulta en el momento del despacho.
        if self.session.is_loading:
            return
        self.run_worker(self.session.generate(), group="generate")

    async def action_shortcut(self, key: str) -> None:
        action = SHORTCUTS.get(key)
        if action is ShortcutAction.GENERATE:
            self.run_worker(self.session.handle_shortcut(key), group="generate")
            return
        await self.session.handle_shortcut(key)
        if action is ShortcutAction.CLEAR_ALL:
            self._clear_fields()

    def _clear_fields(self) -> None:
        self.query_one("#list-menu", TextArea).load_text("")
        self.query_one("#current-orders", TextArea).load_text("")
        self._refresh_mode()

    def _refresh_mode(self) -> None:
        text = Text("Mode: ")
        text.append_text(mode_text(self.session.mode))
        self.query_one("#mode-label", Static).update(text)

    def _show_loading(self, loading: bool) -> None:
        button = self.query_one("#generate", Button)
        button.disabled = loading
        button.label = "GENERATING..." if loading else "GENERATE"

    def _show_status(self, status: UiStatus) -> None:
        banner = self.query_one("#status", Static)
        banner.set_class(status.kind is StatusKind.SUCCESS, "success")
        banner.set_class(status.kind is StatusKind.ERROR, "error")
        banner.update(status.message if status.kind is not StatusKind.IDLE else SHORTCUT_HINT)
