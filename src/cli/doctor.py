"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.order_api import HttpOrderGenerator
from cli.ui_components import print_banner
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


@app.command()
def run() -> None:
    """Show the effective configuration and check the generation service."""

    settings = AppSettings()
    print_banner(_console)

    table = Table(title="fast-order Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("API base_url", "OK", settings.api_base_url)
    if settings.http_timeout_seconds is None:
        table.add_row("HTTP timeout", "NONE", "Requests wait until the service answers")
    else:
        table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    ok_health, detail_health = asyncio.run(HttpOrderGenerator(settings).check_health())
    table.add_row("Service /health", "OK" if ok_health else "FAIL", detail_health)

    _console.print(table)

    if not ok_health:
        _console.print(
            "\n[yellow]Note:[/yellow] Run `fast-order doctor setup` to point the CLI at the right service."
        )
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores the service URL in the user config .env)."""

    settings = AppSettings()
    base_url = typer.prompt("API base URL", default=settings.api_base_url, show_default=True).strip()
    if not base_url:
        raise typer.BadParameter("base_url is required")

    env_path = write_user_env_vars({"FAST_ORDER_API_BASE_URL": base_url})
    _console.print(f"[green]Saved config to:[/green] {env_path}")
