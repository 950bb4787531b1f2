"""Front-ends: CLI (typer + rich) y TUI (textual)."""
