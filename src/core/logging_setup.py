"""Configuración de logging.

Un único punto instala el handler de Rich; el resto de módulos solo piden
`logging.getLogger(__name__)`.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from core.config import AppSettings

_APP_LOGGERS = ("core", "adapters", "cli")


def configure_logging(settings: AppSettings | None = None, *, level: str | None = None) -> None:
    """Envía los logs de la app a stderr con formato Rich.

    Idempotente: reinvocarla reemplaza el handler previo en vez de duplicarlo.
    """

    settings = settings or AppSettings()
    # El override pasa por la misma validación que FAST_ORDER_LOG_LEVEL.
    resolved = AppSettings(log_level=level).log_level if level else settings.log_level

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    for name in _APP_LOGGERS:
        app_logger = logging.getLogger(name)
        for old in list(app_logger.handlers):
            if isinstance(old, RichHandler):
                app_logger.removeHandler(old)
        app_logger.addHandler(handler)
        app_logger.setLevel(resolved)
        app_logger.propagate = False

    # httpx registra cada request a nivel INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
