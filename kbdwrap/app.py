from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from kbdwrap.di.container import Container
from kbdwrap.services.config.app_config import build_app_config
from kbdwrap.utils.constants import APP_NAME, APP_ORG


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt and logging, composes the application via the DI container,
    and launches the main window.
    """
    config = build_app_config()
    configure_logging(config.log_level())
    logging.getLogger(__name__).debug(
        "%s starting (config: %s)", config.app_title(), config.loaded_from
    )

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default(config=config)

    # Optional file path to open passed as first CLI argument
    start_path = Path(argv[1]) if len(argv) > 1 else None

    win = container.build_main_window(start_path=start_path)
    win.show()

    return app.exec()
