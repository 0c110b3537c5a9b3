from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import QMainWindow, QMessageBox

from kbdwrap.services.ui.ports.messages import IMessageService


class QtMessageService(IMessageService):
    """Qt-backed implementation for message dialogs and transient notices."""

    NOTICE_MSEC = 4000

    def notice(self, parent: Any | None, text: str) -> None:
        # Transient: status bar when the parent window has one, else a dialog.
        if isinstance(parent, QMainWindow):
            parent.statusBar().showMessage(text, self.NOTICE_MSEC)
            return
        QMessageBox.information(parent, "", text)

    def info(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.information(parent, title, text)

    def error(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.critical(parent, title, text)
