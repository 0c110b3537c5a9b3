from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from PyQt6.QtWidgets import QTextEdit

from kbdwrap.core import apply_toggle
from kbdwrap.domain.interfaces import ITranslator
from kbdwrap.domain.models import ToggleResult
from kbdwrap.services.ui.adapters.qt_document_view import QtDocumentView
from kbdwrap.services.ui.ports.messages import IMessageService


@dataclass(frozen=True)
class ToggleKbd:
    """
    Command: wrap the selection in <kbd>…</kbd>, or unwrap the pair it sits in.

    The whole batch is one undo step. When nothing could be toggled, a
    translated notice is shown instead.
    """

    edit: QTextEdit
    messages: IMessageService
    translator: ITranslator
    parent: Any | None = None

    def execute(self) -> bool:
        return self.run().acted

    def run(self) -> ToggleResult:
        view = QtDocumentView(self.edit)
        c = self.edit.textCursor()
        c.beginEditBlock()
        try:
            result = apply_toggle(view.list_selections(), view)
        finally:
            c.endEditBlock()

        if not result.acted:
            self.messages.notice(self.parent, self.translator.translate("select-text-notice"))
        return result
