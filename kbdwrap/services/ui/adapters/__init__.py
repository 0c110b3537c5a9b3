from __future__ import annotations

from .qt_document_view import QtDocumentView
from .qt_messages import QtMessageService

__all__ = [
    "QtDocumentView",
    "QtMessageService",
]
