from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtGui import QTextCursor, QTextDocument
from PyQt6.QtWidgets import QTextEdit

from kbdwrap.domain.interfaces import IDocumentView
from kbdwrap.domain.models import Position, Selection

_PARAGRAPH_SEP = "\u2029"  # Qt reports line breaks in selectedText() as U+2029


class QtDocumentView(IDocumentView):
    """
    Narrow adapter exposing a QTextEdit as an IDocumentView.

    Lines are QTextBlocks, columns are offsets inside a block, and offsets are
    QTextDocument character positions (a block break counts as one char, like "\\n").
    """

    def __init__(self, edit: QTextEdit):
        self._e = edit

    @property
    def _doc(self) -> QTextDocument:
        return self._e.document()

    def _max_offset(self) -> int:
        # characterCount() includes the trailing paragraph separator.
        return max(self._doc.characterCount() - 1, 0)

    # ----- IDocumentView -----

    def list_selections(self) -> Sequence[Selection]:
        c = self._e.textCursor()
        return (
            Selection(
                anchor=self.offset_to_pos(c.anchor()),
                head=self.offset_to_pos(c.position()),
            ),
        )

    def get_range(self, start: Position, end: Position) -> str:
        c = self._cursor_over(start, end)
        return c.selectedText().replace(_PARAGRAPH_SEP, "\n")

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        c = self._cursor_over(start, end)
        c.insertText(text)

    def pos_to_offset(self, pos: Position) -> int:
        doc = self._doc
        line = min(max(pos.line, 0), doc.blockCount() - 1)
        block = doc.findBlockByNumber(line)
        col = min(max(pos.column, 0), block.length() - 1)
        return block.position() + col

    def offset_to_pos(self, offset: int) -> Position:
        offset = min(max(offset, 0), self._max_offset())
        block = self._doc.findBlock(offset)
        return Position(block.blockNumber(), offset - block.position())

    def get_line(self, line: int) -> str:
        return self._doc.findBlockByNumber(line).text()

    # ----- helpers -----

    def _cursor_over(self, start: Position, end: Position) -> QTextCursor:
        c = QTextCursor(self._doc)
        c.setPosition(self.pos_to_offset(start))
        c.setPosition(self.pos_to_offset(end), QTextCursor.MoveMode.KeepAnchor)
        return c
