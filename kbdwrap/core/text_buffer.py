from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from kbdwrap.domain.interfaces import IDocumentView
from kbdwrap.domain.models import Position, Selection


@dataclass
class TextBuffer(IDocumentView):
    """
    Plain-Python document view over a string, lines separated by "\\n".

    Useful outside Qt (scripts, tests). Columns and offsets past the end of a
    line or of the document are clamped, the same way editors clamp them.
    """

    text: str = ""
    selections: list[Selection] = field(default_factory=list)

    @classmethod
    def from_text(
        cls, text: str, selections: Iterable[Selection] | None = None
    ) -> TextBuffer:
        return cls(text=text, selections=list(selections or []))

    # ----- IDocumentView -----

    def list_selections(self) -> Sequence[Selection]:
        return tuple(self.selections)

    def get_range(self, start: Position, end: Position) -> str:
        return self.text[self.pos_to_offset(start) : self.pos_to_offset(end)]

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        a = self.pos_to_offset(start)
        b = self.pos_to_offset(end)
        self.text = self.text[:a] + text + self.text[b:]

    def pos_to_offset(self, pos: Position) -> int:
        starts = self._line_starts()
        line = min(max(pos.line, 0), len(starts) - 1)
        line_len = len(self.get_line(line))
        return starts[line] + min(max(pos.column, 0), line_len)

    def offset_to_pos(self, offset: int) -> Position:
        offset = min(max(offset, 0), len(self.text))
        starts = self._line_starts()
        line = 0
        for i, s in enumerate(starts):
            if s > offset:
                break
            line = i
        return Position(line, offset - starts[line])

    def get_line(self, line: int) -> str:
        lines = self.lines
        if not 0 <= line < len(lines):
            return ""
        return lines[line]

    # ----- Extras -----

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n")

    def _line_starts(self) -> list[int]:
        starts = [0]
        for i, ch in enumerate(self.text):
            if ch == "\n":
                starts.append(i + 1)
        return starts
