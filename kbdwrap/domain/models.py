from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True, order=True)
class Position:
    """A line/column location; compares in document order (line, then column)."""

    line: int
    column: int


@dataclass(frozen=True)
class Selection:
    """Raw selection as reported by an editor. `head` may precede `anchor`."""

    anchor: Position
    head: Position

    @classmethod
    def cursor(cls, pos: Position) -> Selection:
        return cls(anchor=pos, head=pos)


@dataclass(frozen=True)
class NormalizedRange:
    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"range end {self.end} precedes start {self.start}")

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True)
class EditOp:
    """Replace `range` with `replacement` in one atomic substitution."""

    range: NormalizedRange
    replacement: str


class ToggleAction(Enum):
    WRAP = "wrap"
    UNWRAP_ENCLOSED = "unwrap-enclosed"
    UNWRAP_ADJACENT = "unwrap-adjacent"
    UNWRAP_AT_CURSOR = "unwrap-at-cursor"
    NONE = "none"


@dataclass(frozen=True)
class ToggleDecision:
    range: NormalizedRange
    action: ToggleAction
    edit: EditOp | None = None


@dataclass(frozen=True)
class ToggleResult:
    """
    Outcome of one toggle invocation.

    `decisions` are in processing order (descending document position);
    `applied` counts the edits actually handed to the document.
    """

    decisions: tuple[ToggleDecision, ...] = field(default_factory=tuple)
    applied: int = 0

    @property
    def acted(self) -> bool:
        return self.applied > 0

