from __future__ import annotations

import logging
from collections.abc import Iterable

from kbdwrap.core.markers import CLOSE, OPEN, TAG_PAIR_RE
from kbdwrap.domain.interfaces import IDocumentView
from kbdwrap.domain.models import (
    EditOp,
    NormalizedRange,
    Position,
    ToggleAction,
    ToggleDecision,
)

LOGGER = logging.getLogger(__name__)


def resolve(rng: NormalizedRange, view: IDocumentView) -> ToggleDecision:
    """
    Decide what toggling does for one normalized range.

    Rules, first match wins:
      1) text is `<kbd>…</kbd>`            -> strip the tags (unwrap-enclosed)
      2) tags sit right outside the range  -> consume them (unwrap-adjacent)
      3) any other non-empty text          -> wrap it
      4) empty range (cursor)              -> unwrap the pair on the line around it
    """
    if rng.is_empty:
        return _resolve_cursor(rng, view)

    text = view.get_range(rng.start, rng.end)

    if text.startswith(OPEN) and text.endswith(CLOSE):
        inner = text[len(OPEN) : -len(CLOSE)]
        return ToggleDecision(rng, ToggleAction.UNWRAP_ENCLOSED, EditOp(rng, inner))

    outer = _adjacent_tags(rng, view)
    if outer is not None:
        return ToggleDecision(rng, ToggleAction.UNWRAP_ADJACENT, EditOp(outer, text))

    return ToggleDecision(rng, ToggleAction.WRAP, EditOp(rng, f"{OPEN}{text}{CLOSE}"))


def resolve_all(
    ranges: Iterable[NormalizedRange], view: IDocumentView
) -> list[ToggleDecision]:
    """
    Resolve ranges in the order given (callers pass them back-to-front).

    An edit that would overlap one already planned is demoted to NONE, so the
    returned batch never touches the same characters twice.
    """
    out: list[ToggleDecision] = []
    planned: list[NormalizedRange] = []
    for r in ranges:
        d = resolve(r, view)
        if d.edit is not None:
            if any(_overlaps(d.edit.range, p) for p in planned):
                LOGGER.debug("Dropping overlapping kbd edit at %s", d.edit.range)
                d = ToggleDecision(r, ToggleAction.NONE)
            else:
                planned.append(d.edit.range)
        out.append(d)
    return out


# -------------------- helpers --------------------


def _overlaps(a: NormalizedRange, b: NormalizedRange) -> bool:
    return a.start < b.end and b.start < a.end


def _adjacent_tags(rng: NormalizedRange, view: IDocumentView) -> NormalizedRange | None:
    # Offsets, not columns: the tags may sit on a neighbouring line.
    start_off = view.pos_to_offset(rng.start)
    if start_off < len(OPEN):
        return None
    end_off = view.pos_to_offset(rng.end)

    outer_start = view.offset_to_pos(start_off - len(OPEN))
    outer_end = view.offset_to_pos(end_off + len(CLOSE))

    if view.get_range(outer_start, rng.start) != OPEN:
        return None
    if view.get_range(rng.end, outer_end) != CLOSE:
        return None
    return NormalizedRange(start=outer_start, end=outer_end)


def _resolve_cursor(rng: NormalizedRange, view: IDocumentView) -> ToggleDecision:
    cursor = rng.start
    line_text = view.get_line(cursor.line)

    for m in TAG_PAIR_RE.finditer(line_text):
        # Both boundary columns count as inside the pair.
        if m.start() <= cursor.column <= m.end():
            span = NormalizedRange(
                start=Position(cursor.line, m.start()),
                end=Position(cursor.line, m.end()),
            )
            return ToggleDecision(
                rng, ToggleAction.UNWRAP_AT_CURSOR, EditOp(span, m.group(1))
            )

    LOGGER.debug("No <kbd> pair around cursor at %s", cursor)
    return ToggleDecision(rng, ToggleAction.NONE)
