from __future__ import annotations

from collections.abc import Iterable

from kbdwrap.domain.interfaces import IDocumentView
from kbdwrap.domain.models import ToggleDecision


def apply_edits(decisions: Iterable[ToggleDecision], view: IDocumentView) -> int:
    """
    Apply each decision's edit through `view.replace_range`, in the given order.

    Decisions must already be ordered back-to-front; positions are used as
    resolved and never re-read between edits. Returns the number of edits applied.
    """
    applied = 0
    for d in decisions:
        if d.edit is None:
            continue
        view.replace_range(d.edit.replacement, d.edit.range.start, d.edit.range.end)
        applied += 1
    return applied
