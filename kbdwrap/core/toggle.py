from __future__ import annotations

import logging
from collections.abc import Iterable

from kbdwrap.core.applier import apply_edits
from kbdwrap.core.normalizer import normalize_all
from kbdwrap.core.resolver import resolve_all
from kbdwrap.domain.interfaces import IDocumentView
from kbdwrap.domain.models import Selection, ToggleResult

LOGGER = logging.getLogger(__name__)


def apply_toggle(selections: Iterable[Selection], view: IDocumentView) -> ToggleResult:
    """
    Toggle <kbd> tags for every selection in one synchronous pass.

    All decisions are resolved against the untouched document before the
    first edit is applied. `result.acted` is False when no selection had
    anything to wrap or unwrap; surfacing that is left to the caller.
    """
    ranges = normalize_all(selections)
    decisions = resolve_all(ranges, view)
    applied = apply_edits(decisions, view)

    LOGGER.debug(
        "kbd toggle: %d selection(s), %d edit(s) [%s]",
        len(decisions),
        applied,
        ", ".join(d.action.value for d in decisions),
    )
    return ToggleResult(decisions=tuple(decisions), applied=applied)


def toggle_kbd(view: IDocumentView) -> ToggleResult:
    """Run `apply_toggle` on the view's own current selections."""
    return apply_toggle(view.list_selections(), view)
