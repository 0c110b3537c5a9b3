from __future__ import annotations

from collections.abc import Iterable

from kbdwrap.domain.models import NormalizedRange, Selection


def normalize(selection: Selection) -> NormalizedRange:
    """Order a selection's anchor/head so that start <= end."""
    a, h = selection.anchor, selection.head
    if a <= h:
        return NormalizedRange(start=a, end=h)
    return NormalizedRange(start=h, end=a)


def normalize_all(selections: Iterable[Selection]) -> list[NormalizedRange]:
    """
    Normalize every selection and order the result back-to-front.

    Replacing text only shifts what comes after it, so processing the range
    closest to the document end first keeps every not-yet-visited range valid.
    """
    ranges = [normalize(s) for s in selections]
    ranges.sort(key=lambda r: (r.start, r.end), reverse=True)
    return ranges
