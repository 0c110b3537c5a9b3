from __future__ import annotations

import itertools

import pytest

from kbdwrap.core.normalizer import normalize, normalize_all
from kbdwrap.domain.models import NormalizedRange, Position, Selection

P = Position


@pytest.mark.parametrize(
    "anchor,head",
    [
        (P(0, 0), P(0, 5)),
        (P(0, 5), P(0, 0)),
        (P(3, 1), P(1, 7)),
        (P(1, 7), P(3, 1)),
        (P(2, 2), P(2, 2)),
    ],
)
def test_normalize_orders_start_before_end_regardless_of_direction(anchor, head):
    r = normalize(Selection(anchor, head))
    assert r.start.line < r.end.line or (
        r.start.line == r.end.line and r.start.column <= r.end.column
    )
    assert {r.start, r.end} == {anchor, head}


def test_equal_positions_give_empty_range():
    r = normalize(Selection.cursor(P(4, 4)))
    assert r.is_empty
    assert r == NormalizedRange(P(4, 4), P(4, 4))


def test_normalize_all_empty_input():
    assert normalize_all([]) == []


def test_normalize_all_sorts_back_to_front():
    sels = [
        Selection(P(0, 0), P(0, 3)),
        Selection(P(2, 4), P(2, 1)),
        Selection(P(1, 0), P(1, 0)),
    ]
    starts = [r.start for r in normalize_all(sels)]
    assert starts == [P(2, 1), P(1, 0), P(0, 0)]


def test_normalize_all_result_does_not_depend_on_input_order():
    sels = [
        Selection(P(0, 0), P(0, 3)),
        Selection(P(0, 8), P(0, 5)),
        Selection(P(1, 2), P(1, 2)),
    ]
    expected = normalize_all(sels)
    for perm in itertools.permutations(sels):
        assert normalize_all(perm) == expected
