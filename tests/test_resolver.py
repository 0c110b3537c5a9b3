from __future__ import annotations

from kbdwrap.core.resolver import resolve, resolve_all
from kbdwrap.core.text_buffer import TextBuffer
from kbdwrap.domain.models import EditOp, NormalizedRange, Position, ToggleAction

P = Position


def rng(a: Position, b: Position) -> NormalizedRange:
    return NormalizedRange(a, b)


# ------------------------------
# Selections with text
# ------------------------------
def test_plain_text_is_wrapped():
    buf = TextBuffer.from_text("say hello")
    r = rng(P(0, 4), P(0, 9))
    d = resolve(r, buf)
    assert d.action is ToggleAction.WRAP
    assert d.edit == EditOp(r, "<kbd>hello</kbd>")


def test_selection_including_tags_is_unwrapped():
    buf = TextBuffer.from_text("<kbd>hello</kbd>")
    r = rng(P(0, 0), P(0, 16))
    d = resolve(r, buf)
    assert d.action is ToggleAction.UNWRAP_ENCLOSED
    assert d.edit == EditOp(r, "hello")


def test_nested_pair_selected_whole_strips_only_outer_tags():
    text = "<kbd><kbd>x</kbd></kbd>"
    buf = TextBuffer.from_text(text)
    d = resolve(rng(P(0, 0), P(0, len(text))), buf)
    assert d.action is ToggleAction.UNWRAP_ENCLOSED
    assert d.edit.replacement == "<kbd>x</kbd>"


def test_selection_inside_tags_consumes_them():
    buf = TextBuffer.from_text("Press <kbd>Ctrl</kbd> now")
    r = rng(P(0, 11), P(0, 15))
    d = resolve(r, buf)
    assert d.action is ToggleAction.UNWRAP_ADJACENT
    assert d.edit == EditOp(rng(P(0, 6), P(0, 21)), "Ctrl")


def test_adjacent_check_uses_offsets_across_lines():
    buf = TextBuffer.from_text("<kbd>hello\nworld</kbd>")
    r = rng(P(0, 5), P(1, 5))
    d = resolve(r, buf)
    assert d.action is ToggleAction.UNWRAP_ADJACENT
    assert d.edit == EditOp(rng(P(0, 0), P(1, 11)), "hello\nworld")


def test_adjacent_tags_on_later_line():
    buf = TextBuffer.from_text("first line\n<kbd>key</kbd>")
    d = resolve(rng(P(1, 5), P(1, 8)), buf)
    assert d.action is ToggleAction.UNWRAP_ADJACENT
    assert d.edit.range == rng(P(1, 0), P(1, 14))


def test_start_offset_below_open_length_skips_adjacency_and_wraps():
    buf = TextBuffer.from_text("kbd>key</kbd>")
    d = resolve(rng(P(0, 4), P(0, 7)), buf)
    assert d.action is ToggleAction.WRAP
    assert d.edit.replacement == "<kbd>key</kbd>"


def test_only_one_side_tagged_wraps():
    buf = TextBuffer.from_text("<kbd>key and more")
    d = resolve(rng(P(0, 5), P(0, 8)), buf)
    assert d.action is ToggleAction.WRAP


def test_closing_tag_cut_off_by_document_end_wraps():
    buf = TextBuffer.from_text("<kbd>key</kb")
    d = resolve(rng(P(0, 5), P(0, 8)), buf)
    assert d.action is ToggleAction.WRAP


def test_tag_matching_is_case_sensitive():
    buf = TextBuffer.from_text("<KBD>key</KBD>")
    d = resolve(rng(P(0, 0), P(0, 14)), buf)
    assert d.action is ToggleAction.WRAP


# ------------------------------
# Cursor only
# ------------------------------
def test_cursor_inside_pair_unwraps_it():
    buf = TextBuffer.from_text("Some <kbd>text</kbd> here")
    c = P(0, 7)
    d = resolve(rng(c, c), buf)
    assert d.action is ToggleAction.UNWRAP_AT_CURSOR
    assert d.edit == EditOp(rng(P(0, 5), P(0, 20)), "text")


def test_cursor_on_pair_boundaries_counts_as_inside():
    buf = TextBuffer.from_text("Some <kbd>text</kbd> here")
    for col in (5, 20):
        c = P(0, col)
        assert resolve(rng(c, c), buf).action is ToggleAction.UNWRAP_AT_CURSOR


def test_cursor_outside_any_pair_is_noop():
    buf = TextBuffer.from_text("Plain text without kbd tags")
    c = P(0, 0)
    d = resolve(rng(c, c), buf)
    assert d.action is ToggleAction.NONE
    assert d.edit is None


def test_cursor_in_unterminated_tag_is_noop():
    buf = TextBuffer.from_text("<kbd>unclosed tag")
    c = P(0, 7)
    assert resolve(rng(c, c), buf).action is ToggleAction.NONE


def test_cursor_scan_picks_pair_containing_cursor():
    line = "<kbd>first</kbd> and <kbd>second</kbd>"
    buf = TextBuffer.from_text(line)
    c = P(0, 25)
    d = resolve(rng(c, c), buf)
    assert d.edit == EditOp(rng(P(0, 21), P(0, 38)), "second")


def test_cursor_scan_only_looks_at_cursor_line():
    buf = TextBuffer.from_text("<kbd>a</kbd>\nplain")
    c = P(1, 2)
    assert resolve(rng(c, c), buf).action is ToggleAction.NONE


def test_nested_pairs_resolve_to_first_closing_tag():
    buf = TextBuffer.from_text("<kbd>a<kbd>b</kbd>c</kbd>")
    c = P(0, 2)
    d = resolve(rng(c, c), buf)
    assert d.edit == EditOp(rng(P(0, 0), P(0, 18)), "a<kbd>b")


# ------------------------------
# Batch
# ------------------------------
def test_resolve_all_drops_second_edit_on_same_pair():
    buf = TextBuffer.from_text("<kbd>ab</kbd>")
    ranges = [rng(P(0, 7), P(0, 7)), rng(P(0, 6), P(0, 6))]
    decisions = resolve_all(ranges, buf)
    assert [d.action for d in decisions] == [
        ToggleAction.UNWRAP_AT_CURSOR,
        ToggleAction.NONE,
    ]


def test_resolve_does_not_modify_document():
    buf = TextBuffer.from_text("say hello")
    resolve(rng(P(0, 4), P(0, 9)), buf)
    assert buf.text == "say hello"
