"""Selection-to-edit logic for toggling <kbd> tags. Free of any UI toolkit."""

from .markers import CLOSE, OPEN
from .normalizer import normalize, normalize_all
from .resolver import resolve, resolve_all
from .applier import apply_edits
from .text_buffer import TextBuffer
from .toggle import apply_toggle, toggle_kbd

__all__ = [
    "OPEN",
    "CLOSE",
    "normalize",
    "normalize_all",
    "resolve",
    "resolve_all",
    "apply_edits",
    "apply_toggle",
    "toggle_kbd",
    "TextBuffer",
]
