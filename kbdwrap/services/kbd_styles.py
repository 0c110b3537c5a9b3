from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KbdStyle:
    id: str
    label_key: str  # translation key for the settings dropdown
    css: str


STYLES: list[KbdStyle] = [
    KbdStyle(
        id="default",
        label_key="style-default",
        css=(
            "kbd { font-family: monospace; font-size: .85em; padding: .1em .4em;"
            " border: 1px solid var(--border); border-radius: 3px;"
            " background: var(--code); }"
        ),
    ),
    KbdStyle(
        id="github",
        label_key="style-github",
        css=(
            "kbd { display: inline-block; padding: 3px 5px;"
            " font: 11px ui-monospace, SFMono-Regular, Menlo, Consolas, monospace;"
            " line-height: 10px; color: #1f2328; vertical-align: middle;"
            " background-color: #f6f8fa; border: 1px solid #d1d9e0;"
            " border-radius: 6px; box-shadow: inset 0 -1px 0 #d1d9e0; }"
        ),
    ),
    KbdStyle(
        id="stackoverflow",
        label_key="style-stackoverflow",
        css=(
            "kbd { display: inline-block; margin: 0 .1em; padding: .1em .6em;"
            " font-family: Arial, Helvetica, sans-serif; font-size: 11px;"
            " line-height: 1.4; color: #242729; background-color: #e1e3e5;"
            " border: 1px solid #adb3b9; border-radius: 3px;"
            " box-shadow: 0 1px 0 rgba(12,13,14,0.2), 0 0 0 2px #fff inset;"
            " text-shadow: 0 1px 0 #fff; white-space: nowrap; }"
        ),
    ),
]

DEFAULT_STYLE = "default"

_BY_ID: dict[str, KbdStyle] = {s.id: s for s in STYLES}


def style_ids() -> list[str]:
    return [s.id for s in STYLES]


def coerce_style(value: object) -> str:
    """Return `value` if it names a known style, else the default style id."""
    s = str(value or "").strip().lower()
    return s if s in _BY_ID else DEFAULT_STYLE


class KbdStyleService:
    """
    Holds the active <kbd> presentation style for the preview.

    Setting the same style twice is a no-op; listeners only hear about real changes.
    """

    def __init__(self, style_id: str = DEFAULT_STYLE) -> None:
        self._active = coerce_style(style_id)
        self._listeners: list[Callable[[str], None]] = []

    @property
    def active(self) -> str:
        return self._active

    def style(self) -> KbdStyle:
        return _BY_ID[self._active]

    def css(self) -> str:
        return self.style().css

    def set_active(self, style_id: str) -> bool:
        """Activate a style (unknown ids fall back to default). Returns True if it changed."""
        new = coerce_style(style_id)
        if new == self._active:
            return False
        self._active = new
        for cb in list(self._listeners):
            cb(new)
        return True

    def subscribe(self, callback: Callable[[str], None]) -> None:
        self._listeners.append(callback)
