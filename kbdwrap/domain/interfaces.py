from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from kbdwrap.domain.models import Position, Selection


@runtime_checkable
class IDocumentView(Protocol):
    """
    Minimal read/replace surface of an editable document.

    Positions and offsets must be exact inverses over valid coordinates.
    Offsets past either end of the document are clamped to it.
    """

    def list_selections(self) -> Sequence[Selection]: ...
    def get_range(self, start: Position, end: Position) -> str: ...
    def replace_range(self, text: str, start: Position, end: Position) -> None: ...
    def pos_to_offset(self, pos: Position) -> int: ...
    def offset_to_pos(self, offset: int) -> Position: ...
    def get_line(self, line: int) -> str: ...


class IMarkdownRenderer(Protocol):
    """Convert Markdown text to full HTML string (including CSS)."""

    def to_html(self, markdown_text: str) -> str: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight UI state."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...
    def get_splitter(self) -> bytes | None: ...
    def set_splitter(self, blob: bytes) -> None: ...
    def get_kbd_style(self, default: str = ...) -> str: ...
    def set_kbd_style(self, style_id: str) -> None: ...


class ITranslator(Protocol):
    """Look up user-facing strings by key for the current locale."""

    @property
    def locale(self) -> str: ...

    def translate(self, key: str) -> str: ...


class IConfigService(Protocol):
    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def app_version(self) -> str: ...
    def locale_override(self) -> str | None: ...
    def kbd_style(self) -> str | None: ...
    def log_level(self) -> str: ...


class IAppConfig(IConfigService, Protocol):
    def app_title(self) -> str: ...
