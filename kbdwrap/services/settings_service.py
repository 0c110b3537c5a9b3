from __future__ import annotations

from PyQt6.QtCore import QByteArray, QSettings

from kbdwrap.domain.interfaces import ISettingsService
from kbdwrap.services.kbd_styles import DEFAULT_STYLE, coerce_style
from kbdwrap.utils.constants import SETTINGS_GEOMETRY, SETTINGS_KBD_STYLE, SETTINGS_SPLITTER


class SettingsService(ISettingsService):
    """Persist small UI bits: geometry, splitter position and the chosen <kbd> style."""

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    def get_geometry(self) -> bytes | None:
        v = self._s.value(SETTINGS_GEOMETRY)
        return bytes(v) if isinstance(v, QByteArray) else None

    def set_geometry(self, blob: bytes) -> None:
        self._s.setValue(SETTINGS_GEOMETRY, QByteArray(blob))

    def get_splitter(self) -> bytes | None:
        v = self._s.value(SETTINGS_SPLITTER)
        return bytes(v) if isinstance(v, QByteArray) else None

    def set_splitter(self, blob: bytes) -> None:
        self._s.setValue(SETTINGS_SPLITTER, QByteArray(blob))

    def get_kbd_style(self, default: str = DEFAULT_STYLE) -> str:
        # Missing or unknown values fall back to the default style.
        v = self._s.value(SETTINGS_KBD_STYLE)
        return coerce_style(v if isinstance(v, str) and v else default)

    def set_kbd_style(self, style_id: str) -> None:
        self._s.setValue(SETTINGS_KBD_STYLE, coerce_style(style_id))
