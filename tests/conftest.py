from __future__ import annotations

import os
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtCore import QSettings  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402

from kbdwrap.services.settings_service import SettingsService  # noqa: E402


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        if created:
            app.quit()


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


class FakeMessages:
    """In-memory IMessageService double recording every call."""

    def __init__(self) -> None:
        self.notices: list[str] = []
        self.infos: list[tuple[str, str]] = []
        self.errors: list[tuple[str, str]] = []

    def notice(self, parent, text: str) -> None:
        self.notices.append(text)

    def info(self, parent, title: str, text: str) -> None:
        self.infos.append((title, text))

    def error(self, parent, title: str, text: str) -> None:
        self.errors.append((title, text))


@pytest.fixture()
def messages() -> FakeMessages:
    return FakeMessages()
