from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QLocale, QSettings

from kbdwrap.domain.interfaces import IMarkdownRenderer, ISettingsService, ITranslator
from kbdwrap.services.config.app_config import AppConfig, build_app_config
from kbdwrap.services.i18n import Translator
from kbdwrap.services.kbd_styles import DEFAULT_STYLE, KbdStyleService
from kbdwrap.services.markdown_renderer import MarkdownRenderer
from kbdwrap.services.settings_service import SettingsService
from kbdwrap.services.ui.adapters import QtMessageService
from kbdwrap.services.ui.main_window import MainWindow
from kbdwrap.services.ui.ports.messages import IMessageService


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Restores the persisted <kbd> style (config value is only the first-run default)
      - Resolves the UI language: config override, else the system locale
    """

    def __init__(
        self,
        *,
        config: AppConfig | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        translator: ITranslator | None = None,
        messages: IMessageService | None = None,
        renderer: IMarkdownRenderer | None = None,
    ) -> None:
        self.config: AppConfig = config or build_app_config()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )

        initial = self.settings_service.get_kbd_style(self.config.kbd_style() or DEFAULT_STYLE)
        self.styles = KbdStyleService(initial)

        self.translator: ITranslator = translator or Translator(self._ui_language)
        self.messages: IMessageService = messages or QtMessageService()
        self.renderer: IMarkdownRenderer = renderer or MarkdownRenderer(kbd_css=self.styles.css)

    # ---------- Class helpers ----------

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        organization: str = "kbdwrap",
        application: str = "kbdwrap",
        config: AppConfig | None = None,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(qsettings=qsettings, config=config)

    # ---------- Internals ----------

    def _ui_language(self) -> str | None:
        return self.config.locale_override() or QLocale.system().name()

    # ---------- UI factories ----------

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str | None = None,
    ) -> MainWindow:
        return MainWindow(
            renderer=self.renderer,
            settings=self.settings_service,
            styles=self.styles,
            translator=self.translator,
            messages=self.messages,
            start_path=start_path,
            app_title=app_title or self.config.app_title(),
        )
