from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QByteArray, QPoint, Qt
from PyQt6.QtGui import QAction, QIcon
from PyQt6.QtWidgets import (
    QApplication,
    QMainWindow,
    QMenu,
    QSplitter,
    QStatusBar,
    QTextBrowser,
    QTextEdit,
    QToolBar,
)

from kbdwrap.domain.interfaces import IMarkdownRenderer, ISettingsService, ITranslator
from kbdwrap.services.kbd_styles import KbdStyleService
from kbdwrap.services.ui.commands import ToggleKbd
from kbdwrap.services.ui.ports.messages import IMessageService
from kbdwrap.services.ui.settings_dialog import KbdSettingsDialog
from kbdwrap.utils.constants import TOGGLE_KBD_SHORTCUT

LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Thin PyQt window: editor + preview, wired to the <kbd> toggle command."""

    def __init__(
        self,
        renderer: IMarkdownRenderer,
        settings: ISettingsService,
        styles: KbdStyleService,
        translator: ITranslator,
        messages: IMessageService,
        *,
        start_path: Path | None = None,
        app_title: str = "kbdwrap",
    ) -> None:
        super().__init__()
        self._app_title = app_title
        self.setWindowTitle(app_title)
        self.resize(1100, 700)

        self.renderer = renderer
        self.settings = settings
        self.styles = styles
        self.translator = translator
        self.messages = messages

        self.path: Path | None = None

        # Widgets
        self.editor = QTextEdit(self)
        self.editor.setAcceptRichText(False)
        self.editor.setTabStopDistance(4 * self.editor.fontMetrics().horizontalAdvance(" "))
        self.editor.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        self.editor.customContextMenuRequested.connect(self._show_context_menu)

        self.preview = self._create_preview_widget()

        self.splitter = QSplitter(self)
        self.splitter.setOrientation(Qt.Orientation.Horizontal)
        self.splitter.addWidget(self.editor)
        self.splitter.addWidget(self.preview)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 1)
        self.setCentralWidget(self.splitter)

        # Signals
        self.editor.textChanged.connect(self._on_text_changed)
        self.styles.subscribe(lambda _style_id: self._render_preview())

        # UI
        self._build_actions()
        self._build_toolbar()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))

        # Restore UI state
        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))
        split = self.settings.get_splitter()
        if isinstance(split, (bytes, bytearray)):
            self.splitter.restoreState(QByteArray(split))

        if start_path:
            self._open_path(start_path)
        else:
            self._render_preview()

    # ---------- UI creation ----------
    def _build_actions(self):
        t = self.translator.translate

        self.exit_action = QAction("&Exit", self)
        self.exit_action.setShortcut("Ctrl+Q")
        self.exit_action.triggered.connect(QApplication.instance().quit)

        self.act_toggle_kbd = QAction(t("command-title"), self)
        self.act_toggle_kbd.setShortcut(TOGGLE_KBD_SHORTCUT)
        self.act_toggle_kbd.setIcon(QIcon.fromTheme("input-keyboard"))
        self.act_toggle_kbd.triggered.connect(self.toggle_kbd)

        self.act_kbd_settings = QAction(t("settings-title") + "…", self)
        self.act_kbd_settings.triggered.connect(self._show_kbd_settings)

    def _build_toolbar(self):
        tbf = QToolBar("Formatting", self)
        tbf.setMovable(False)
        tbf.addAction(self.act_toggle_kbd)
        self.addToolBar(tbf)

    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("&File")
        filem.addAction(self.exit_action)

        editm = m.addMenu("&Edit")
        editm.addAction(self.act_toggle_kbd)

        settingsm = m.addMenu("&Settings")
        settingsm.addAction(self.act_kbd_settings)

    def build_context_menu(self) -> QMenu:
        """Editor's standard context menu plus a separated <kbd> entry."""
        menu = self.editor.createStandardContextMenu()
        menu.addSeparator()
        act = menu.addAction(
            QIcon.fromTheme("input-keyboard"), self.translator.translate("menu-item-title")
        )
        act.triggered.connect(self.toggle_kbd)
        return menu

    # ---------- Actions ----------
    def toggle_kbd(self) -> bool:
        return ToggleKbd(
            edit=self.editor,
            messages=self.messages,
            translator=self.translator,
            parent=self,
        ).execute()

    def _show_context_menu(self, pos: QPoint) -> None:
        menu = self.build_context_menu()
        menu.exec(self.editor.viewport().mapToGlobal(pos))

    def _show_kbd_settings(self) -> None:
        KbdSettingsDialog(
            settings=self.settings,
            styles=self.styles,
            translator=self.translator,
            parent=self,
        ).exec()

    def _open_path(self, path: Path):
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            self.messages.error(self, "Open Error", f"Failed to open file:\n{e}")
            self._render_preview()
            return
        self.editor.setPlainText(text)
        self.path = path
        self._update_title()
        self._render_preview()

    # ---------- Helpers ----------
    def _render_preview(self):
        html = self.renderer.to_html(self.editor.toPlainText())
        # Both QWebEngineView and QTextBrowser implement setHtml(html).
        self.preview.setHtml(html)

    def _on_text_changed(self):
        self._render_preview()

    def _update_title(self):
        name = self.path.name if self.path else "Untitled"
        self.setWindowTitle(f"{name} — {self._app_title}")

    # ---------- Close ----------
    def closeEvent(self, event):
        self.settings.set_geometry(bytes(self.saveGeometry()))
        self.settings.set_splitter(bytes(self.splitter.saveState()))
        super().closeEvent(event)

    # ---------- Internal: preview creation ----------
    def _create_preview_widget(self):
        """
        Prefer QWebEngineView (better CSS for kbd styles), fall back to QTextBrowser.
        The import is guarded so the app runs without Qt WebEngine installed.
        """
        try:
            from PyQt6.QtWebEngineWidgets import QWebEngineView  # type: ignore

            return QWebEngineView(self)
        except Exception as e:
            LOGGER.info("QWebEngineView unavailable (%s); using QTextBrowser", e)
            w = QTextBrowser(self)
            w.setOpenExternalLinks(True)
            return w
