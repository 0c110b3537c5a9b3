from __future__ import annotations

from PyQt6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QVBoxLayout,
)

from kbdwrap.domain.interfaces import ISettingsService, ITranslator
from kbdwrap.services.kbd_styles import STYLES, KbdStyleService


class KbdSettingsDialog(QDialog):
    """Pick the visual <kbd> style; the choice is saved and applied immediately."""

    def __init__(
        self,
        *,
        settings: ISettingsService,
        styles: KbdStyleService,
        translator: ITranslator,
        parent=None,
    ):
        super().__init__(parent)
        self._settings = settings
        self._styles = styles
        t = translator.translate

        self.setWindowTitle(t("settings-title"))
        self.setModal(True)

        self.heading = QLabel(f"<h2>{t('settings-title')}</h2>")
        self.description = QLabel(t("style-setting-desc"))
        self.description.setWordWrap(True)

        self.style_combo = QComboBox()
        for s in STYLES:
            self.style_combo.addItem(t(s.label_key), s.id)
        idx = self.style_combo.findData(self._styles.active)
        self.style_combo.setCurrentIndex(max(idx, 0))
        self.style_combo.currentIndexChanged.connect(self._on_style_changed)

        form = QFormLayout()
        form.addRow(t("style-setting"), self.style_combo)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Close)
        buttons.rejected.connect(self.reject)

        layout = QVBoxLayout()
        layout.addWidget(self.heading)
        layout.addLayout(form)
        layout.addWidget(self.description)
        layout.addWidget(buttons)
        self.setLayout(layout)

    def selected_style(self) -> str:
        return str(self.style_combo.currentData())

    def _on_style_changed(self, _index: int) -> None:
        style_id = self.selected_style()
        self._settings.set_kbd_style(style_id)
        self._styles.set_active(style_id)
