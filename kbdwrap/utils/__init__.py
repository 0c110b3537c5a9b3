"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    CSS_PREVIEW,
    HTML_TEMPLATE,
    SETTINGS_GEOMETRY,
    SETTINGS_KBD_STYLE,
    SETTINGS_SPLITTER,
    TOGGLE_KBD_SHORTCUT,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "CSS_PREVIEW",
    "HTML_TEMPLATE",
    "SETTINGS_GEOMETRY",
    "SETTINGS_SPLITTER",
    "SETTINGS_KBD_STYLE",
    "TOGGLE_KBD_SHORTCUT",
]
