"""Concrete service implementations."""

from .kbd_styles import KbdStyleService
from .markdown_renderer import MarkdownRenderer
from .settings_service import SettingsService

__all__ = ["KbdStyleService", "MarkdownRenderer", "SettingsService"]
