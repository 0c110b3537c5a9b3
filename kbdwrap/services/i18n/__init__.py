from __future__ import annotations

from .translations import FALLBACK_LOCALE, TRANSLATIONS, Translator, resolve_locale

__all__ = ["FALLBACK_LOCALE", "TRANSLATIONS", "Translator", "resolve_locale"]
