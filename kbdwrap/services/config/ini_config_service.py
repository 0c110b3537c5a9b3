# kbdwrap/services/config/ini_config_service.py
from __future__ import annotations

import configparser
import logging
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir

from kbdwrap.domain.interfaces import IConfigService

LOGGER = logging.getLogger(__name__)


class IniConfigService(IConfigService):
    r"""
    INI-backed configuration reader.

    Load order (first readable file wins):
      1. Explicit path provided at construction
      2. User config dir (e.g., ~/.config/kbdwrap/config.ini or %APPDATA%\kbdwrap\config.ini)
      3. Project default at <repo>/config/config.ini  (optional)

    Recognised keys:
      [app]     version    (shown in the window title)
      [i18n]    locale     (two-letter override of the system language)
      [kbd]     style      (initial <kbd> style before the user picks one)
      [logging] level
    """

    DEFAULT_APP_DIR = "kbdwrap"
    DEFAULT_FILE = "config.ini"

    def __init__(self, explicit_path: Optional[Path] = None, project_root: Optional[Path] = None):
        self._parser = configparser.ConfigParser()
        self._loaded_from: Optional[Path] = None

        for path in self._candidates(explicit_path, project_root):
            if not path.exists():
                continue
            try:
                with path.open("r", encoding="utf-8") as fh:
                    self._parser.read_file(fh)
            except (OSError, configparser.Error) as e:
                # Malformed config must not stop the editor; defaults apply.
                LOGGER.debug("Skipping unreadable config %s: %s", path, e)
                self._parser = configparser.ConfigParser()
                continue
            self._loaded_from = path
            break

    def _candidates(self, explicit_path: Optional[Path], project_root: Optional[Path]) -> list[Path]:
        out: list[Path] = []
        if explicit_path:
            out.append(explicit_path)
        out.append(Path(user_config_dir(self.DEFAULT_APP_DIR)) / self.DEFAULT_FILE)
        if project_root:
            out.append(project_root / "config" / self.DEFAULT_FILE)
        return out

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        if section not in self._parser:
            return default
        return self._parser[section].get(key, default)

    def app_version(self) -> str:
        return (self.get("app", "version", "") or "").strip() or "0.0.0"

    def locale_override(self) -> Optional[str]:
        val = (self.get("i18n", "locale", "") or "").strip()
        return val or None

    def kbd_style(self) -> Optional[str]:
        val = (self.get("kbd", "style", "") or "").strip().lower()
        return val or None

    def log_level(self) -> str:
        return (self.get("logging", "level", "WARNING") or "WARNING").strip().upper()

    @property
    def loaded_from(self) -> Optional[Path]:
        """Which file was read, for the startup log line."""
        return self._loaded_from
