from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from kbdwrap.domain.interfaces import IAppConfig, IConfigService
from kbdwrap.services.config.ini_config_service import IniConfigService
from kbdwrap.utils.constants import APP_NAME


def _project_root() -> Path:
    # kbdwrap/services/config/app_config.py -> parents[3] = repository root
    return Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """Read-only view of the settings kbdwrap takes from config.ini."""

    ini: IConfigService

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def app_version(self) -> str:
        return self.ini.app_version()

    def app_title(self) -> str:
        """Window title suffix, e.g. "kbdwrap 1.0.0"."""
        return f"{APP_NAME} {self.app_version()}"

    def locale_override(self) -> str | None:
        return self.ini.locale_override()

    def kbd_style(self) -> str | None:
        return self.ini.kbd_style()

    def log_level(self) -> str:
        return self.ini.log_level()

    @property
    def loaded_from(self) -> Path | None:
        return getattr(self.ini, "loaded_from", None)


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root()
    return AppConfig(ini=IniConfigService(explicit_path=explicit_ini, project_root=root))
