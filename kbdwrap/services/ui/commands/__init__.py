from __future__ import annotations

from .toggle_kbd import ToggleKbd

__all__ = [
    "ToggleKbd",
]
