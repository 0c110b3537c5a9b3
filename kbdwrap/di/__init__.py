from __future__ import annotations

from .container import Container

__all__ = ["Container"]
