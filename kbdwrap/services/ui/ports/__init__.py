from __future__ import annotations

from .messages import IMessageService

__all__ = [
    "IMessageService",
]
