"""Domain layer: interfaces and simple models (dataclasses)."""

from .interfaces import (
    IDocumentView,
    IMarkdownRenderer,
    ISettingsService,
    ITranslator,
)
from .models import (
    EditOp,
    NormalizedRange,
    Position,
    Selection,
    ToggleAction,
    ToggleDecision,
    ToggleResult,
)

__all__ = [
    "IDocumentView",
    "IMarkdownRenderer",
    "ISettingsService",
    "ITranslator",
    "EditOp",
    "NormalizedRange",
    "Position",
    "Selection",
    "ToggleAction",
    "ToggleDecision",
    "ToggleResult",
]
