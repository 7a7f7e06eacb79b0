# chronicle/models/__init__.py
from __future__ import annotations

from .core import FLAG_BITS, FlagSet, HistoryTag
from .artifacts import Artifact
from .events import NO_ARTIFACT, HistoryEntry

__all__ = [
    "FLAG_BITS",
    "FlagSet",
    "HistoryTag",
    "Artifact",
    "NO_ARTIFACT",
    "HistoryEntry",
]
