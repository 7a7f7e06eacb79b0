# chronicle/__init__.py
from __future__ import annotations

from .core import PlayerHistory
from .session import PlayerSession

__all__ = ["PlayerHistory", "PlayerSession"]
