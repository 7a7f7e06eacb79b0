# chronicle/state.py
from __future__ import annotations

from dataclasses import dataclass

from .config import DEFAULT_LIMITS, HistoryLimits


@dataclass(frozen=True)
class GameSnapshot:
    """Where and when the character is, as stamped onto a new history entry."""
    dungeon_level: int
    character_level: int
    turn: int


@dataclass
class GameState:
    """
    Minimal stand-in for the game's player state.

    Note: this is intentionally "dumb". The real game owns depth/level/time;
    the history log only ever reads a snapshot of it.
    """
    depth: int = 0
    level: int = 1
    max_level: int = 1
    total_energy: int = 0
    limits: HistoryLimits = DEFAULT_LIMITS

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError("depth must be >= 0")
        if self.level <= 0:
            raise ValueError("level must be > 0")
        if self.total_energy < 0:
            raise ValueError("total_energy must be >= 0")
        self.max_level = max(self.max_level, self.level)

    @property
    def turn(self) -> int:
        # Player turns at normal speed, not raw game ticks.
        return self.total_energy // self.limits.turn_scale

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(dungeon_level=self.depth, character_level=self.level, turn=self.turn)
