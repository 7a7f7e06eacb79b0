# chronicle/models/events.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from ..config import TEXT_FIELD_WIDTH
from .core import FlagSet

NO_ARTIFACT = 0


@dataclass
class HistoryEntry:
    """
    One milestone in a character's history.

    dungeon_level / character_level / turn are stamped at creation and never change.
    Only `tags` is mutated afterwards (artifact lifecycle, end-of-game reveal).
    artifact_id:
      - 0 for entries that don't concern an artifact
    text:
      - silently cut to the field width (79 chars), never rejected
    """
    tags: FlagSet = field(default_factory=FlagSet)
    dungeon_level: int = 0
    character_level: int = 0
    turn: int = 0
    artifact_id: int = NO_ARTIFACT
    text: str = ""

    def __post_init__(self) -> None:
        self.text = self.text[:TEXT_FIELD_WIDTH]

    @property
    def concerns_artifact(self) -> bool:
        return self.artifact_id != NO_ARTIFACT

    def copy(self) -> "HistoryEntry":
        return HistoryEntry(
            tags=self.tags.copy(),
            dungeon_level=self.dungeon_level,
            character_level=self.character_level,
            turn=self.turn,
            artifact_id=self.artifact_id,
            text=self.text,
        )

    # --- Fixed-layout record (what a save file stores per entry) ---

    def to_record(self) -> dict[str, Any]:
        return {
            "type": self.tags.to_bits(),
            "dlev": self.dungeon_level,
            "clev": self.character_level,
            "a_idx": self.artifact_id,
            "turn": self.turn,
            "event": self.text,
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "HistoryEntry":
        try:
            return cls(
                tags=FlagSet.from_bits(int(record["type"])),
                dungeon_level=int(record["dlev"]),
                character_level=int(record["clev"]),
                turn=int(record["turn"]),
                artifact_id=int(record["a_idx"]),
                text=str(record["event"]),
            )
        except KeyError as e:
            raise ValueError(f"History record missing field: {e.args[0]!r}") from e
