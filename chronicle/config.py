# chronicle/config.py
from __future__ import annotations

from dataclasses import dataclass


# Event text field in the save layout (an 80 byte buffer minus the terminator).
TEXT_FIELD_WIDTH = 79


@dataclass(frozen=True)
class HistoryLimits:
    """
    Sizing constants for a character's history log. These are defaults; callers can override.
    """
    # slots allocated the first time a character logs anything
    birth_size: int = 10
    grow_step: int = 10
    max_entries: int = 5000

    # stored event text; can only be narrower than the save field
    text_width: int = TEXT_FIELD_WIDTH

    # game energy units per displayed turn
    turn_scale: int = 100

    def __post_init__(self) -> None:
        if self.birth_size <= 0:
            raise ValueError("birth_size must be > 0")
        if self.grow_step <= 0:
            raise ValueError("grow_step must be > 0")
        if self.max_entries < self.birth_size:
            raise ValueError("max_entries must be >= birth_size")
        if self.turn_scale <= 0:
            raise ValueError("turn_scale must be > 0")
        if not 0 < self.text_width <= TEXT_FIELD_WIDTH:
            raise ValueError(f"text_width must be in 1..{TEXT_FIELD_WIDTH}")


DEFAULT_LIMITS = HistoryLimits()
