# chronicle/session.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .config import DEFAULT_LIMITS, HistoryLimits
from .core import EntrySink, PlayerHistory
from .loader import ArtifactCatalog
from .models import Artifact, HistoryTag
from .state import GameState
from .systems.artifacts import ArtifactDescriber


@dataclass
class PlayerSession:
    """
    One character's playthrough: the game state plus the history log that belongs to it.

    Game events come in here; the session updates state first and then logs,
    so each entry is stamped with the state the event happened in.
    """
    describer: ArtifactDescriber = field(default_factory=ArtifactCatalog)
    limits: HistoryLimits = DEFAULT_LIMITS
    on_entry: Optional[EntrySink] = None

    state: GameState = field(init=False)
    history: PlayerHistory = field(init=False)

    def __post_init__(self) -> None:
        self.state = GameState(limits=self.limits)
        self.history = PlayerHistory(
            state=self.state,
            describer=self.describer,
            limits=self.limits,
            on_entry=self.on_entry,
        )

    # --- Character lifecycle -------------------------------------------

    def birth(self, name: str, race: str, cls: str) -> bool:
        self.new_game()
        return self.history.add(f"{name} the {race} {cls} was born", HistoryTag.PLAYER_BIRTH)

    def new_game(self) -> None:
        self.history.clear()
        self.state.depth = 0
        self.state.level = 1
        self.state.max_level = 1
        self.state.total_energy = 0

    def die(self, cause: str) -> bool:
        ok = self.history.add(f"Killed by {cause}", HistoryTag.PLAYER_DEATH)
        self.history.unmask_unknown()
        return ok

    def retire(self) -> bool:
        ok = self.history.add("Retired", HistoryTag.GAVE_UP)
        self.history.unmask_unknown()
        return ok

    def note(self, text: str) -> bool:
        """Free-form note typed by the player."""
        return self.history.add(text, HistoryTag.USER_INPUT)

    # --- Game events ----------------------------------------------------

    def pass_time(self, energy: int) -> None:
        if energy < 0:
            raise ValueError("energy must be >= 0")
        self.state.total_energy += energy

    def descend(self, depth: int) -> None:
        if depth < 0:
            raise ValueError("depth must be >= 0")
        self.state.depth = depth

    def gain_level(self, level: int) -> int:
        """
        Set the character level. Only a new maximum is worth a history entry
        (regaining drained levels is not). Returns how many entries were logged.
        """
        if level <= 0:
            raise ValueError("level must be > 0")
        logged = 0
        while self.state.max_level < level:
            self.state.max_level += 1
            self.state.level = self.state.max_level
            if self.history.add(f"Reached level {self.state.max_level}", HistoryTag.LEVEL_UP):
                logged += 1
        self.state.level = level
        return logged

    def find_artifact(self, artifact: Artifact, *, known: bool = False) -> bool:
        return self.history.add_artifact(artifact, known=known, found=True)

    def identify_artifact(self, artifact: Artifact) -> bool:
        return self.history.add_artifact(artifact, known=True, found=True)

    def lose_artifact(self, artifact: Artifact) -> bool:
        return self.history.lose_artifact(artifact)
