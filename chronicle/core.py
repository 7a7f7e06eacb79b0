# chronicle/core.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Tuple

from .config import DEFAULT_LIMITS, HistoryLimits
from .loader import ArtifactCatalog
from .models import NO_ARTIFACT, Artifact, FlagSet, HistoryEntry, HistoryTag
from .state import GameSnapshot, GameState
from .store import HistoryStore
from .systems.artifacts import ArtifactDescriber, ArtifactReconciler

EntrySink = Callable[[HistoryEntry], None]


@dataclass
class PlayerHistory:
    """
    PlayerHistory is the façade / public API for one character's history log.

    Game code logs through it; presentation code reads entry_count()/entries().
    It owns the store, so there is no global "current player" log.
    state:
      - defaults to a fresh GameState built with the same `limits`
    """

    state: Optional[GameState] = None
    describer: ArtifactDescriber = field(default_factory=ArtifactCatalog)
    limits: HistoryLimits = DEFAULT_LIMITS
    on_entry: Optional[EntrySink] = None

    store: HistoryStore = field(init=False)
    artifacts: ArtifactReconciler = field(init=False)

    def __post_init__(self) -> None:
        if self.state is None:
            self.state = GameState(limits=self.limits)
        self.store = HistoryStore(self.limits)
        self.artifacts = ArtifactReconciler(
            store=self.store,
            describer=self.describer,
            snapshot=self._snapshot,
        )

    def _snapshot(self) -> GameSnapshot:
        return self.state.snapshot()

    def _emit(self, ok: bool) -> bool:
        if ok and self.on_entry is not None:
            self.on_entry(self.store.get(self.store.count - 1))
        return ok

    # --- Logging --------------------------------------------------------

    def add_full(
        self,
        tags: Iterable[HistoryTag] | FlagSet,
        artifact: Optional[Artifact],
        dungeon_level: int,
        character_level: int,
        turn: int,
        text: str,
    ) -> bool:
        """
        Append an entry exactly as given. No artifact reconciliation happens here,
        so logging the same artifact twice this way is the caller's problem.
        """
        flags = tags.copy() if isinstance(tags, FlagSet) else FlagSet(tags)
        entry = HistoryEntry(
            tags=flags,
            dungeon_level=dungeon_level,
            character_level=character_level,
            turn=turn,
            artifact_id=artifact.aidx if artifact is not None else NO_ARTIFACT,
            text=text,
        )
        return self._emit(self.store.append(entry))

    def add(self, text: str, tag: HistoryTag, artifact: Optional[Artifact] = None) -> bool:
        """Append a single-tag entry stamped with the character's current depth, level and turn."""
        snap = self._snapshot()
        return self.add_full([tag], artifact, snap.dungeon_level, snap.character_level, snap.turn, text)

    # --- Artifacts ------------------------------------------------------

    def add_artifact(self, artifact: Artifact, known: bool, found: bool) -> bool:
        before = self.store.count
        ok = self.artifacts.record_artifact(artifact, is_known=known, was_found=found)
        if ok and self.store.count > before:
            self._emit(True)
        return ok

    def lose_artifact(self, artifact: Artifact) -> bool:
        before = self.store.count
        existed = self.artifacts.lose_artifact(artifact)
        if self.store.count > before:
            self._emit(True)
        return existed

    def is_artifact_known(self, artifact: Artifact) -> bool:
        return self.artifacts.is_known(artifact)

    def unmask_unknown(self) -> int:
        return self.artifacts.unmask_unknown()

    # --- Presentation ---------------------------------------------------

    def entry_count(self) -> int:
        return self.store.count

    def entries(self) -> Tuple[HistoryEntry, ...]:
        """
        Oldest-first snapshot for display. It is a copy: re-fetch after any change.
        """
        return self.store.view()

    def entry(self, index: int) -> HistoryEntry:
        return self.store.get(index)

    def clear(self) -> None:
        self.store.clear()
