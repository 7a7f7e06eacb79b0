# chronicle/systems/artifacts/reconciler.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from ...log import get_logger
from ...models import Artifact, FlagSet, HistoryEntry, HistoryTag
from ...state import GameSnapshot
from ...store import HistoryStore
from .interface import ArtifactDescriber

logger = get_logger(__name__)

SnapshotSource = Callable[[], GameSnapshot]


def _require(artifact: Optional[Artifact]) -> Artifact:
    if artifact is None:
        raise ValueError("An artifact is required for artifact history operations.")
    return artifact


@dataclass
class ArtifactReconciler:
    """
    Keeps an artifact's history entry in step with what happened to it.

    Per artifact, the log is in one of these states:
      - unlogged: no entry
      - logged-unknown: entry tagged ARTIFACT_UNKNOWN, not lost
      - logged-known: entry tagged ARTIFACT_KNOWN, not lost
      - lost: entry also tagged ARTIFACT_LOST

    Transitions edit the existing entry's tags instead of adding a second entry.
    The one exception is re-finding a lost artifact: the lost entry stays as it
    is and a fresh active entry is logged.

    All scans run newest to oldest.
    """
    store: HistoryStore
    describer: ArtifactDescriber
    snapshot: SnapshotSource

    # --- Lookups ---

    def _find(self, aidx: int, *, active_only: bool) -> Optional[HistoryEntry]:
        for _, entry in self.store.scan_newest_first():
            if active_only and entry.tags.test(HistoryTag.ARTIFACT_LOST):
                continue
            if entry.artifact_id == aidx:
                return entry
        return None

    def is_logged(self, artifact: Artifact) -> bool:
        """True if the artifact has an active (not lost) entry."""
        return self._find(_require(artifact).aidx, active_only=True) is not None

    def is_known(self, artifact: Artifact) -> bool:
        aidx = _require(artifact).aidx
        for _, entry in self.store.scan_newest_first():
            if entry.tags.test(HistoryTag.ARTIFACT_KNOWN) and entry.artifact_id == aidx:
                return True
        return False

    # --- Transitions ---

    def _append(self, tags: FlagSet, artifact: Artifact, text: str) -> bool:
        snap = self.snapshot()
        return self.store.append(
            HistoryEntry(
                tags=tags,
                dungeon_level=snap.dungeon_level,
                character_level=snap.character_level,
                turn=snap.turn,
                artifact_id=artifact.aidx,
                text=text,
            )
        )

    def record_artifact(self, artifact: Artifact, is_known: bool, was_found: bool) -> bool:
        """
        Log an artifact, or reveal an existing entry for it.

        is_known:
          - True: promote the active entry to ARTIFACT_KNOWN, or log a new known entry
          - False: log a new ARTIFACT_UNKNOWN entry (plus ARTIFACT_LOST if it was
            never found); fails if an active entry already exists
        Returns False on a duplicate unknown entry or when the log is full.
        """
        artifact = _require(artifact)
        name = self.describer.describe(artifact)
        text = f"{'Found' if was_found else 'Missed'} {name}"

        existing = self._find(artifact.aidx, active_only=True)

        if is_known:
            if existing is not None:
                # Promotion wipes every tag on the active entry; lost entries for the same id are left alone.
                existing.tags.clear_all()
                existing.tags.set(HistoryTag.ARTIFACT_KNOWN)
                logger.debug("artifact_known", aidx=artifact.aidx)
                return True
            logger.debug("artifact_logged", aidx=artifact.aidx, known=True)
            return self._append(FlagSet([HistoryTag.ARTIFACT_KNOWN]), artifact, text)

        if existing is not None:
            logger.debug("artifact_already_logged", aidx=artifact.aidx)
            return False

        tags = FlagSet([HistoryTag.ARTIFACT_UNKNOWN])
        if not was_found:
            tags.set(HistoryTag.ARTIFACT_LOST)
        logger.debug("artifact_logged", aidx=artifact.aidx, known=False, found=was_found)
        return self._append(tags, artifact, text)

    def lose_artifact(self, artifact: Artifact) -> bool:
        """
        Mark the artifact as lost for good (left on a level, or purged from a store).

        Returns True if an entry existed and got the lost tag. Otherwise the artifact
        vanished before the player ever logged it: record it as missed and return False.
        """
        artifact = _require(artifact)
        entry = self._find(artifact.aidx, active_only=False)
        if entry is not None:
            entry.tags.set(HistoryTag.ARTIFACT_LOST)
            logger.debug("artifact_lost", aidx=artifact.aidx)
            return True

        self.record_artifact(artifact, is_known=False, was_found=False)
        return False

    def unmask_unknown(self) -> int:
        """
        Turn every ARTIFACT_UNKNOWN entry into ARTIFACT_KNOWN, keeping its other tags.
        Meant for the final character dump after death or retirement.

        Returns how many entries changed (0 on a repeat call).
        """
        changed = 0
        for _, entry in self.store.scan_newest_first():
            if entry.tags.test(HistoryTag.ARTIFACT_UNKNOWN):
                entry.tags.unset(HistoryTag.ARTIFACT_UNKNOWN)
                entry.tags.set(HistoryTag.ARTIFACT_KNOWN)
                changed += 1
        if changed:
            logger.debug("artifacts_unmasked", count=changed)
        return changed
