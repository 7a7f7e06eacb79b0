# chronicle/models/core.py
from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Iterator, Set


class HistoryTag(IntEnum):
    """
    Closed set of history entry kinds. The value is the tag's bit position
    in the packed (saved) form of a FlagSet, so existing values must never change.
    """
    PLAYER_BIRTH = 1
    ARTIFACT_UNKNOWN = 2
    ARTIFACT_KNOWN = 3
    ARTIFACT_LOST = 4
    PLAYER_DEATH = 5
    PLAYER_REVIVE = 6
    USER_INPUT = 7
    SAVEFILE_IMPORT = 8
    GAVE_UP = 9
    LEVEL_UP = 10
    GENERIC = 11


# Width of the packed form: every defined bit position fits below this.
FLAG_BITS = max(t.value for t in HistoryTag) + 1
_VALID_MASK = sum(1 << t.value for t in HistoryTag)


class FlagSet:
    """
    Set of HistoryTags attached to one history entry.

    Several tags may be on at once (ex: ARTIFACT_UNKNOWN + ARTIFACT_LOST).
    Copies are by value; two entries never share a FlagSet.
    """

    __slots__ = ("_tags",)

    def __init__(self, tags: Iterable[HistoryTag] = ()) -> None:
        self._tags: Set[HistoryTag] = set()
        self.set(*tags)

    # --- Mutation ---

    def clear_all(self) -> None:
        self._tags.clear()

    def set(self, *tags: HistoryTag) -> None:
        for tag in tags:
            self._tags.add(HistoryTag(tag))

    def unset(self, tag: HistoryTag) -> None:
        self._tags.discard(HistoryTag(tag))

    def copy_from(self, other: "FlagSet") -> None:
        self._tags = set(other._tags)

    # --- Queries ---

    def test(self, tag: HistoryTag) -> bool:
        return tag in self._tags

    def test_any(self, *tags: HistoryTag) -> bool:
        return any(t in self._tags for t in tags)

    def test_all(self, *tags: HistoryTag) -> bool:
        return all(t in self._tags for t in tags)

    def is_empty(self) -> bool:
        return not self._tags

    def copy(self) -> "FlagSet":
        return FlagSet(self._tags)

    # --- Packed form ---

    def to_bits(self) -> int:
        bits = 0
        for tag in self._tags:
            bits |= 1 << tag.value
        return bits

    @classmethod
    def from_bits(cls, bits: int) -> "FlagSet":
        if bits < 0 or bits & ~_VALID_MASK:
            raise ValueError(f"Unknown history tag bits: {bits:#x}")
        return cls(t for t in HistoryTag if bits & (1 << t.value))

    # --- Dunder helpers ---

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __iter__(self) -> Iterator[HistoryTag]:
        return iter(sorted(self._tags))

    def __len__(self) -> int:
        return len(self._tags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FlagSet):
            return NotImplemented
        return self._tags == other._tags

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        names = ", ".join(t.name for t in self)
        return f"FlagSet({{{names}}})"
