# chronicle/models/artifacts.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Artifact:
    """
    Descriptor for a unique special item.

    This is NOT the item instance, just enough identity for the history log
    and for a describer to build a name.
    aidx:
      - stable, non-zero id; 0 is reserved for "no artifact" in history entries
    base:
      - object kind the artifact is made from (ex: "Ring", "Phial"), if known
    """
    aidx: int
    name: str
    base: Optional[str] = None

    def __post_init__(self) -> None:
        if self.aidx <= 0:
            raise ValueError(f"Artifact id must be > 0 (got {self.aidx})")
