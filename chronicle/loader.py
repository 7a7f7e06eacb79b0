# chronicle/loader.py
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from .log import get_logger
from .models import Artifact

logger = get_logger(__name__)

JsonDict = Dict[str, Any]


@dataclass
class ArtifactCatalog:
    """
    Artifact list loaded from JSON, doubling as a simple object describer.

    Accepted file shapes:
      - [{"aidx": 1, "name": "of Galadriel", "base": "Phial"}, ...]
      - {"artifacts": [ ...same... ]}
    """
    artifacts: List[Artifact] = field(default_factory=list)

    _by_id: Dict[int, Artifact] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._by_id = {a.aidx: a for a in self.artifacts}
        if len(self._by_id) != len(self.artifacts):
            raise ValueError("Duplicate artifact ids detected.")

    @classmethod
    def from_records(cls, records: Iterable[JsonDict]) -> "ArtifactCatalog":
        artifacts: List[Artifact] = []
        for raw in records:
            if not isinstance(raw, dict):
                raise ValueError(f"Unsupported artifact record: {raw!r}")
            try:
                aidx = int(raw["aidx"])
                name = str(raw["name"])
            except KeyError as e:
                raise ValueError(f"Artifact record missing field {e.args[0]!r}: {raw!r}") from e
            base = raw.get("base")
            artifacts.append(Artifact(aidx=aidx, name=name, base=str(base) if base else None))
        return cls(artifacts=artifacts)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "ArtifactCatalog":
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        if isinstance(raw, dict):
            raw = raw.get("artifacts", [])
        if not isinstance(raw, list):
            raise ValueError(f"Expected a list of artifacts in {str(path)!r}")
        catalog = cls.from_records(raw)
        logger.debug("artifact_catalog_loaded", path=str(path), count=len(catalog))
        return catalog

    def get(self, aidx: int) -> Artifact:
        try:
            return self._by_id[aidx]
        except KeyError as e:
            raise KeyError(f"Artifact not found: {aidx}") from e

    def describe(self, artifact: Artifact) -> str:
        # Full spoiler name with article, ex: "the Phial of Galadriel".
        if artifact.base:
            return f"the {artifact.base} {artifact.name}"
        return artifact.name

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, aidx: object) -> bool:
        return aidx in self._by_id
