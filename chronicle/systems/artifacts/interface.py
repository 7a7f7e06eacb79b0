# chronicle/systems/artifacts/interface.py
from __future__ import annotations

from typing import Protocol

from ...models import Artifact


class ArtifactDescriber(Protocol):
    """
    Object description service: turns an artifact into its display name.

    Names written to the history are spoiler-inclusive (full artifact name,
    as if the player knew everything about it), ex: "the Phial of Galadriel".
    """

    def describe(self, artifact: Artifact) -> str: ...
