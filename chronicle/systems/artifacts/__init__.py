# chronicle/systems/artifacts/__init__.py
from __future__ import annotations

from .interface import ArtifactDescriber
from .reconciler import ArtifactReconciler

__all__ = ["ArtifactDescriber", "ArtifactReconciler"]
