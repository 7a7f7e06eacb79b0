"""Shared fixtures for the history log test suite."""

import pytest

from chronicle.config import HistoryLimits
from chronicle.core import PlayerHistory
from chronicle.log import setup_logging
from chronicle.models import Artifact
from chronicle.state import GameState
from chronicle.store import HistoryStore


class NameDescriber:
    """Describer that returns the artifact name as-is."""

    def __init__(self) -> None:
        self.calls = 0

    def describe(self, artifact: Artifact) -> str:
        self.calls += 1
        return artifact.name


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    setup_logging(level="ERROR")


@pytest.fixture
def limits():
    return HistoryLimits()


@pytest.fixture
def store(limits):
    return HistoryStore(limits)


@pytest.fixture
def describer():
    return NameDescriber()


@pytest.fixture
def game_state():
    return GameState(depth=3, level=7, total_energy=12_345)


@pytest.fixture
def history(game_state, describer):
    return PlayerHistory(state=game_state, describer=describer)


@pytest.fixture
def ring():
    return Artifact(aidx=5, name="Ring of X")


@pytest.fixture
def sword():
    return Artifact(aidx=12, name="Sword of Y")
