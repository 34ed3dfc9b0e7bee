"""Shared pytest fixtures for the Editing Drill test suite."""

import random
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from board import Board
from config import GameConfig, build_config
from models import Coordinate, SessionFinished
from session import SessionManager
from surface import GridSurface


class ManualClock:
    """Clock advanced by hand, for deterministic elapsed times."""

    def __init__(self, start: float = 1000.0):
        self.value = start

    def __call__(self) -> float:
        return self.value

    def advance(self, seconds: float) -> None:
        self.value += seconds


class RecordingPresenter:
    """Presenter that records every event it receives."""

    def __init__(self):
        self.instructions: list[str] = []
        self.targets: list[tuple[str, Coordinate]] = []
        self.notices: list[tuple[str, str]] = []
        self.statuses: list[tuple[int, int, int]] = []
        self.completed = 0
        self.results: list[SessionFinished] = []
        self.aborted: list[SessionFinished] = []

    def show_instruction(self, text: str) -> None:
        self.instructions.append(text)

    def show_next_target(self, kind: str, coord: Coordinate, description: str) -> None:
        self.targets.append((kind, coord))

    def show_notice(self, message: str, level: str = "info") -> None:
        self.notices.append((message, level))

    def show_status(self, completed: int, total: int, key_count: int) -> None:
        self.statuses.append((completed, total, key_count))

    def show_complete(self) -> None:
        self.completed += 1

    def show_results(self, finished: SessionFinished) -> None:
        self.results.append(finished)

    def show_aborted(self, finished: SessionFinished) -> None:
        self.aborted.append(finished)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def surface(clock) -> GridSurface:
    """A blank 10x5 board."""
    return GridSurface.blank(10, 5, clock=clock)


@pytest.fixture
def board(surface) -> Board:
    return Board(surface, width=10, height=5)


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def manager() -> SessionManager:
    """A fresh session slot, independent of the process-wide one."""
    return SessionManager()


@pytest.fixture
def make_config():
    """Factory for small board configurations."""

    def factory(
        count: int = 3,
        types: list[str] | None = None,
        width: int = 10,
        height: int = 5,
    ) -> GameConfig:
        return build_config(
            assignment_count=count,
            assignment_types=types or ["delete"],
            board={"width": width, "height": height},
        )

    return factory
