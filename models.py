from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


FILLER = "."


class AssignmentKind(str, Enum):
    DELETE = "delete"
    REPLACE = "replace"
    YANK_LINE = "yank-line"
    CHANGE_UNDO = "change-undo"
    PASTE = "paste"


class SessionStatus(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    FINISHED = "finished"
    ABORTED = "aborted"


class AssignmentPhase(str, Enum):
    """Phases of the assignment state machine."""

    IDLE = "idle"
    SPAWNING = "spawning"
    AWAITING_COMPLETION = "awaiting_completion"
    COMPLETING = "completing"
    EXHAUSTED = "exhausted"


class Coordinate(BaseModel):
    """A 1-based grid cell."""

    model_config = ConfigDict(frozen=True)

    row: int
    col: int

    def __str__(self) -> str:
        return f"{self.row}:{self.col}"


class Assignment(BaseModel):
    """One task bound to a planned cell and a kind."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: int
    kind: AssignmentKind
    planned: Coordinate

    # Bound while the assignment is current (an AnchoredPosition)
    anchor: Any = None

    done: bool = False
    instruction_shown: bool = False

    # Predicate progress for multi-step kinds (change-undo)
    stage: int = 0


# ============================================================================
# Session statistics
# ============================================================================

MIN_ELAPSED_MINUTES = 1e-6


class SessionStats(BaseModel):
    """Running statistics of one session."""

    start_time: float
    key_count: int = 0
    completed: int = 0
    total: int = 0

    def elapsed_seconds(self, now: float) -> float:
        return max(now - self.start_time, 0.0)

    def keys_per_minute(self, now: float) -> float:
        """Keys per minute, with the minutes denominator floored."""
        minutes = max(self.elapsed_seconds(now) / 60, MIN_ELAPSED_MINUTES)
        return self.key_count / minutes


class SessionFinished(BaseModel):
    """Final statistics emitted when a session ends."""

    model_config = ConfigDict(frozen=True)

    completed: int
    total: int
    elapsed_seconds: float
    key_count: int
    keys_per_minute: float
    aborted: bool

    @property
    def is_complete(self) -> bool:
        return not self.aborted and self.completed == self.total
