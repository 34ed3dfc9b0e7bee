"""Error taxonomy for the editing drill."""


class DrillError(Exception):
    """Base class for all drill errors."""


class ConfigurationError(DrillError):
    """Bad counts, dimensions or assignment types. The session does not start."""


class UnknownType(ConfigurationError):
    """An assignment type tag has no registered handler."""

    def __init__(self, tag: str):
        super().__init__(f"No assignment handler for '{tag}'")
        self.tag = tag


class InsufficientSpace(ConfigurationError):
    """More assignments were requested than the board has cells."""

    def __init__(self, count: int, capacity: int):
        super().__init__(
            f"Cannot place {count} assignments on a board with {capacity} cells"
        )
        self.count = count
        self.capacity = capacity


class Invalidated(DrillError):
    """An anchor no longer points into the grid (its line was deleted)."""


class AlreadyRunning(DrillError):
    """A session is already active in this process."""


class AssignmentStateError(DrillError):
    """The assignment state machine was driven outside its contract."""
