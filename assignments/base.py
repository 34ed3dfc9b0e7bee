"""Abstract base class for assignment handlers."""

from abc import ABC, abstractmethod

from board import Board
from models import Assignment, AssignmentKind, Coordinate


class AssignmentHandler(ABC):
    """Abstract base class for assignment handlers.

    Each assignment kind provides:
    - The marker glyph written into the board
    - The instruction shown when the cursor reaches the marker
    - A completion check, looking only at the anchored cell or its line
    - A cleanup step that restores the board after success

    To create a new assignment kind:
    1. Add a value to AssignmentKind in models.py
    2. Create a handler class extending AssignmentHandler
    3. Register an instance in ASSIGNMENT_HANDLERS in assignments/__init__.py
    """

    kind: AssignmentKind
    marker: str
    description: str

    @abstractmethod
    def check(self, board: Board, coord: Coordinate, assignment: Assignment) -> bool:
        """Check whether the assignment at ``coord`` has been solved.

        Args:
            board: The drill board.
            coord: Current (dereferenced) cell of the assignment's anchor.
            assignment: The assignment, for kinds that track progress.

        Returns:
            True once the editing action has been observed.
        """
        ...

    @abstractmethod
    def cleanup(self, board: Board, coord: Coordinate, assignment: Assignment) -> None:
        """Remove the solved marker and restore the board's shape."""
        ...

    def instruction(self) -> str:
        return f"Assignment <{self.kind.value}>: {self.description}"
