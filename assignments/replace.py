from board import Board
from models import Assignment, AssignmentKind, Coordinate

from .base import AssignmentHandler


class ReplaceHandler(AssignmentHandler):
    """Replace the marker with any other character using ``r``."""

    kind = AssignmentKind.REPLACE
    marker = "r"
    description = "Change this marker with `r` so it becomes a different character."

    def check(self, board: Board, coord: Coordinate, assignment: Assignment) -> bool:
        char = board.get_char(coord)
        return char != "" and char != self.marker

    def cleanup(self, board: Board, coord: Coordinate, assignment: Assignment) -> None:
        board.set_char(coord, board.filler)
