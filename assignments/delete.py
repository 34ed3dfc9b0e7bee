from board import Board
from models import Assignment, AssignmentKind, Coordinate

from .base import AssignmentHandler


class DeleteHandler(AssignmentHandler):
    """Delete the marker character with ``x``."""

    kind = AssignmentKind.DELETE
    marker = "x"
    description = "Move to this marker and delete it with `x`."

    def check(self, board: Board, coord: Coordinate, assignment: Assignment) -> bool:
        char = board.get_char(coord)
        if char == board.filler:
            return True
        # Deleting the last character leaves the anchor past the line end
        return char == "" and board.is_short(coord.row)

    def cleanup(self, board: Board, coord: Coordinate, assignment: Assignment) -> None:
        board.pad_line(coord.row, coord.col)
