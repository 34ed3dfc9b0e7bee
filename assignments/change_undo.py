from board import Board
from models import Assignment, AssignmentKind, Coordinate

from .base import AssignmentHandler

STAGE_UNTOUCHED = 0
STAGE_CHANGED = 1


class ChangeUndoHandler(AssignmentHandler):
    """Change the marker, then bring it back with ``u``.

    Progress is kept on the assignment: the cell must first be seen
    holding something other than the marker, then the marker again.
    """

    kind = AssignmentKind.CHANGE_UNDO
    marker = "c"
    description = "Change this marker (e.g. `s` or `r`), then undo it with `u`."

    def check(self, board: Board, coord: Coordinate, assignment: Assignment) -> bool:
        char = board.get_char(coord)
        if assignment.stage == STAGE_UNTOUCHED:
            if char != self.marker:
                assignment.stage = STAGE_CHANGED
            return False
        return char == self.marker

    def cleanup(self, board: Board, coord: Coordinate, assignment: Assignment) -> None:
        board.set_char(coord, board.filler)
