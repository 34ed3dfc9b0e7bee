from board import Board
from models import Assignment, AssignmentKind, Coordinate

from .base import AssignmentHandler


class PasteHandler(AssignmentHandler):
    """Paste text directly after the marker with ``p``."""

    kind = AssignmentKind.PASTE
    marker = "p"
    description = "Yank this marker with `yl` and paste it right after itself with `p`."

    def check(self, board: Board, coord: Coordinate, assignment: Assignment) -> bool:
        line = board.get_line(coord.row)
        if board.get_char(coord) != self.marker or len(line) <= board.width:
            return False
        after = Coordinate(row=coord.row, col=coord.col + 1)
        return board.get_char(after) not in ("", board.filler)

    def cleanup(self, board: Board, coord: Coordinate, assignment: Assignment) -> None:
        line = board.get_line(coord.row)
        extra = max(len(line) - board.width, 0)
        col = coord.col
        line = line[: col - 1] + board.filler + line[col + extra :]
        board.surface.write_line(coord.row, line)
