from board import Board
from models import Assignment, AssignmentKind, Coordinate

from .base import AssignmentHandler


class YankLineHandler(AssignmentHandler):
    """Duplicate the marker's line with ``yy`` followed by ``p`` or ``P``.

    The yank itself leaves no trace in the buffer, so completion is judged
    by the pasted copy: a neighbouring line identical to the marker's line.
    """

    kind = AssignmentKind.YANK_LINE
    marker = "y"
    description = "Yank this whole line with `yy` and paste it with `p`."

    def check(self, board: Board, coord: Coordinate, assignment: Assignment) -> bool:
        if board.get_char(coord) != self.marker:
            return False
        return self._duplicate_row(board, coord) is not None

    def cleanup(self, board: Board, coord: Coordinate, assignment: Assignment) -> None:
        duplicate = self._duplicate_row(board, coord)
        if duplicate is not None:
            board.surface.remove_line(duplicate)
            if duplicate < coord.row:
                coord = Coordinate(row=coord.row - 1, col=coord.col)
        board.set_char(coord, board.filler)

    @staticmethod
    def _duplicate_row(board: Board, coord: Coordinate) -> int | None:
        line = board.get_line(coord.row)
        line_count = board.surface.line_count()
        for row in (coord.row + 1, coord.row - 1):
            if 1 <= row <= line_count and board.get_line(row) == line:
                return row
        return None
