"""Character-level access to the drill board on top of a text surface."""

from models import FILLER, Coordinate
from surface import TextSurface


class Board:
    """The drill board: a surface plus its configured dimensions."""

    def __init__(self, surface: TextSurface, width: int, height: int, filler: str = FILLER):
        self.surface = surface
        self.width = width
        self.height = height
        self.filler = filler

    def get_line(self, row: int) -> str:
        return self.surface.read_line(row)

    def get_char(self, coord: Coordinate) -> str:
        """Return the character at a cell, or "" past the end of its line."""
        line = self.get_line(coord.row)
        if coord.col < 1 or coord.col > len(line):
            return ""
        return line[coord.col - 1]

    def set_char(self, coord: Coordinate, text: str) -> None:
        """Replace the character at a cell with ``text``.

        Pads the line with filler when it is too short, and appends filler
        lines when the row lies past the end of the buffer.
        """
        while self.surface.line_count() < coord.row:
            self.surface.insert_line(self.surface.line_count() + 1, self.filler * self.width)

        line = self.get_line(coord.row)
        if len(line) < coord.col:
            line = line + self.filler * (coord.col - len(line))
        new_line = line[: coord.col - 1] + text + line[coord.col :]
        self.surface.write_line(coord.row, new_line)

    def is_short(self, row: int) -> bool:
        return len(self.get_line(row)) < self.width

    def pad_line(self, row: int, at_col: int) -> None:
        """Insert filler at ``at_col`` until the line is back to board width."""
        line = self.get_line(row)
        missing = self.width - len(line)
        if missing <= 0:
            return
        index = min(max(at_col, 1), len(line) + 1) - 1
        self.surface.write_line(row, line[:index] + self.filler * missing + line[index:])
