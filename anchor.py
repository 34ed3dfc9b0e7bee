"""Positions that follow their cell's content across edits."""

from errors import Invalidated
from models import Coordinate
from surface import TextSurface


class AnchoredPosition:
    """A cell tracked by the surface, like an editor mark.

    Edits elsewhere in the buffer move the reported coordinate so that it
    keeps pointing at the same logical cell.
    """

    def __init__(self, surface: TextSurface, coord: Coordinate):
        self._surface = surface
        self._handle: int | None = surface.create_anchor(coord.row, coord.col)

    @property
    def released(self) -> bool:
        return self._handle is None

    def current_coordinate(self) -> Coordinate:
        """Return where the anchored cell is now.

        Raises:
            Invalidated: If the anchor was released or its line was deleted.
        """
        if self._handle is None:
            raise Invalidated("Anchor has been released")
        return self._surface.dereference(self._handle)

    def release(self) -> None:
        if self._handle is None:
            return
        self._surface.release(self._handle)
        self._handle = None
