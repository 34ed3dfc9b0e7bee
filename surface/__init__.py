"""Text surfaces the drill can run on.

Provides the abstract capability interface the core depends on and an
in-memory implementation used by the terminal front end and the tests.
"""

from models import FILLER

from .base import (
    CloseListener,
    CursorListener,
    EditListener,
    KeyListener,
    TextSurface,
    Unsubscribe,
)
from .memory import GridSurface, SurfaceSnapshot

__all__ = [
    # Abstract interface
    "TextSurface",
    "Unsubscribe",
    "EditListener",
    "CursorListener",
    "KeyListener",
    "CloseListener",
    # In-memory implementation
    "GridSurface",
    "SurfaceSnapshot",
    # Factory
    "get_board_surface",
]


def get_board_surface(width: int, height: int, filler: str = FILLER) -> GridSurface:
    """Get a blank in-memory board of the given size."""
    return GridSurface.blank(width, height, filler)
