"""Abstract interface of the text surface the drill runs on."""

from abc import ABC, abstractmethod
from typing import Any, Callable

from models import Coordinate


EditListener = Callable[[], None]
CursorListener = Callable[[Coordinate], None]
KeyListener = Callable[[str], None]
CloseListener = Callable[[], None]


class Unsubscribe:
    """Handle returned by every ``subscribe_*`` call.

    Calling it detaches the listener. Calling it again does nothing.
    """

    def __init__(self, listeners: list, listener: Callable[..., Any]):
        self._listeners = listeners
        self._listener = listener
        self.active = True

    def __call__(self) -> None:
        if not self.active:
            return
        self.active = False
        if self._listener in self._listeners:
            self._listeners.remove(self._listener)


class TextSurface(ABC):
    """Capabilities the drill needs from an editor buffer.

    Rows and columns are 1-based throughout.
    """

    @abstractmethod
    def line_count(self) -> int:
        """Return the number of lines in the buffer."""
        pass

    @abstractmethod
    def read_line(self, row: int) -> str:
        """Return the text of a line, or an empty string past the end."""
        pass

    @abstractmethod
    def write_line(self, row: int, text: str) -> None:
        """Replace the text of an existing line."""
        pass

    @abstractmethod
    def insert_line(self, row: int, text: str) -> None:
        """Insert a new line so that it becomes line ``row``."""
        pass

    @abstractmethod
    def remove_line(self, row: int) -> None:
        """Delete a line entirely. Anchors on it are invalidated."""
        pass

    @abstractmethod
    def create_anchor(self, row: int, col: int) -> int:
        """Start tracking a cell. Returns an opaque handle.

        Creating an anchor never changes buffer content.
        """
        pass

    @abstractmethod
    def dereference(self, handle: int) -> Coordinate:
        """Return the current cell of an anchor.

        Raises:
            Invalidated: If the anchor's line was deleted or it was released.
        """
        pass

    @abstractmethod
    def release(self, handle: int) -> None:
        """Stop tracking an anchor. Releasing twice is allowed."""
        pass

    @abstractmethod
    def subscribe_edits(self, listener: EditListener) -> Unsubscribe:
        pass

    @abstractmethod
    def subscribe_cursor_moves(self, listener: CursorListener) -> Unsubscribe:
        pass

    @abstractmethod
    def subscribe_keys(self, listener: KeyListener) -> Unsubscribe:
        pass

    @abstractmethod
    def subscribe_close(self, listener: CloseListener) -> Unsubscribe:
        pass

    @abstractmethod
    def now(self) -> float:
        """Monotonic timestamp in seconds."""
        pass
