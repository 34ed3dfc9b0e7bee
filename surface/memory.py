"""In-memory text surface with edit-tracking anchors."""

import time
from typing import Callable, NamedTuple

from errors import Invalidated
from models import FILLER, Coordinate
from .base import (
    CloseListener,
    CursorListener,
    EditListener,
    KeyListener,
    TextSurface,
    Unsubscribe,
)


class SurfaceSnapshot(NamedTuple):
    lines: tuple[str, ...]
    anchors: dict[int, tuple[int, int] | None]
    cursor: Coordinate


class GridSurface(TextSurface):
    """A list of lines plus an arena of anchors keyed by handle.

    Anchors have left gravity: text inserted exactly at an anchor's column
    does not move it, text inserted before it pushes it right. Deleting a
    range that contains the anchor collapses it onto the start of the range.
    Every mutation notifies edit listeners synchronously.

    Undo points are recorded by the caller with ``begin_change``. Any write
    made by an edit listener clears the undo history.
    """

    def __init__(self, lines: list[str], clock: Callable[[], float] | None = None):
        self._lines = list(lines) or [""]
        self._clock = clock or time.monotonic
        self._anchors: dict[int, tuple[int, int] | None] = {}
        self._next_handle = 1
        self._cursor = Coordinate(row=1, col=1)
        self._edit_listeners: list[EditListener] = []
        self._cursor_listeners: list[CursorListener] = []
        self._key_listeners: list[KeyListener] = []
        self._close_listeners: list[CloseListener] = []
        self._undo: list[SurfaceSnapshot] = []
        self._notify_depth = 0
        self.closed = False

    @classmethod
    def blank(
        cls,
        width: int,
        height: int,
        filler: str = FILLER,
        clock: Callable[[], float] | None = None,
    ) -> "GridSurface":
        """Create a board of ``height`` lines of ``width`` filler characters."""
        return cls([filler * width for _ in range(height)], clock=clock)

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def cursor(self) -> Coordinate:
        return self._cursor

    # ------------------------------------------------------------------
    # Line access
    # ------------------------------------------------------------------

    def line_count(self) -> int:
        return len(self._lines)

    def read_line(self, row: int) -> str:
        if 1 <= row <= len(self._lines):
            return self._lines[row - 1]
        return ""

    def write_line(self, row: int, text: str) -> None:
        self._check_row(row)
        self._lines[row - 1] = text
        self._notify_edit()

    def insert_line(self, row: int, text: str) -> None:
        if not 1 <= row <= len(self._lines) + 1:
            raise IndexError(f"Cannot insert line at {row}")
        self._lines.insert(row - 1, text)
        for handle, pos in self._anchors.items():
            if pos is not None and pos[0] >= row:
                self._anchors[handle] = (pos[0] + 1, pos[1])
        self._notify_edit()

    def remove_line(self, row: int) -> None:
        self._check_row(row)
        del self._lines[row - 1]
        for handle, pos in self._anchors.items():
            if pos is None:
                continue
            if pos[0] == row:
                self._anchors[handle] = None
            elif pos[0] > row:
                self._anchors[handle] = (pos[0] - 1, pos[1])
        if not self._lines:
            self._lines.append("")
        self._clamp_cursor()
        self._notify_edit()

    # ------------------------------------------------------------------
    # Character edits
    # ------------------------------------------------------------------

    def insert_text(self, row: int, col: int, text: str) -> None:
        """Insert ``text`` so that its first character lands on ``col``."""
        self._check_row(row)
        line = self._lines[row - 1]
        col = min(max(col, 1), len(line) + 1)
        self._lines[row - 1] = line[: col - 1] + text + line[col - 1 :]
        for handle, pos in self._anchors.items():
            if pos is not None and pos[0] == row and pos[1] > col:
                self._anchors[handle] = (row, pos[1] + len(text))
        self._notify_edit()

    def delete_text(self, row: int, col: int, length: int = 1) -> str:
        """Delete ``length`` characters starting at ``col``. Returns them."""
        self._check_row(row)
        line = self._lines[row - 1]
        if col < 1 or col > len(line) or length <= 0:
            return ""
        end = min(col + length, len(line) + 1)
        removed = line[col - 1 : end - 1]
        self._lines[row - 1] = line[: col - 1] + line[end - 1 :]
        for handle, pos in self._anchors.items():
            if pos is None or pos[0] != row:
                continue
            if pos[1] >= end:
                self._anchors[handle] = (row, pos[1] - len(removed))
            elif pos[1] >= col:
                self._anchors[handle] = (row, col)
        self._notify_edit()
        return removed

    def replace_char(self, row: int, col: int, char: str) -> None:
        self._check_row(row)
        line = self._lines[row - 1]
        if col < 1 or col > len(line):
            return
        self._lines[row - 1] = line[: col - 1] + char + line[col:]
        self._notify_edit()

    # ------------------------------------------------------------------
    # Anchors
    # ------------------------------------------------------------------

    def create_anchor(self, row: int, col: int) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._anchors[handle] = (row, col)
        return handle

    def dereference(self, handle: int) -> Coordinate:
        pos = self._anchors.get(handle)
        if pos is None:
            raise Invalidated(f"Anchor {handle} is no longer in the buffer")
        return Coordinate(row=pos[0], col=pos[1])

    def release(self, handle: int) -> None:
        self._anchors.pop(handle, None)

    # ------------------------------------------------------------------
    # Cursor, keys, lifecycle
    # ------------------------------------------------------------------

    def set_cursor(self, row: int, col: int) -> None:
        self._cursor = Coordinate(row=row, col=col)
        self._clamp_cursor()
        for listener in list(self._cursor_listeners):
            listener(self._cursor)

    def press_key(self, key: str) -> None:
        for listener in list(self._key_listeners):
            listener(key)

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        for listener in list(self._close_listeners):
            listener()

    def now(self) -> float:
        return self._clock()

    def snapshot(self) -> SurfaceSnapshot:
        return SurfaceSnapshot(tuple(self._lines), dict(self._anchors), self._cursor)

    def restore(self, snapshot: SurfaceSnapshot) -> None:
        """Restore lines and the positions of anchors that are still tracked."""
        self._lines = list(snapshot.lines)
        for handle in self._anchors:
            if handle in snapshot.anchors:
                self._anchors[handle] = snapshot.anchors[handle]
        self._cursor = snapshot.cursor
        self._clamp_cursor()
        self._notify_edit()

    def begin_change(self) -> None:
        """Record an undo point before a user change."""
        self._undo.append(self.snapshot())

    def undo(self) -> bool:
        """Revert the most recent user change. Returns False if there is none."""
        if not self._undo:
            return False
        self.restore(self._undo.pop())
        return True

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe_edits(self, listener: EditListener) -> Unsubscribe:
        return self._subscribe(self._edit_listeners, listener)

    def subscribe_cursor_moves(self, listener: CursorListener) -> Unsubscribe:
        return self._subscribe(self._cursor_listeners, listener)

    def subscribe_keys(self, listener: KeyListener) -> Unsubscribe:
        return self._subscribe(self._key_listeners, listener)

    def subscribe_close(self, listener: CloseListener) -> Unsubscribe:
        return self._subscribe(self._close_listeners, listener)

    @staticmethod
    def _subscribe(listeners: list, listener) -> Unsubscribe:
        listeners.append(listener)
        return Unsubscribe(listeners, listener)

    def _notify_edit(self) -> None:
        # Writes made by a listener while it handles an edit are not user
        # changes; undoing across them would bring back stale board content
        if self._notify_depth:
            self._undo.clear()
        self._notify_depth += 1
        try:
            for listener in list(self._edit_listeners):
                listener()
        finally:
            self._notify_depth -= 1

    def _check_row(self, row: int) -> None:
        if not 1 <= row <= len(self._lines):
            raise IndexError(f"Line {row} out of range (1-{len(self._lines)})")

    def _clamp_cursor(self) -> None:
        row = min(max(self._cursor.row, 1), len(self._lines))
        width = max(len(self._lines[row - 1]), 1)
        col = min(max(self._cursor.col, 1), width)
        self._cursor = Coordinate(row=row, col=col)
