"""A small vi-like key interpreter driving a GridSurface.

Supported commands (an optional count prefix repeats motions, ``x``,
``dd`` and ``p``/``P``)::

    h j k l 0 $ gg G      motions
    x                     delete character under the cursor
    r<c>                  replace character under the cursor
    s<c>                  substitute character under the cursor
    i<text><Esc>          insert before the cursor
    a<text><Esc>          append after the cursor
    dd                    delete line
    yy / yl               yank line / character
    p / P                 put after / before
    u                     undo

Insert text runs until an Esc character or the end of the key string.
"""

from dataclasses import dataclass

from loguru import logger

from surface import GridSurface

ESC = "\x1b"


@dataclass
class Register:
    text: str
    linewise: bool = False


class KeyInterpreter:
    """Turns key strings into edits and cursor moves on a surface."""

    def __init__(self, surface: GridSurface):
        self.surface = surface
        self.register: Register | None = None

    def feed(self, keys: str) -> None:
        """Press every key, then execute the commands they spell."""
        for key in keys:
            self.surface.press_key(key)

        i = 0
        while i < len(keys) and not self.surface.closed:
            i = self._execute(keys, i)

    # ------------------------------------------------------------------
    # Command parsing
    # ------------------------------------------------------------------

    def _execute(self, keys: str, i: int) -> int:
        count_digits = ""
        while i < len(keys) and keys[i].isdigit() and (count_digits or keys[i] != "0"):
            count_digits += keys[i]
            i += 1
        count = int(count_digits) if count_digits else 1
        if i >= len(keys):
            return i

        key = keys[i]
        i += 1
        row, col = self.surface.cursor.row, self.surface.cursor.col

        if key in "hjkl":
            d_row = {"j": count, "k": -count}.get(key, 0)
            d_col = {"l": count, "h": -count}.get(key, 0)
            self.surface.set_cursor(row + d_row, col + d_col)
        elif key == "0":
            self.surface.set_cursor(row, 1)
        elif key == "$":
            self.surface.set_cursor(row, len(self.surface.read_line(row)))
        elif key == "G":
            target = count if count_digits else self.surface.line_count()
            self.surface.set_cursor(target, col)
        elif key == "x":
            self._change()
            removed = self.surface.delete_text(row, col, count)
            if removed:
                self.register = Register(removed)
            self.surface.set_cursor(row, col)
        elif key in "rs":
            if i >= len(keys):
                return i
            char = keys[i]
            i += 1
            self._change()
            if key == "s" and col > len(self.surface.read_line(row)):
                self.surface.insert_text(row, col, char)
            else:
                # Single edit: listeners only see the final character
                self.surface.replace_char(row, col, char)
            self.surface.set_cursor(row, col)
        elif key in "ia":
            end = keys.find(ESC, i)
            if end == -1:
                end = len(keys)
            text = keys[i:end]
            i = min(end + 1, len(keys))
            if text:
                at = col + 1 if key == "a" else col
                self._change()
                self.surface.insert_text(row, at, text)
                self.surface.set_cursor(row, at + len(text) - 1)
        elif key in "dgy":
            if i >= len(keys):
                return i
            second = keys[i]
            i += 1
            self._operator(key + second, count)
        elif key in "pP":
            self._put(after=key == "p", count=count)
        elif key == "u":
            for _ in range(count):
                if not self.surface.undo():
                    break
        else:
            logger.debug(f"Ignoring unsupported key {key!r}")
        return i

    def _operator(self, command: str, count: int) -> None:
        row, col = self.surface.cursor.row, self.surface.cursor.col
        if command == "gg":
            self.surface.set_cursor(1, col)
        elif command == "dd":
            removed = []
            self._change()
            for _ in range(count):
                if row > self.surface.line_count():
                    break
                removed.append(self.surface.read_line(row))
                self.surface.remove_line(row)
            self.register = Register("\n".join(removed), linewise=True)
            self.surface.set_cursor(row, col)
        elif command == "yy":
            last = min(row + count - 1, self.surface.line_count())
            lines = [self.surface.read_line(r) for r in range(row, last + 1)]
            self.register = Register("\n".join(lines), linewise=True)
        elif command == "yl":
            self.register = Register(self.surface.read_line(row)[col - 1 : col - 1 + count])
        else:
            logger.debug(f"Ignoring unsupported command {command!r}")

    def _put(self, after: bool, count: int) -> None:
        if self.register is None or not self.register.text:
            return
        row, col = self.surface.cursor.row, self.surface.cursor.col
        self._change()
        if self.register.linewise:
            target = row + 1 if after else row
            for _ in range(count):
                for offset, line in enumerate(self.register.text.split("\n")):
                    self.surface.insert_line(target + offset, line)
            self.surface.set_cursor(target, 1)
        else:
            at = col + 1 if after else col
            text = self.register.text * count
            self.surface.insert_text(row, at, text)
            self.surface.set_cursor(row, at + len(text) - 1)

    def _change(self) -> None:
        self.surface.begin_change()
