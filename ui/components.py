from rich import box
from rich.align import Align
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from models import Coordinate, SessionFinished
from ui.styles import (
    CURSOR_STYLE,
    DRILL_GOLD,
    DRILL_ORANGE,
    ERROR_RED,
    MARKER_CURSOR_STYLE,
    MARKER_STYLE,
    MUTED_GRAY,
    TEXT_WHITE,
    create_complete_header,
    get_speed_style,
)


def split_time(total_seconds: float) -> tuple[int, int, int]:
    """Split seconds into (minutes, seconds, milliseconds)."""
    minutes = int(total_seconds // 60)
    seconds = int(total_seconds % 60)
    millis = int((total_seconds % 1) * 1000)
    return minutes, seconds, millis


def format_elapsed(total_seconds: float) -> str:
    minutes, seconds, millis = split_time(total_seconds)
    return f"{minutes:02d}:{seconds:02d}.{millis:03d}"


class BoardPanel:
    """The drill board with its line number gutter, marker and cursor."""

    def __init__(
        self,
        lines: list[str],
        cursor: Coordinate,
        marker: Coordinate | None = None,
        line_numbers: bool = True,
        relative: bool = True,
        status: str = "",
    ):
        self.lines = lines
        self.cursor = cursor
        self.marker = marker
        self.line_numbers = line_numbers
        self.relative = relative
        self.status = status

    def line_number(self, row: int) -> str:
        """Gutter label for a row, vim style: the cursor row shows its absolute number."""
        if self.relative and row != self.cursor.row:
            return str(abs(row - self.cursor.row))
        return str(row)

    def render(self) -> Panel:
        content = Text()
        gutter_width = len(str(len(self.lines))) + 1

        for row, line in enumerate(self.lines, start=1):
            if self.line_numbers:
                is_cursor_row = row == self.cursor.row
                content.append(
                    f"{self.line_number(row):>{gutter_width}} ",
                    "line_number_current" if is_cursor_row else "line_number",
                )
            # Keep the cursor visible on empty lines
            cells = line if line else " "
            for col, char in enumerate(cells, start=1):
                content.append(char, self._cell_style(row, col))
            if row < len(self.lines):
                content.append("\n")

        return Panel(
            Align.left(content),
            title="Editing Drill",
            subtitle=self.status or None,
            border_style=DRILL_ORANGE,
            box=box.HEAVY,
            padding=(0, 1),
        )

    def _cell_style(self, row: int, col: int) -> Style:
        here = Coordinate(row=row, col=col)
        on_marker = here == self.marker
        on_cursor = here == self.cursor
        if on_marker and on_cursor:
            return MARKER_CURSOR_STYLE
        if on_marker:
            return MARKER_STYLE
        if on_cursor:
            return CURSOR_STYLE
        return Style(color=TEXT_WHITE)

    def __rich__(self) -> Panel:
        return self.render()


class ResultsPanel:
    """Final statistics of a finished session."""

    def __init__(self, finished: SessionFinished):
        self.finished = finished

    def render(self) -> Panel:
        stats = Table(
            show_header=False,
            border_style=MUTED_GRAY,
            box=box.SIMPLE,
        )
        stats.add_column("Label", style=Style(color=MUTED_GRAY))
        stats.add_column("Value", justify="right")

        stats.add_row(
            "Assignments",
            Text(
                f"{self.finished.completed}/{self.finished.total}",
                style=Style(color=DRILL_GOLD, bold=True),
            ),
        )
        stats.add_row("Time elapsed", format_elapsed(self.finished.elapsed_seconds))
        stats.add_row("Key presses", str(self.finished.key_count))
        stats.add_row(
            "Keys per min",
            Text(
                f"{self.finished.keys_per_minute:.1f}",
                style=get_speed_style(self.finished.keys_per_minute),
            ),
        )

        return Panel(
            Align.center(stats),
            title=create_complete_header(),
            border_style=DRILL_GOLD,
            box=box.HEAVY,
            padding=(1, 3),
        )

    def __rich__(self) -> Panel:
        return self.render()


class AbortedPanel:
    """Short summary of an aborted session."""

    def __init__(self, finished: SessionFinished):
        self.finished = finished

    def render(self) -> Panel:
        content = Text()
        content.append("Drill aborted", Style(color=ERROR_RED, bold=True))
        content.append(
            f": {self.finished.completed}/{self.finished.total} assignments solved",
            Style(color=MUTED_GRAY),
        )
        return Panel(content, border_style=ERROR_RED, box=box.HEAVY)

    def __rich__(self) -> Panel:
        return self.render()


class WelcomeScreen:
    """Welcome banner with the key reference."""

    KEY_REFERENCE = [
        ("h j k l", "move"),
        ("0 $ gg G", "line start / end, first / last line"),
        ("x", "delete character"),
        ("r<c>  s<c>", "replace / substitute character"),
        ("i<text>", "insert text"),
        ("dd  yy  yl", "delete line / yank line / yank character"),
        ("p  P", "put after / before"),
        ("u", "undo"),
        (":q", "quit the drill"),
    ]

    def __init__(self, assignment_count: int, width: int, height: int):
        self.assignment_count = assignment_count
        self.width = width
        self.height = height

    def render(self) -> Panel:
        intro = Text()
        intro.append("Editing Drill\n\n", Style(color=DRILL_ORANGE, bold=True))
        intro.append(
            f"{self.assignment_count} assignments on a {self.width}x{self.height} board.\n",
            Style(color=TEXT_WHITE),
        )
        intro.append(
            "Move onto a highlighted marker to see what to do with it.\n"
            "Type keys and press Enter to send them.",
            Style(color=MUTED_GRAY),
        )

        keys = Table(show_header=False, box=box.ROUNDED, border_style=MUTED_GRAY)
        keys.add_column("Keys", style=Style(color=DRILL_GOLD, bold=True))
        keys.add_column("Action", style=Style(color=TEXT_WHITE))
        for key, action in self.KEY_REFERENCE:
            keys.add_row(key, action)

        table = Table.grid(padding=(1, 0))
        table.add_row(intro)
        table.add_row(keys)
        return Panel(
            table,
            border_style=DRILL_ORANGE,
            box=box.HEAVY,
            padding=(1, 3),
        )

    def __rich__(self) -> Panel:
        return self.render()
