from typing import List, Optional, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from models import Coordinate, SessionFinished
from ui.components import AbortedPanel, BoardPanel, ResultsPanel, WelcomeScreen
from ui.styles import DEFAULT_THEME, get_notice_style


class DrillUI:
    """Terminal presenter for drill sessions.

    Events from the core are collected and shown under the board on the
    next redraw; final results are printed immediately.
    """

    def __init__(self, console: Optional[Console] = None):
        if console is None:
            console = Console(theme=DEFAULT_THEME)
        else:
            console.push_theme(DEFAULT_THEME)
        self.console = console
        self.status = ""
        self.tip = ""
        self.messages: List[Tuple[str, str]] = []

    # ------------------------------------------------------------------
    # Presenter callbacks
    # ------------------------------------------------------------------

    def show_instruction(self, text: str) -> None:
        self.messages.append((text, "info"))

    def show_next_target(self, kind: str, coord: Coordinate, description: str) -> None:
        self.tip = f"Next target ({kind} @ {coord.row}:{coord.col}): {description}"

    def show_notice(self, message: str, level: str = "info") -> None:
        self.messages.append((message, level))

    def show_status(self, completed: int, total: int, key_count: int) -> None:
        self.status = f" Drill {completed:02d}/{total:02d} | Keys {key_count} "

    def show_complete(self) -> None:
        self.tip = "Drill complete!"

    def show_results(self, finished: SessionFinished) -> None:
        self.console.print(ResultsPanel(finished))

    def show_aborted(self, finished: SessionFinished) -> None:
        self.console.print(AbortedPanel(finished))

    # ------------------------------------------------------------------
    # Screens
    # ------------------------------------------------------------------

    def show_welcome(self, assignment_count: int, width: int, height: int) -> None:
        """Display the welcome screen and wait for user to press Enter."""
        self.console.print(WelcomeScreen(assignment_count, width, height))
        self.console.print()
        self.console.input(Text("Press Enter to start...", style="muted"))

    def render_board(
        self,
        lines: List[str],
        cursor: Coordinate,
        marker: Optional[Coordinate],
        line_numbers: bool = True,
        relative: bool = True,
    ) -> None:
        """Draw the board, the next-target tip and any pending messages."""
        status = f"{self.status}| {cursor.row}:{cursor.col} " if self.status else ""
        self.console.print(
            BoardPanel(
                lines,
                cursor,
                marker=marker,
                line_numbers=line_numbers,
                relative=relative,
                status=status,
            )
        )
        if self.tip:
            self.console.print(Text(self.tip, style="secondary"))
        for message, level in self.messages:
            self.console.print(Text(message, style=get_notice_style(level)))
        self.messages = []

    def read_keys(self) -> str:
        """Read one line of keys from the user."""
        return self.console.input(Text("keys> ", style="muted"))

    def show_error(self, message: str) -> None:
        """Display an error message."""
        self.console.print(
            Panel(
                Text(f"Error: {message}", style="error"),
                title="Error",
                border_style="error",
            )
        )

    def clear_screen(self) -> None:
        """Clear the terminal screen."""
        self.console.clear()
