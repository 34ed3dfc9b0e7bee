import argparse
import random
import signal
import sys
from pathlib import Path

from loguru import logger
from rich.console import Console

from config import GameConfig, load_config
from editor import KeyInterpreter
from errors import AlreadyRunning, ConfigurationError
from layout import LAYOUT_SEED, generate
from session import SessionTracker, start_session, stop_session
from surface import GridSurface, get_board_surface
from ui import DrillUI
from ui.styles import DEFAULT_THEME

QUIT_COMMANDS = {":q", "q", ":quit"}


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(description="Editing Drill")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for stderr output (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    play_parser = subparsers.add_parser("play", help="Play a drill session (default)")
    add_config_arguments(play_parser)

    layout_parser = subparsers.add_parser(
        "layout", help="Print a generated assignment layout"
    )
    add_config_arguments(layout_parser)

    return parser


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="JSON configuration file",
    )
    parser.add_argument(
        "--count",
        "-n",
        type=int,
        default=None,
        help="Number of assignments (default: 20)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Board width (default: 56)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Board height (default: 18)",
    )
    parser.add_argument(
        "--types",
        "-t",
        type=str,
        default=None,
        help="Comma-separated assignment types (default: delete,replace)",
    )
    parser.add_argument(
        "--no-line-numbers",
        action="store_true",
        help="Hide the line number gutter",
    )
    parser.add_argument(
        "--absolute-numbers",
        action="store_true",
        help="Show absolute instead of relative line numbers",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible layouts",
    )


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )


def resolve_config(args) -> GameConfig:
    """Build the game configuration from the config file and CLI flags."""
    types = None
    if getattr(args, "types", None):
        types = [tag.strip() for tag in args.types.split(",") if tag.strip()]

    return load_config(
        getattr(args, "config", None),
        assignment_count=getattr(args, "count", None),
        assignment_types=types,
        width=getattr(args, "width", None),
        height=getattr(args, "height", None),
        line_numbers_enabled=False if getattr(args, "no_line_numbers", False) else None,
        line_numbers_relative=False if getattr(args, "absolute_numbers", False) else None,
    )


def create_rng(args) -> random.Random | None:
    seed = getattr(args, "seed", None)
    if seed is None:
        return None
    logger.info(f"Using seed {seed}")
    return random.Random(seed)


def create_sigint_handler(tracker: SessionTracker):
    """Create a SIGINT handler that aborts the session before exiting."""

    def sigint_handler(signum, frame):
        stop_session(tracker)
        sys.exit(0)

    return sigint_handler


def play_turn(
    ui: DrillUI,
    surface: GridSurface,
    interpreter: KeyInterpreter,
    tracker: SessionTracker,
) -> None:
    """Draw the board, read one line of keys and apply it."""
    config = tracker.config
    ui.clear_screen()
    ui.render_board(
        surface.lines,
        surface.cursor,
        tracker.assignments.current_coordinate(),
        line_numbers=config.line_numbers.enabled,
        relative=config.line_numbers.relative,
    )
    try:
        keys = ui.read_keys()
    except EOFError:
        stop_session(tracker)
        return

    if keys.strip() in QUIT_COMMANDS:
        stop_session(tracker)
        return
    interpreter.feed(keys)


def run_interactive(args) -> None:
    """Run an interactive drill session."""
    console = Console(theme=DEFAULT_THEME)
    ui = DrillUI(console)

    try:
        config = resolve_config(args)
    except ConfigurationError as e:
        ui.show_error(str(e))
        return

    surface = get_board_surface(config.board.width, config.board.height)
    interpreter = KeyInterpreter(surface)

    ui.clear_screen()
    ui.show_welcome(config.assignment_count, config.board.width, config.board.height)

    try:
        tracker = start_session(config, surface, ui, create_rng(args))
    except (ConfigurationError, AlreadyRunning) as e:
        ui.show_error(str(e))
        return

    signal.signal(signal.SIGINT, create_sigint_handler(tracker))

    while tracker.is_running:
        play_turn(ui, surface, interpreter, tracker)


def run_layout(args) -> None:
    """Print a generated layout, for checking seeds and board sizes."""
    console = Console(theme=DEFAULT_THEME)
    ui = DrillUI(console)
    try:
        config = resolve_config(args)
        layout = generate(
            config.board.width,
            config.board.height,
            config.assignment_count,
            config.assignment_types,
            create_rng(args),
        )
    except ConfigurationError as e:
        ui.show_error(str(e))
        return

    seed = args.seed if args.seed is not None else LAYOUT_SEED
    console.print(f"Seed: {seed}")
    for index, (coord, tag) in enumerate(layout, start=1):
        console.print(f"{index:>3}. {tag:<12} {coord.row}:{coord.col}")


def main():
    """Main entry point with CLI routing."""
    parser = create_parser()
    args = parser.parse_args()
    configure_logging(args.log_level)

    if args.command == "layout":
        run_layout(args)
    else:
        # Default to interactive mode
        run_interactive(args)


if __name__ == "__main__":
    main()
