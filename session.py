"""Session lifecycle: statistics, subscriptions and the single session slot."""

import random
from typing import Callable

from loguru import logger

from assignment_state import AssignmentState
from board import Board
from config import GameConfig
from errors import AlreadyRunning
from layout import LAYOUT_SEED, generate
from models import SessionFinished, SessionStats, SessionStatus
from presenter import NullPresenter, Presenter
from surface import TextSurface, Unsubscribe


class SessionTracker:
    """Drives one drill session from start to finish or abort.

    A tracker is single-use: once Finished or Aborted, a new session needs
    a new tracker.
    """

    def __init__(
        self,
        config: GameConfig,
        surface: TextSurface,
        presenter: Presenter | None = None,
        rng: random.Random | None = None,
    ):
        self.config = config
        self.surface = surface
        self.presenter = presenter or NullPresenter()
        self.rng = rng

        self.status = SessionStatus.NOT_STARTED
        self.stats: SessionStats | None = None
        self.result: SessionFinished | None = None

        self.board = Board(surface, config.board.width, config.board.height)
        self.assignments = AssignmentState(
            self.board,
            self.presenter,
            on_progress=self._on_progress,
            on_exhausted=self._on_exhausted,
        )
        self._subscriptions: list[Unsubscribe] = []
        self._finish_listeners: list[Callable[[SessionFinished], None]] = []

    @property
    def is_running(self) -> bool:
        return self.status == SessionStatus.RUNNING

    def add_finish_listener(self, listener: Callable[[SessionFinished], None]) -> None:
        self._finish_listeners.append(listener)

    def start(self) -> None:
        """Lay out the assignments and spawn the first one.

        Raises:
            AlreadyRunning: If this tracker has already been started.
            ConfigurationError: If the layout cannot be generated.
        """
        if self.status != SessionStatus.NOT_STARTED:
            raise AlreadyRunning(f"Session is already {self.status.value}")

        self.stats = SessionStats(
            start_time=self.surface.now(),
            total=self.config.assignment_count,
        )
        layout = generate(
            self.config.board.width,
            self.config.board.height,
            self.config.assignment_count,
            self.config.assignment_types,
            self.rng,
        )
        self.assignments.populate(layout)
        self.stats.total = self.assignments.total

        self._subscriptions = [
            self.surface.subscribe_edits(self.assignments.on_edit_notification),
            self.surface.subscribe_cursor_moves(self.assignments.on_cursor_notification),
            self.surface.subscribe_keys(self._on_key),
            self.surface.subscribe_close(self._on_surface_closed),
        ]
        self.status = SessionStatus.RUNNING
        source = f"seed {LAYOUT_SEED}" if self.rng is None else "caller-supplied RNG"
        logger.info(
            f"Session started: {self.stats.total} assignments on a "
            f"{self.config.board.width}x{self.config.board.height} board ({source})"
        )

        if not self.assignments.activate_next():
            self._on_exhausted()
            return
        self._on_progress()

    def record_keypress(self) -> None:
        if not self.is_running:
            return
        self.stats.key_count += 1
        self._show_status()

    def finish(self, aborted: bool = False) -> SessionFinished:
        """End the session and report its statistics.

        Calling it again returns the same statistics without side effects.
        """
        if self.result is not None:
            return self.result

        for unsubscribe in self._subscriptions:
            unsubscribe()
        self._subscriptions = []
        self.assignments.teardown()

        now = self.surface.now()
        stats = self.stats or SessionStats(start_time=now, total=self.config.assignment_count)
        stats.completed = self.assignments.completed

        self.result = SessionFinished(
            completed=stats.completed,
            total=stats.total,
            elapsed_seconds=stats.elapsed_seconds(now),
            key_count=stats.key_count,
            keys_per_minute=stats.keys_per_minute(now),
            aborted=aborted,
        )
        self.status = SessionStatus.ABORTED if aborted else SessionStatus.FINISHED
        logger.info(
            f"Session {self.status.value}: {self.result.completed}/{self.result.total} "
            f"in {self.result.elapsed_seconds:.1f}s, {self.result.key_count} keys"
        )

        if aborted:
            self.presenter.show_aborted(self.result)
        else:
            self.presenter.show_results(self.result)
        for listener in self._finish_listeners:
            listener(self.result)
        return self.result

    def _on_key(self, key: str) -> None:
        self.record_keypress()

    def _on_progress(self) -> None:
        if self.stats is not None:
            self.stats.completed = self.assignments.completed
        self._show_status()

    def _on_exhausted(self) -> None:
        if self.assignments.completed == self.assignments.total:
            self.presenter.show_complete()
        else:
            logger.warning(
                f"Ran out of assignments at {self.assignments.completed}/{self.assignments.total}"
            )
        self.finish(aborted=False)

    def _on_surface_closed(self) -> None:
        if self.is_running:
            self.finish(aborted=True)

    def _show_status(self) -> None:
        if self.stats is None:
            return
        self.presenter.show_status(
            self.assignments.completed, self.stats.total, self.stats.key_count
        )


class SessionManager:
    """Holds the one live session of the process."""

    def __init__(self):
        self.active: SessionTracker | None = None

    def start_session(
        self,
        config: GameConfig,
        surface: TextSurface,
        presenter: Presenter | None = None,
        rng: random.Random | None = None,
    ) -> SessionTracker:
        """Start a new session.

        Raises:
            AlreadyRunning: If a session is live. It is left untouched.
        """
        if self.active is not None and self.active.is_running:
            logger.warning("A drill session is already running")
            raise AlreadyRunning("A drill session is already running")

        tracker = SessionTracker(config, surface, presenter, rng)
        tracker.add_finish_listener(lambda _: self._release(tracker))
        self.active = tracker
        try:
            tracker.start()
        except Exception:
            self._release(tracker)
            raise
        return tracker

    def stop_session(self, handle: SessionTracker | None = None) -> SessionFinished | None:
        """Abort a running session. Returns its statistics, or None if none ran."""
        tracker = handle or self.active
        if tracker is None or not tracker.is_running:
            logger.info("No drill session is running")
            return None
        return tracker.finish(aborted=True)

    def _release(self, tracker: SessionTracker) -> None:
        if self.active is tracker:
            self.active = None


SESSION_MANAGER = SessionManager()


def start_session(
    config: GameConfig,
    surface: TextSurface,
    presenter: Presenter | None = None,
    rng: random.Random | None = None,
) -> SessionTracker:
    """Start a session in the process-wide slot."""
    return SESSION_MANAGER.start_session(config, surface, presenter, rng)


def stop_session(handle: SessionTracker | None = None) -> SessionFinished | None:
    """Abort the process-wide session."""
    return SESSION_MANAGER.stop_session(handle)
