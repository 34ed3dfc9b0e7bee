"""The assignment queue and its state machine.

Exactly one assignment is live at a time. Its marker is written into the
board and an anchor follows the marker cell through the user's edits. Every
edit notification re-checks the live assignment at the anchored cell; on
success the board is cleaned up and the next assignment is spawned.
"""

from typing import Callable, Iterable

from loguru import logger

from anchor import AnchoredPosition
from assignments import AssignmentHandler, lookup
from board import Board
from errors import AssignmentStateError, Invalidated, UnknownType
from models import Assignment, AssignmentPhase, Coordinate
from presenter import NullPresenter, Presenter


class AssignmentState:
    """Owns the assignment queue and the single current assignment."""

    def __init__(
        self,
        board: Board,
        presenter: Presenter | None = None,
        on_progress: Callable[[], None] | None = None,
        on_exhausted: Callable[[], None] | None = None,
    ):
        self.board = board
        self.presenter = presenter or NullPresenter()
        self.on_progress = on_progress
        self.on_exhausted = on_exhausted

        self.queue: list[Assignment] = []
        self.current: Assignment | None = None
        self.phase = AssignmentPhase.IDLE
        self.total = 0
        self.completed = 0
        self.skipped = 0

        # Set while the state machine writes to the board itself
        self._writing = False

    def populate(self, layout: Iterable[tuple[Coordinate, object]]) -> None:
        """Build the queue from (cell, tag) pairs, skipping unknown tags."""
        self.queue = []
        self.total = 0
        for index, (coord, tag) in enumerate(layout, start=1):
            self.total += 1
            try:
                handler = lookup(tag)
            except UnknownType as e:
                logger.warning(f"Skipping assignment {index}: {e}")
                self.presenter.show_notice(str(e), level="error")
                continue
            self.queue.append(Assignment(id=index, kind=handler.kind, planned=coord))

    def current_coordinate(self) -> Coordinate | None:
        """Where the live marker is now, or None."""
        if self.current is None or self.current.anchor is None:
            return None
        try:
            return self.current.anchor.current_coordinate()
        except Invalidated:
            return None

    def activate_next(self) -> bool:
        """Spawn the head of the queue.

        Returns:
            False if the queue was empty (the state machine is exhausted).

        Raises:
            AssignmentStateError: If an assignment is already current.
        """
        if self.current is not None:
            raise AssignmentStateError(
                f"Assignment {self.current.id} is still current"
            )
        if not self.queue:
            self.phase = AssignmentPhase.EXHAUSTED
            return False

        self.phase = AssignmentPhase.SPAWNING
        assignment = self.queue.pop(0)
        handler = lookup(assignment.kind)
        assignment.done = False
        assignment.instruction_shown = False
        assignment.stage = 0

        self._writing = True
        try:
            self.board.set_char(assignment.planned, handler.marker)
        finally:
            self._writing = False
        assignment.anchor = AnchoredPosition(self.board.surface, assignment.planned)

        self.current = assignment
        self.phase = AssignmentPhase.AWAITING_COMPLETION
        logger.debug(f"Spawned assignment {assignment.id} <{assignment.kind.value}> at {assignment.planned}")
        self.presenter.show_next_target(
            assignment.kind.value, assignment.planned, handler.description
        )
        return True

    def on_edit_notification(self) -> None:
        """Re-check the current assignment after any edit to the board."""
        if self._writing:
            return
        assignment = self.current
        if assignment is None or assignment.done:
            return

        try:
            coord = assignment.anchor.current_coordinate()
        except Invalidated:
            self._skip(assignment)
            return

        handler = lookup(assignment.kind)
        if handler.check(self.board, coord, assignment):
            self._complete(assignment, handler, coord)

    def on_cursor_notification(self, cursor: Coordinate) -> None:
        """Show the instruction the first time the cursor lands on the marker."""
        assignment = self.current
        if assignment is None or assignment.done or assignment.instruction_shown:
            return
        if cursor != self.current_coordinate():
            return
        assignment.instruction_shown = True
        self.presenter.show_instruction(lookup(assignment.kind).instruction())

    def teardown(self) -> None:
        """Release the live anchor. Used when the session ends early."""
        if self.current is not None and self.current.anchor is not None:
            self.current.anchor.release()
        self.current = None
        self.phase = AssignmentPhase.EXHAUSTED

    def _complete(
        self,
        assignment: Assignment,
        handler: AssignmentHandler,
        coord: Coordinate,
    ) -> None:
        self.phase = AssignmentPhase.COMPLETING
        assignment.done = True

        self._writing = True
        try:
            handler.cleanup(self.board, coord, assignment)
        finally:
            self._writing = False

        assignment.anchor.release()
        self.completed += 1
        self.current = None
        self.phase = AssignmentPhase.IDLE
        logger.debug(f"Completed assignment {assignment.id} ({self.completed}/{self.total})")
        self._advance()

    def _skip(self, assignment: Assignment) -> None:
        # The marker's line was deleted, so the assignment can never be solved
        logger.warning(
            f"Assignment {assignment.id} <{assignment.kind.value}> lost its line; skipping"
        )
        self.presenter.show_notice(
            f"The <{assignment.kind.value}> marker was deleted along with its line. "
            "Skipping to the next assignment.",
            level="info",
        )
        assignment.anchor.release()
        self.skipped += 1
        self.current = None
        self.phase = AssignmentPhase.IDLE
        self._advance()

    def _advance(self) -> None:
        if self.on_progress:
            self.on_progress()
        if not self.activate_next() and self.on_exhausted:
            self.on_exhausted()
