"""Boundary between the drill core and whatever displays it."""

from typing import Literal, Protocol

from models import Coordinate, SessionFinished

NoticeLevel = Literal["info", "warning", "error"]


class Presenter(Protocol):
    """Display callbacks the core emits. Implemented by ui.DrillUI."""

    def show_instruction(self, text: str) -> None: ...

    def show_next_target(self, kind: str, coord: Coordinate, description: str) -> None: ...

    def show_notice(self, message: str, level: NoticeLevel = "info") -> None: ...

    def show_status(self, completed: int, total: int, key_count: int) -> None: ...

    def show_complete(self) -> None: ...

    def show_results(self, finished: SessionFinished) -> None: ...

    def show_aborted(self, finished: SessionFinished) -> None: ...


class NullPresenter:
    """Presenter that displays nothing."""

    def show_instruction(self, text: str) -> None:
        pass

    def show_next_target(self, kind: str, coord: Coordinate, description: str) -> None:
        pass

    def show_notice(self, message: str, level: NoticeLevel = "info") -> None:
        pass

    def show_status(self, completed: int, total: int, key_count: int) -> None:
        pass

    def show_complete(self) -> None:
        pass

    def show_results(self, finished: SessionFinished) -> None:
        pass

    def show_aborted(self, finished: SessionFinished) -> None:
        pass
