"""Tests for the vi-like key interpreter."""

import pytest

from editor import ESC, KeyInterpreter
from models import Coordinate
from session import SessionTracker
from surface import GridSurface


@pytest.fixture
def text_surface(clock) -> GridSurface:
    return GridSurface(["abcdef", "ghijkl", "mnopqr"], clock=clock)


@pytest.fixture
def interpreter(text_surface) -> KeyInterpreter:
    return KeyInterpreter(text_surface)


class TestMotions:
    """Tests for cursor motions."""

    def test_hjkl(self, interpreter, text_surface):
        interpreter.feed("jll")
        assert text_surface.cursor == Coordinate(row=2, col=3)
        interpreter.feed("kh")
        assert text_surface.cursor == Coordinate(row=1, col=2)

    def test_counts(self, interpreter, text_surface):
        interpreter.feed("2j3l")
        assert text_surface.cursor == Coordinate(row=3, col=4)

    def test_line_start_end(self, interpreter, text_surface):
        interpreter.feed("$")
        assert text_surface.cursor.col == 6
        interpreter.feed("0")
        assert text_surface.cursor.col == 1

    def test_first_last_line(self, interpreter, text_surface):
        interpreter.feed("G")
        assert text_surface.cursor.row == 3
        interpreter.feed("gg")
        assert text_surface.cursor.row == 1

    def test_count_before_g_jumps_to_line(self, interpreter, text_surface):
        interpreter.feed("2G")
        assert text_surface.cursor.row == 2
        interpreter.feed("9G")
        assert text_surface.cursor.row == 3

    def test_every_key_is_reported(self, interpreter, text_surface):
        keys = []
        text_surface.subscribe_keys(keys.append)
        interpreter.feed("2jx")
        assert keys == ["2", "j", "x"]


class TestEdits:
    """Tests for editing commands."""

    def test_x(self, interpreter, text_surface):
        interpreter.feed("lx")
        assert text_surface.read_line(1) == "acdef"
        assert interpreter.register.text == "b"

    def test_count_x(self, interpreter, text_surface):
        interpreter.feed("3x")
        assert text_surface.read_line(1) == "def"

    def test_replace(self, interpreter, text_surface):
        interpreter.feed("rZ")
        assert text_surface.read_line(1) == "Zbcdef"

    def test_substitute(self, interpreter, text_surface):
        interpreter.feed("ls9")
        assert text_surface.read_line(1) == "a9cdef"

    def test_insert_until_escape(self, interpreter, text_surface):
        interpreter.feed(f"llihey{ESC}x")
        assert text_surface.read_line(1) == "abhecdef"

    def test_append(self, interpreter, text_surface):
        interpreter.feed("a12")
        assert text_surface.read_line(1) == "a12bcdef"

    def test_dd_and_put(self, interpreter, text_surface):
        interpreter.feed("dd")
        assert text_surface.lines == ["ghijkl", "mnopqr"]
        interpreter.feed("p")
        assert text_surface.lines == ["ghijkl", "abcdef", "mnopqr"]

    def test_yy_put_before(self, interpreter, text_surface):
        interpreter.feed("jyyP")
        assert text_surface.lines == ["abcdef", "ghijkl", "ghijkl", "mnopqr"]

    def test_counted_yank_stops_at_last_line(self, interpreter, text_surface):
        interpreter.feed("j5yy")
        assert interpreter.register.text == "ghijkl\nmnopqr"
        interpreter.feed("Gp")
        assert text_surface.lines == ["abcdef", "ghijkl", "mnopqr", "ghijkl", "mnopqr"]

    def test_yl_put(self, interpreter, text_surface):
        interpreter.feed("yllp")
        assert text_surface.read_line(1) == "abacdef"

    def test_undo(self, interpreter, text_surface):
        interpreter.feed("xxrQ")
        interpreter.feed("uu")
        assert text_surface.read_line(1) == "bcdef"
        interpreter.feed("u")
        assert text_surface.read_line(1) == "abcdef"

    def test_unknown_keys_are_ignored(self, interpreter, text_surface):
        interpreter.feed("#!zq")
        assert text_surface.lines == ["abcdef", "ghijkl", "mnopqr"]


class TestDrillWithKeys:
    """Solving assignments through the interpreter."""

    def _play(self, make_config, rng, types, count=1):
        surface = GridSurface.blank(10, 5)
        tracker = SessionTracker(make_config(count=count, types=types), surface, rng=rng)
        tracker.start()
        return surface, tracker, KeyInterpreter(surface)

    def _goto(self, interpreter, target: Coordinate) -> None:
        interpreter.feed(f"gg0{'j' * (target.row - 1)}{'l' * (target.col - 1)}")

    @pytest.mark.parametrize(
        "kind,keys",
        [
            ("delete", "x"),
            ("replace", "ra"),
            ("yank-line", "yyp"),
            ("change-undo", "sku"),
            ("paste", "ylp"),
        ],
    )
    def test_each_kind(self, make_config, rng, kind, keys):
        surface, tracker, interpreter = self._play(make_config, rng, [kind])
        self._goto(interpreter, tracker.assignments.current_coordinate())

        interpreter.feed(keys)

        assert tracker.assignments.completed == 1
        assert tracker.result is not None
        assert tracker.result.is_complete
        assert surface.lines == [".........."] * 5

    def test_substitute_on_replace_marker_leaves_filler(self, make_config, rng):
        surface, tracker, interpreter = self._play(make_config, rng, ["replace"])
        self._goto(interpreter, tracker.assignments.current_coordinate())

        interpreter.feed("sz")

        assert tracker.assignments.completed == 1
        assert surface.lines == [".........."] * 5

    def test_substitute_on_delete_marker_keeps_line_width(self, make_config, rng):
        surface, tracker, interpreter = self._play(make_config, rng, ["delete"])
        here = tracker.assignments.current_coordinate()
        self._goto(interpreter, here)

        interpreter.feed("sz")

        assert tracker.assignments.completed == 0
        assert len(surface.read_line(here.row)) == 10
        assert surface.read_line(here.row)[here.col - 1] == "z"

        interpreter.feed("x")

        assert tracker.assignments.completed == 1
        assert surface.lines == [".........."] * 5

    def test_undo_after_completion_does_not_resurrect(self, make_config, rng):
        surface, tracker, interpreter = self._play(make_config, rng, ["delete"], count=2)
        self._goto(interpreter, tracker.assignments.current_coordinate())
        interpreter.feed("x")
        second = tracker.assignments.current_coordinate()

        interpreter.feed("u")

        assert tracker.assignments.completed == 1
        assert tracker.assignments.current_coordinate() == second
        assert surface.read_line(second.row)[second.col - 1] == "x"

    def test_dd_on_marker_line_skips(self, make_config, rng):
        surface, tracker, interpreter = self._play(make_config, rng, ["replace"], count=2)
        self._goto(interpreter, tracker.assignments.current_coordinate())

        interpreter.feed("dd")

        assert tracker.assignments.skipped == 1
        assert tracker.assignments.current.id == 2
