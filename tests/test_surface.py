"""Tests for the in-memory surface and anchored positions."""

import pytest

from anchor import AnchoredPosition
from errors import Invalidated
from models import Coordinate
from surface import GridSurface


def coord(row: int, col: int) -> Coordinate:
    return Coordinate(row=row, col=col)


class TestAnchorTracking:
    """Anchors follow their cell through edits."""

    def test_creating_anchor_does_not_edit(self, surface):
        edits = []
        surface.subscribe_edits(lambda: edits.append(1))
        before = surface.lines

        AnchoredPosition(surface, coord(2, 4))

        assert edits == []
        assert surface.lines == before

    def test_insert_before_anchor_shifts_right(self, surface):
        anchor = AnchoredPosition(surface, coord(2, 4))
        surface.insert_text(2, 1, "ab")
        assert anchor.current_coordinate() == coord(2, 6)

    def test_insert_at_anchor_column_does_not_move(self, surface):
        anchor = AnchoredPosition(surface, coord(2, 4))
        surface.insert_text(2, 4, "ab")
        assert anchor.current_coordinate() == coord(2, 4)

    def test_insert_after_anchor_does_not_move(self, surface):
        anchor = AnchoredPosition(surface, coord(2, 4))
        surface.insert_text(2, 5, "ab")
        assert anchor.current_coordinate() == coord(2, 4)

    def test_edit_on_other_line_does_not_move(self, surface):
        anchor = AnchoredPosition(surface, coord(2, 4))
        surface.insert_text(3, 1, "abc")
        surface.delete_text(1, 1, 3)
        assert anchor.current_coordinate() == coord(2, 4)

    def test_delete_before_anchor_shifts_left(self, surface):
        anchor = AnchoredPosition(surface, coord(2, 6))
        surface.delete_text(2, 1, 2)
        assert anchor.current_coordinate() == coord(2, 4)

    def test_delete_covering_anchor_collapses_to_range_start(self, surface):
        anchor = AnchoredPosition(surface, coord(2, 6))
        surface.delete_text(2, 4, 5)
        assert anchor.current_coordinate() == coord(2, 4)

    def test_line_inserted_above_shifts_down(self, surface):
        anchor = AnchoredPosition(surface, coord(3, 2))
        surface.insert_line(1, "new")
        assert anchor.current_coordinate() == coord(4, 2)

    def test_line_removed_above_shifts_up(self, surface):
        anchor = AnchoredPosition(surface, coord(3, 2))
        surface.remove_line(1)
        assert anchor.current_coordinate() == coord(2, 2)

    def test_removing_anchor_line_invalidates(self, surface):
        anchor = AnchoredPosition(surface, coord(3, 2))
        surface.remove_line(3)
        with pytest.raises(Invalidated):
            anchor.current_coordinate()

    def test_release_is_idempotent(self, surface):
        anchor = AnchoredPosition(surface, coord(3, 2))
        anchor.release()
        anchor.release()

        assert anchor.released
        with pytest.raises(Invalidated):
            anchor.current_coordinate()


class TestGridSurface:
    """Tests for line access, notifications and undo."""

    def test_blank_board(self):
        surface = GridSurface.blank(4, 2)
        assert surface.lines == ["....", "...."]

    def test_read_past_end_is_empty(self, surface):
        assert surface.read_line(99) == ""
        assert surface.read_line(0) == ""

    def test_write_line_out_of_range(self, surface):
        with pytest.raises(IndexError):
            surface.write_line(6, "x")

    def test_every_edit_notifies(self, surface):
        edits = []
        surface.subscribe_edits(lambda: edits.append(1))

        surface.write_line(1, "abc")
        surface.insert_text(1, 1, "z")
        surface.delete_text(1, 1)
        surface.replace_char(1, 1, "q")
        surface.insert_line(1, "")
        surface.remove_line(1)

        assert len(edits) == 6

    def test_unsubscribe_stops_notifications(self, surface):
        edits = []
        unsubscribe = surface.subscribe_edits(lambda: edits.append(1))
        unsubscribe()
        unsubscribe()

        surface.write_line(1, "abc")

        assert edits == []
        assert not unsubscribe.active

    def test_cursor_is_clamped(self, surface):
        moves = []
        surface.subscribe_cursor_moves(moves.append)

        surface.set_cursor(99, 99)

        assert surface.cursor == coord(5, 10)
        assert moves == [coord(5, 10)]

    def test_keys_and_close(self, surface):
        keys, closes = [], []
        surface.subscribe_keys(keys.append)
        surface.subscribe_close(lambda: closes.append(1))

        surface.press_key("x")
        surface.close()
        surface.close()

        assert keys == ["x"]
        assert closes == [1]

    def test_clock(self, surface, clock):
        start = surface.now()
        clock.advance(2.5)
        assert surface.now() - start == 2.5

    def test_undo_restores_lines_and_anchors(self, surface):
        anchor = AnchoredPosition(surface, coord(1, 5))
        surface.begin_change()
        surface.delete_text(1, 1, 3)

        assert surface.undo() is True
        assert surface.read_line(1) == ".........."
        assert anchor.current_coordinate() == coord(1, 5)
        assert surface.undo() is False

    def test_listener_writes_clear_undo_history(self, surface):
        def react():
            if surface.read_line(1).startswith("x"):
                surface.write_line(1, "..........")

        surface.subscribe_edits(react)
        surface.begin_change()
        surface.replace_char(1, 1, "x")

        assert surface.read_line(1) == ".........."
        assert surface.undo() is False
