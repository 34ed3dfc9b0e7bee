"""Tests for game configuration loading and validation."""

import json

import pytest

from config import GameConfig, build_config, load_config
from errors import ConfigurationError, InsufficientSpace


class TestGameConfig:
    """Tests for defaults and validation."""

    def test_defaults(self):
        config = GameConfig()
        assert config.assignment_count == 20
        assert config.assignment_types == ["delete", "replace"]
        assert (config.board.width, config.board.height) == (56, 18)
        assert config.line_numbers.enabled
        assert config.line_numbers.relative

    def test_unknown_type_is_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            build_config(assignment_types=["delete", "teleport"])
        assert "teleport" in str(exc_info.value)

    def test_glyph_tags_are_accepted(self):
        config = build_config(assignment_types=["x", "r"])
        assert config.assignment_types == ["x", "r"]

    def test_empty_type_pool_is_rejected(self):
        with pytest.raises(ConfigurationError):
            build_config(assignment_types=[])

    @pytest.mark.parametrize(
        "overrides",
        [
            {"assignment_count": 0},
            {"board": {"width": 0, "height": 5}},
            {"board": {"width": 5, "height": -1}},
        ],
    )
    def test_non_positive_values_are_rejected(self, overrides):
        with pytest.raises(ConfigurationError):
            build_config(**overrides)

    def test_more_assignments_than_cells(self):
        with pytest.raises(InsufficientSpace) as exc_info:
            build_config(assignment_count=11, board={"width": 5, "height": 2})
        assert exc_info.value.capacity == 10

    def test_assignments_filling_the_board(self):
        config = build_config(assignment_count=10, board={"width": 5, "height": 2})
        assert config.board.capacity == 10


class TestLoadConfig:
    """Tests for reading configuration files and applying overrides."""

    def test_no_file_gives_defaults(self):
        assert load_config() == GameConfig()

    def test_reads_json_file(self, tmp_path):
        path = tmp_path / "drill.json"
        path.write_text(
            json.dumps(
                {
                    "assignment_count": 5,
                    "assignment_types": ["paste"],
                    "board": {"width": 20, "height": 4},
                }
            )
        )

        config = load_config(path)

        assert config.assignment_count == 5
        assert config.assignment_types == ["paste"]
        assert config.board.width == 20

    def test_overrides_win_over_file(self, tmp_path):
        path = tmp_path / "drill.json"
        path.write_text(json.dumps({"assignment_count": 5, "board": {"width": 20, "height": 4}}))

        config = load_config(path, assignment_count=7, height=6, line_numbers_relative=False)

        assert config.assignment_count == 7
        assert (config.board.width, config.board.height) == (20, 6)
        assert config.line_numbers.relative is False
        assert config.line_numbers.enabled is True

    def test_none_overrides_are_ignored(self):
        config = load_config(assignment_count=None, width=None, line_numbers_enabled=None)
        assert config == GameConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "drill.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_non_object_json(self, tmp_path):
        path = tmp_path / "drill.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigurationError):
            load_config(path)
