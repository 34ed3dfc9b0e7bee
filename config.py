"""Configuration for drill sessions.

The game configuration is validated when a session is started. Invalid
values surface as ``ConfigurationError`` so the caller can report them
without a traceback.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from assignments import is_known_type
from errors import ConfigurationError, InsufficientSpace


class BoardConfig(BaseModel):
    """Dimensions of the drill board."""

    width: int = Field(default=56, gt=0)
    height: int = Field(default=18, gt=0)

    @property
    def capacity(self) -> int:
        return self.width * self.height


class LineNumberConfig(BaseModel):
    """Line number gutter of the board display."""

    enabled: bool = True
    relative: bool = True


class GameConfig(BaseModel):
    """Master configuration for a drill session."""

    assignment_count: int = Field(default=20, gt=0)
    assignment_types: list[str] = Field(default_factory=lambda: ["delete", "replace"])
    board: BoardConfig = Field(default_factory=BoardConfig)
    line_numbers: LineNumberConfig = Field(default_factory=LineNumberConfig)

    @field_validator("assignment_types")
    @classmethod
    def _known_types(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("assignment_types must not be empty")
        unknown = [tag for tag in value if not is_known_type(tag)]
        if unknown:
            raise ValueError(f"unknown assignment types: {', '.join(unknown)}")
        return value

    @model_validator(mode="after")
    def _fits_board(self) -> "GameConfig":
        if self.assignment_count > self.board.capacity:
            raise InsufficientSpace(self.assignment_count, self.board.capacity)
        return self


def build_config(**overrides: Any) -> GameConfig:
    """Create a validated GameConfig, raising ConfigurationError on bad values."""
    try:
        return GameConfig(**overrides)
    except ValidationError as e:
        raise ConfigurationError(_format_validation_error(e)) from e


def load_config(path: Path | None = None, **overrides: Any) -> GameConfig:
    """Load configuration from a JSON file, applying non-None overrides on top.

    Args:
        path: Optional JSON file with the same shape as GameConfig.
        overrides: Top-level GameConfig fields, plus the flat keys ``width``,
            ``height``, ``line_numbers_enabled`` and ``line_numbers_relative``.

    Raises:
        ConfigurationError: If the file cannot be read or a value is invalid.
    """
    data: dict[str, Any] = {}
    if path is not None:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read config {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config {path} must contain a JSON object")

    _merge_nested(data, "board", overrides, {"width": "width", "height": "height"})
    _merge_nested(
        data,
        "line_numbers",
        overrides,
        {"line_numbers_enabled": "enabled", "line_numbers_relative": "relative"},
    )
    data.update({key: value for key, value in overrides.items() if value is not None})
    return build_config(**data)


def _merge_nested(
    data: dict[str, Any],
    section: str,
    overrides: dict[str, Any],
    keys: dict[str, str],
) -> None:
    nested = dict(data.get(section) or {})
    for flat_key, nested_key in keys.items():
        value = overrides.pop(flat_key, None)
        if value is not None:
            nested[nested_key] = value
    if nested:
        data[section] = nested


def _format_validation_error(error: ValidationError) -> str:
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        if location:
            messages.append(f"{location}: {item['msg']}")
        else:
            messages.append(item["msg"])
    return "; ".join(messages)
