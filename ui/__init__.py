"""Editing Drill UI Module - terminal interface for drill sessions."""

from ui.app import DrillUI
from ui.components import (
    AbortedPanel,
    BoardPanel,
    ResultsPanel,
    WelcomeScreen,
)
from ui.styles import (
    DRILL_ORANGE,
    DRILL_GOLD,
    SUCCESS_GREEN,
    ERROR_RED,
    INFO_BLUE,
    MUTED_GRAY,
)

__all__ = [
    "DrillUI",
    "BoardPanel",
    "ResultsPanel",
    "AbortedPanel",
    "WelcomeScreen",
    "DRILL_ORANGE",
    "DRILL_GOLD",
    "SUCCESS_GREEN",
    "ERROR_RED",
    "INFO_BLUE",
    "MUTED_GRAY",
]
