from rich.style import Style
from rich.text import Text
from rich.theme import Theme

DRILL_ORANGE = "#E67E22"
DRILL_GOLD = "#F1C40F"
SUCCESS_GREEN = "#27AE60"
ERROR_RED = "#C0392B"
INFO_BLUE = "#3498DB"
MUTED_GRAY = "#7F8C8D"
TEXT_WHITE = "#FFFFFF"

DEFAULT_THEME = Theme(
    {
        "primary": Style(color=DRILL_ORANGE, bold=True),
        "secondary": Style(color=DRILL_GOLD, bold=True),
        "success": Style(color=SUCCESS_GREEN),
        "error": Style(color=ERROR_RED, bold=True),
        "info": Style(color=INFO_BLUE),
        "muted": Style(color=MUTED_GRAY),
        "marker": Style(color="black", bgcolor=DRILL_GOLD, bold=True),
        "cursor": Style(reverse=True),
        "line_number": Style(color=MUTED_GRAY),
        "line_number_current": Style(color=DRILL_GOLD, bold=True),
    }
)

MARKER_STYLE = Style(color="black", bgcolor=DRILL_GOLD, bold=True)
CURSOR_STYLE = Style(reverse=True)
MARKER_CURSOR_STYLE = Style(color="black", bgcolor=DRILL_ORANGE, bold=True, underline=True)


def get_notice_style(level: str) -> Style:
    """Get style for a notice level."""
    styles = {
        "info": Style(color=INFO_BLUE),
        "warning": Style(color=DRILL_GOLD, bold=True),
        "error": Style(color=ERROR_RED, bold=True),
    }
    return styles.get(level.lower(), Style())


def get_speed_style(keys_per_minute: float) -> Style:
    """Colour keys-per-minute: fewer keys for the same work is better."""
    if keys_per_minute <= 60:
        return Style(color=SUCCESS_GREEN, bold=True)
    elif keys_per_minute <= 150:
        return Style(color=DRILL_GOLD)
    else:
        return Style(color=ERROR_RED)


def create_complete_header() -> Text:
    """Create session complete header."""
    header = Text()
    header.append("🎉 ", Style(color=DRILL_GOLD))
    header.append("Drill Complete!", Style(color=DRILL_ORANGE, bold=True))
    return header
