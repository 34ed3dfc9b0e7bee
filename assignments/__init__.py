"""Assignment handlers and their registry.

Every assignment kind maps to exactly one handler instance. The set of kinds
is fixed, so the registry is a plain dictionary keyed by AssignmentKind.
"""

from errors import UnknownType
from models import AssignmentKind

from .base import AssignmentHandler
from .change_undo import ChangeUndoHandler
from .delete import DeleteHandler
from .paste import PasteHandler
from .replace import ReplaceHandler
from .yank_line import YankLineHandler

ASSIGNMENT_HANDLERS: dict[AssignmentKind, AssignmentHandler] = {
    AssignmentKind.DELETE: DeleteHandler(),
    AssignmentKind.REPLACE: ReplaceHandler(),
    AssignmentKind.YANK_LINE: YankLineHandler(),
    AssignmentKind.CHANGE_UNDO: ChangeUndoHandler(),
    AssignmentKind.PASTE: PasteHandler(),
}

# Marker glyphs double as short tags ("x", "r", ...)
_GLYPH_TAGS = {handler.marker: kind for kind, handler in ASSIGNMENT_HANDLERS.items()}


def lookup(tag: str | AssignmentKind) -> AssignmentHandler:
    """Get the handler for an assignment tag.

    Accepts an AssignmentKind, its value ("delete") or its marker glyph ("x").

    Raises:
        UnknownType: If no handler is registered for the tag.
    """
    try:
        kind = AssignmentKind(tag)
    except ValueError:
        kind = _GLYPH_TAGS.get(str(tag))
    if kind is None or kind not in ASSIGNMENT_HANDLERS:
        raise UnknownType(str(tag))
    return ASSIGNMENT_HANDLERS[kind]


def is_known_type(tag: str) -> bool:
    try:
        lookup(tag)
    except UnknownType:
        return False
    return True


__all__ = [
    "AssignmentHandler",
    "DeleteHandler",
    "ReplaceHandler",
    "YankLineHandler",
    "ChangeUndoHandler",
    "PasteHandler",
    "ASSIGNMENT_HANDLERS",
    "lookup",
    "is_known_type",
]
