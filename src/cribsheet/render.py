"""Render notes as two aligned, alternately colored columns."""

import logging
from collections.abc import Sequence

from .core.filters import compile_filters, select_notes
from .core.model import Note
from .core.ports import NoteView

logger = logging.getLogger(__name__)

WHITE = "\x1b[37m"
GREEN = "\x1b[32m"
RESET = "\x1b[0m"

ROW_COLORS = (WHITE, GREEN)
SEPARATOR = "  "
HELP_FLAGS = ("-h", "--help")


def is_help_request(argv: Sequence[str]) -> bool:
    """Only a lone -h or --help asks for help; anything else is a filter list."""
    return len(argv) == 1 and argv[0] in HELP_FLAGS


def column_width(notes: Sequence[Note]) -> int:
    return max((len(n.key) for n in notes), default=0)


def format_note(note: Note, note_index: int, width: int) -> str:
    """
    Format one note as one or more output lines.

    The key is padded to ``width``; continuation lines of the value are
    indented so their text lines up under the first value line, plus
    whatever relative indentation the line already carries.
    """
    color = ROW_COLORS[note_index % len(ROW_COLORS)]
    first, *rest = note.lines
    out = [f"{color}{note.key.ljust(width)}{SEPARATOR}{first}"]
    pad = " " * (width + len(SEPARATOR))
    out.extend(pad + line for line in rest)
    return "\n".join(out)


def format_usage(prog: str) -> str:
    return f"Usage: {prog} [filters]"


def format_help(description: str, prog: str) -> str:
    return f"{format_usage(prog)}\n\n{description}"


class Renderer:
    """Turn a note collection and raw argv into the text to print."""

    def __init__(self, notes: NoteView, prog: str = "crib"):
        self.notes = notes
        self.prog = prog

    def render(self, argv: Sequence[str]) -> str:
        if is_help_request(argv):
            return format_help(self.notes.description, self.prog)

        filters = compile_filters(argv)
        selected = select_notes(self.notes, filters)
        width = column_width(selected)
        logger.debug("rendering %d note(s) at width %d", len(selected), width)
        body = "\n".join(
            format_note(note, i, width) for i, note in enumerate(selected)
        )
        return body + RESET


def render_notes(notes: NoteView, argv: Sequence[str], prog: str = "crib") -> str:
    return Renderer(notes, prog).render(argv)
