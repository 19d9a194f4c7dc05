"""Compile command-line filters and select the notes they match."""

import logging
import re
from collections.abc import Iterable, Sequence

from ..errors import InvalidFilterPattern
from .model import Note

logger = logging.getLogger(__name__)


def compile_filters(args: Sequence[str]) -> list[re.Pattern[str]]:
    """
    Compile each argument into a case-insensitive regular expression.

    Order is preserved. The first argument that does not compile raises
    InvalidFilterPattern, so nothing is rendered for a bad invocation.
    """
    compiled = []
    for arg in args:
        try:
            compiled.append(re.compile(arg, re.IGNORECASE))
        except re.error as e:
            raise InvalidFilterPattern(arg, str(e)) from e
    logger.debug("compiled %d filter(s): %r", len(compiled), list(args))
    return compiled


def matches(note: Note, pattern: re.Pattern[str]) -> bool:
    return any(pattern.search(text) for text in note.fields())


def select_notes(
    notes: Iterable[Note], filters: Sequence[re.Pattern[str]]
) -> list[Note]:
    """Keep notes matched by every filter, in their original order."""
    selected = [n for n in notes if all(matches(n, f) for f in filters)]
    logger.debug("selected %d note(s)", len(selected))
    return selected
