from typing import Callable

from ..core.model import NoteCollection, NoteCollectionBuilder
from ..core.ports import NoteSource


class BuilderNoteSource(NoteSource):
    """Notes written directly in Python through a builder callback."""

    def __init__(self, description: str, builder: Callable[[NoteCollectionBuilder], object]):
        self.description = description
        self.builder = builder

    def load(self) -> NoteCollection:
        return NoteCollection.build(self.description, self.builder)
