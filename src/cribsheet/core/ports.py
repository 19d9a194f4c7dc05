from typing import Iterator, Protocol
from .model import Note, NoteCollection


class NoteView(Protocol):
    """
    What rendering needs from a collection: ordered notes and a description.
    """

    description: str

    def __iter__(self) -> Iterator[Note]:
        pass


class NoteSource(Protocol):
    """
    Produce a complete, immutable NoteCollection. Called once per process.
    """

    def load(self) -> NoteCollection:
        pass
