from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Iterator


def strip_indent(text: str) -> str:
    """
    Remove the first line's indentation from every line of ``text``.

    A leading empty line and trailing blank lines are dropped first, so
    triple-quoted literals can start on the line after the quotes. Lines
    that do not begin with the first line's indentation are kept as-is;
    deeper lines keep their extra indentation.

    Examples:
        >>> strip_indent("\\n    one\\n     two\\n")
        'one\\n two'
    """
    lines = text.split("\n")
    if len(lines) > 1 and not lines[0].strip():
        lines = lines[1:]
    while len(lines) > 1 and not lines[-1].strip():
        lines.pop()

    first = lines[0]
    prefix = first[: len(first) - len(first.lstrip())]
    if prefix:
        lines = [ln[len(prefix):] if ln.startswith(prefix) else ln for ln in lines]
    return "\n".join(lines)


@dataclass(frozen=True)
class Note:
    key: str
    value: str
    tags: tuple[str, ...] = ()  # used for filtering only, never printed

    def __post_init__(self):
        object.__setattr__(self, "value", strip_indent(self.value))
        object.__setattr__(self, "tags", tuple(self.tags))

    @property
    def lines(self) -> list[str]:
        return self.value.split("\n")

    def fields(self) -> Iterator[str]:
        """Yield every string a filter is matched against."""
        yield self.key
        yield self.value
        yield from self.tags


class NoteCollectionBuilder:
    """Accumulates notes while a collection is being built."""

    def __init__(self):
        self._notes: list[Note] = []

    def add(self, key: str, value: str, *tags: str) -> "NoteCollectionBuilder":
        self._notes.append(Note(key, value, tags))
        return self

    def notes(self) -> tuple[Note, ...]:
        return tuple(self._notes)


@dataclass(frozen=True)
class NoteCollection:
    description: str
    notes: tuple[Note, ...] = field(default_factory=tuple)

    @classmethod
    def build(
        cls, description: str, builder: Callable[[NoteCollectionBuilder], object]
    ) -> NoteCollection:
        """Run ``builder`` once against a fresh builder and freeze the result."""
        b = NoteCollectionBuilder()
        builder(b)
        return cls(description=description, notes=b.notes())

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes)

    def __len__(self) -> int:
        return len(self.notes)

    def __getitem__(self, index: int) -> Note:
        return self.notes[index]
