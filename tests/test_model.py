"""Tests for notes and note collections."""

import dataclasses

import pytest

from cribsheet.core.model import Note, NoteCollection, strip_indent


def test_strip_indent_triple_quoted():
    """Test a literal that starts on the line after the quotes."""
    assert strip_indent("\n    one\n     two\n") == "one\n two"


def test_strip_indent_single_line():
    """Test single line values lose their indentation."""
    assert strip_indent("   hello") == "hello"
    assert strip_indent("hello") == "hello"


def test_strip_indent_uses_first_line_prefix():
    """Test that only the first line's indentation is removed."""
    # Second line is shallower than the first: left untouched
    assert strip_indent("    a\n  b") == "a\n  b"
    # Blank lines in the middle survive
    assert strip_indent("  a\n\n  b") == "a\n\nb"


def test_note_preserves_relative_indent():
    """Test that a deeper line stays exactly one space deeper."""
    note = Note("word", """
        first line
         second line
        third line
    """)
    assert note.lines == ["first line", " second line", "third line"]


def test_note_tags_become_tuple():
    """Test tags are stored as an immutable tuple."""
    note = Note("k", "v", ["a", "b"])
    assert note.tags == ("a", "b")
    assert list(note.fields()) == ["k", "v", "a", "b"]


def test_note_is_frozen():
    """Test that notes cannot be modified after creation."""
    note = Note("k", "v")
    with pytest.raises(dataclasses.FrozenInstanceError):
        note.key = "other"  # type: ignore[misc]


def test_collection_build():
    """Test building a collection through the builder callback."""
    def builder(b):
        b.add("one", "first", "tag1")
        b.add("two", "second")
        b.add("one", "duplicate keys are allowed")

    notes = NoteCollection.build("My list", builder)

    assert notes.description == "My list"
    assert len(notes) == 3
    assert [n.key for n in notes] == ["one", "two", "one"]
    assert notes[0].tags == ("tag1",)
    assert notes[1].tags == ()


def test_collection_is_frozen():
    """Test that the collection cannot be replaced after construction."""
    notes = NoteCollection.build("d", lambda b: b.add("k", "v"))
    assert isinstance(notes.notes, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        notes.description = "changed"  # type: ignore[misc]
