import io
import logging
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from ..core.model import Note, NoteCollection
from ..core.ports import NoteSource
from ..errors import NoteSourceError

logger = logging.getLogger(__name__)

PACKAGED_NOTES = "notes.yaml"


def _as_tags(raw: Any, where: str) -> tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str):
        return (raw,)
    if isinstance(raw, list) and all(isinstance(t, str) for t in raw):
        return tuple(raw)
    raise NoteSourceError(
        f"{where}: 'tags' must be a string or a list of strings; quote words like yes or 12"
    )


def _as_text(entry: dict[str, Any], field: str, where: str) -> str:
    # YAML 1.1 reads bare on, no, null or 12 as non-strings
    value = entry.get(field)
    if value is None and field != "key":
        return ""
    if not isinstance(value, str):
        raise NoteSourceError(f"{where}: '{field}' must be a string; quote it")
    return value


def decode_notes(text: str, origin: str = "<string>") -> NoteCollection:
    """Decode a YAML notes document into a NoteCollection."""
    try:
        doc = yaml.safe_load(io.StringIO(text)) or {}
    except yaml.YAMLError as e:
        raise NoteSourceError(f"{origin}: invalid YAML: {e}") from e
    if not isinstance(doc, dict):
        raise NoteSourceError(f"{origin}: expected a mapping at top level")

    description = doc.get("description", "")
    if not isinstance(description, str):
        raise NoteSourceError(f"{origin}: 'description' must be a string")

    entries = doc.get("notes") or []
    if not isinstance(entries, list):
        raise NoteSourceError(f"{origin}: 'notes' must be a list")

    notes = []
    for i, entry in enumerate(entries):
        where = f"{origin}: note #{i}"
        if not isinstance(entry, dict) or "key" not in entry:
            raise NoteSourceError(f"{where}: expected a mapping with a 'key'")
        key = _as_text(entry, "key", where)
        value = _as_text(entry, "value", where)
        tags = _as_tags(entry.get("tags"), where)
        notes.append(Note(key, value.rstrip("\n"), tags))

    return NoteCollection(description=description.rstrip("\n"), notes=tuple(notes))


class YamlNoteSource(NoteSource):
    """Load notes from a YAML file, or from the packaged default list."""

    def __init__(self, path: Path | None = None):
        self.path = path

    def _read(self) -> tuple[str, str]:
        if self.path is None:
            ref = resources.files("cribsheet.data").joinpath(PACKAGED_NOTES)
            return ref.read_text(encoding="utf-8"), f"<packaged {PACKAGED_NOTES}>"
        try:
            return self.path.read_text(encoding="utf-8"), str(self.path)
        except OSError as e:
            raise NoteSourceError(f"Cannot read notes file {self.path}: {e}") from e

    def load(self) -> NoteCollection:
        text, origin = self._read()
        collection = decode_notes(text, origin)
        logger.debug("loaded %d note(s) from %s", len(collection), origin)
        return collection
