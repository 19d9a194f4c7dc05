"""Runtime wiring helper for the CLI."""

import logging
from dataclasses import dataclass
from pathlib import Path

from .adapters.yaml_source import YamlNoteSource
from .config import CribConfig, load_config
from .core.model import NoteCollection
from .core.ports import NoteSource
from .logging_setup import setup_logging

logger = logging.getLogger(__name__)


@dataclass
class Runtime:
    """Container for all wired components."""
    notes: NoteCollection
    source: NoteSource
    config: CribConfig


def build_runtime(
    config_path: Path | None = None,
    source: NoteSource | None = None,
) -> Runtime:
    """Load configuration and the note collection once for this process."""
    config = load_config(config_path=config_path)
    setup_logging(config.log.level)
    if config.path:
        logger.debug("using config %s", config.path)

    if source is None:
        source = YamlNoteSource(config.notes.source)

    return Runtime(notes=source.load(), source=source, config=config)
