"""Configuration loader for crib.toml."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

from .errors import ConfigError

CONFIG_NAME = "crib.toml"


@dataclass
class NotesConfig:
    """Where notes are loaded from."""
    source: Path | None = None  # None means the packaged list


@dataclass
class LogConfig:
    """Diagnostic logging configuration."""
    level: str = "WARNING"


@dataclass
class CribConfig:
    """Complete cribsheet configuration."""
    notes: NotesConfig = field(default_factory=NotesConfig)
    log: LogConfig = field(default_factory=LogConfig)
    path: Path | None = None  # file the settings came from, if any


def _table(data: dict[str, Any], name: str, origin: Any) -> dict[str, Any]:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError(f"{origin}: [{name}] must be a table")
    return value


def _string(data: dict[str, Any], key: str, table: str, origin: Any) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"{origin}: {table}.{key} must be a string")
    return value


def default_search_paths(config_path: Path | None = None) -> list[Path]:
    paths = []
    if config_path:
        paths.append(config_path)
    paths.append(Path.cwd() / CONFIG_NAME)
    paths.append(Path.home() / ".config" / "cribsheet" / CONFIG_NAME)
    return paths


def load_config(
    config_path: Path | None = None, search_paths: list[Path] | None = None
) -> CribConfig:
    """
    Load configuration from crib.toml.

    Search order:
    1. config_path (if provided)
    2. cwd/crib.toml
    3. ~/.config/cribsheet/crib.toml

    Args:
        config_path: Explicit path to config file
        search_paths: Replace the default search order entirely

    Returns:
        CribConfig with resolved settings; defaults when no file exists
    """
    toml_data: dict[str, Any] = {}
    found: Path | None = None

    if search_paths is None:
        search_paths = default_search_paths(config_path)

    for path in search_paths:
        if path.exists():
            try:
                with open(path, "rb") as f:
                    toml_data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise ConfigError(f"Cannot read config {path}: {e}") from e
            found = path
            break

    origin = found or "config"

    # Parse notes config; relative sources resolve against the config file
    notes_data = _table(toml_data, "notes", origin)
    raw_source = _string(notes_data, "source", "notes", origin)
    source = None
    if raw_source is not None:
        source = Path(raw_source).expanduser()
        if found is not None and not source.is_absolute():
            source = found.parent / source

    # Parse log config
    log_data = _table(toml_data, "log", origin)
    level = (_string(log_data, "level", "log", origin) or "WARNING").upper()

    return CribConfig(
        notes=NotesConfig(source=source),
        log=LogConfig(level=level),
        path=found,
    )
