"""CLI for cribsheet - print a filtered, aligned note list."""

import os
import sys
from collections.abc import Sequence

from .core.ports import NoteSource
from .errors import ConfigError, InvalidFilterPattern, NoteSourceError
from .render import Renderer, format_usage, is_help_request
from .runtime import build_runtime

EXIT_OK = 0
EXIT_SOURCE_ERROR = 1
EXIT_BAD_FILTER = 2


def program_name(argv0: str | None = None) -> str:
    name = os.path.basename(argv0 if argv0 is not None else sys.argv[0])
    if not name or name == "__main__.py":
        return "crib"
    return name


def main(argv: Sequence[str] | None = None, source: NoteSource | None = None) -> int:
    """Entry point. ``argv`` excludes the program name."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        rt = build_runtime(source=source)
    except (ConfigError, NoteSourceError) as e:
        # usage does not depend on the notes, so help still gets that much
        if is_help_request(argv):
            print(format_usage(program_name()))
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_SOURCE_ERROR

    renderer = Renderer(rt.notes, prog=program_name())
    try:
        output = renderer.render(list(argv))
    except InvalidFilterPattern as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_FILTER

    print(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
