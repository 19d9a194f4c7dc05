"""cribsheet - a terminal note viewer for personal reference lists."""

__version__ = "0.1.0"
