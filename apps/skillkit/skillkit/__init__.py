"""skillkit — load and lint Markdown skill guides."""

__version__ = "0.1.0"
