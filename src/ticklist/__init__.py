"""ticklist — a single-screen personal task list."""

__version__ = "0.1.0"
