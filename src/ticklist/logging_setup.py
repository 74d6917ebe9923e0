"""Logging configuration for the CLI and TUI entry points."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(
    log_file: Path,
    level: str = "INFO",
    console: bool = False,
) -> None:
    """Send ``ticklist.*`` logs to ``log_file`` and optionally to stderr.

    The TUI owns the terminal, so the file handler is the default sink;
    ``console=True`` adds a rich handler for ``--verbose`` CLI runs.
    Calling this again replaces the handlers installed by a previous call.
    """
    root = logging.getLogger("ticklist")
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as exc:
        logging.getLogger("ticklist.logging").warning("Log file unavailable: %s", exc)
    else:
        file_handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(file_handler)

    if console:
        console_handler = RichHandler(
            console=Console(stderr=True), show_path=False, rich_tracebacks=True
        )
        console_handler.setLevel(logging.DEBUG)
        root.addHandler(console_handler)
