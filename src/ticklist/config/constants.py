"""Paths and default values used across the project."""

from pathlib import Path

# Base directory for all ticklist data
TICKLIST_HOME = Path.home() / ".ticklist"

CONFIG_DIR = TICKLIST_HOME
CONFIG_FILE = CONFIG_DIR / "config.json"
PREFS_FILE = TICKLIST_HOME / "prefs.json"
LOGS_DIR = TICKLIST_HOME / "logs"
LOG_FILE = LOGS_DIR / "ticklist.log"

# Key-value slot holding the encoded task list
DEFAULT_TASKS_KEY = "tasks"
CORRUPT_SUFFIX = ".corrupt"

# Theme modes
THEME_LIGHT = "light"
THEME_DARK = "dark"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
