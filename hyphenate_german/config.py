"""Configuration constants and .env loading for the hyphenation CLI.

WHY: The engine itself has no knobs: its tables and thresholds are fixed.
The command-line wrapper around it does: how loudly to log, which encoding
to read and write, and what to show in place of invisible soft hyphens when
inspecting output. Keeping these in one place makes them easy to override.

HOW: python-dotenv loads the .env file on import. Each setting is read from
an environment variable with a default. load_log_level() turns the
configured name into a logging level and load_encoding() checks the
configured codec, each with a clear error when the setting is invalid.

RULES:
- Engine constants (MIN_WORD_LENGTH, tables) are NOT configurable here.
- All defaults can be overridden via environment variables or .env.
- Invalid configuration raises ValueError; the CLI reports it and exits 1.
"""

from __future__ import annotations

import codecs
import logging
import os

from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()

LOG_LEVEL = os.getenv("HYPHENATE_LOG_LEVEL", "WARNING")
ENCODING = os.getenv("HYPHENATE_ENCODING", "utf-8")
VISIBLE_MARKER = os.getenv("HYPHENATE_VISIBLE_MARKER", "-")

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def load_log_level(name: str | None = None) -> int:
    """Resolve a log level name to its numeric logging level.

    Args:
        name: Level name such as "info" (case-insensitive). Defaults to
              the HYPHENATE_LOG_LEVEL setting.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    key = (name if name is not None else LOG_LEVEL).strip().upper()
    if key not in _LEVELS:
        raise ValueError(
            "Unknown log level '{}'. Available: {}".format(
                key, ", ".join(_LEVELS)
            )
        )
    return _LEVELS[key]


def load_encoding(name: str | None = None) -> str:
    """Resolve a file encoding name to its canonical codec name.

    Args:
        name: Encoding name such as "utf-8". Defaults to the
              HYPHENATE_ENCODING setting.

    Raises:
        ValueError: If Python has no codec of that name.
    """
    key = (name if name is not None else ENCODING).strip()
    try:
        return codecs.lookup(key).name
    except LookupError:
        raise ValueError("Unknown encoding '{}'".format(key)) from None
