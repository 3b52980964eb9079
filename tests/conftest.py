"""Shared test fixtures for the hyphenate_german test suite.

WHY: Several test modules need the same sample texts and an on-disk input
file for the CLI. Centralizing them here keeps expected values in one place.

HOW: Pytest fixtures provide a multi-line German sample text, its expected
hyphenated form, and a helper that writes text to a temporary file.

RULES:
- Expected strings spell out soft hyphens as SHY so they stay readable.
- Sample words are chosen so every interior rule fires at least once.
"""

from pathlib import Path

import pytest

SHY = "\u00ad"

SAMPLE_TEXT = "Die Mutter\tund\n  der Kindergarten in Hamburg\n"
SAMPLE_TEXT_HYPHENATED = (
    "Die Mut" + SHY + "ter\tund\n  der Kin" + SHY + "der" + SHY + "gar" + SHY
    + "ten in Ham" + SHY + "burg\n"
)


@pytest.fixture
def sample_text():
    """A short German text mixing tabs, newlines and indentation."""
    return SAMPLE_TEXT


@pytest.fixture
def sample_text_hyphenated():
    """The expected hyphenate_text() output for sample_text."""
    return SAMPLE_TEXT_HYPHENATED


@pytest.fixture
def write_text(tmp_path):
    """Return a function that writes text to a UTF-8 file under tmp_path."""

    def _write(text, name="input.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
