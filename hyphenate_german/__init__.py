"""Rule-based German hyphenation with soft-hyphen markers.

WHY: Long German words, especially compounds, overflow narrow displays that
lack native language-aware line breaking. This package inserts invisible
soft hyphens (U+00AD) at plausible syllable boundaries so the renderer can
wrap them cleanly.

HOW: The public entry points are hyphenate_word() and hyphenate_text().
Both are pure functions over the frozen affix and cluster tables built at
import; see core.py for the algorithm and display.py for choosing between
native hyphenation and inserted markers.

RULES:
- Output equals input apart from inserted U+00AD characters.
- Hyphenating twice is the same as hyphenating once.
- Nothing raises: input the engine cannot handle comes back unchanged.
- Safe to call concurrently; there is no mutable shared state.
"""

from .core import (
    SOFT_HYPHEN,
    classify,
    find_boundaries,
    hyphenate_text,
    hyphenate_word,
    insert_markers,
    split_runs,
    strip_markers,
)
from .display import NATIVE_HYPHENATION_STYLE, display_text, display_word_list
from .models import AffixMatch, CharClass
from .tables import AFFIX_TABLE, CLUSTER_TABLE

__version__ = "0.1.0"

__all__ = [
    "hyphenate_word",
    "hyphenate_text",
    "strip_markers",
    "find_boundaries",
    "insert_markers",
    "split_runs",
    "classify",
    "CharClass",
    "AffixMatch",
    "AFFIX_TABLE",
    "CLUSTER_TABLE",
    "SOFT_HYPHEN",
    "NATIVE_HYPHENATION_STYLE",
    "display_text",
    "display_word_list",
]
