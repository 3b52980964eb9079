"""Display adapter: choose between native hyphenation and inserted markers.

WHY: Some rendering surfaces (browsers) hyphenate German natively when the
text is language-tagged and styled for automatic hyphenation; inserting soft
hyphens there is unnecessary. Others (native mobile text views) have no
language-aware line breaking and need the markers. Callers should not have
to repeat this decision around every word they show.

HOW: NATIVE_HYPHENATION_STYLE holds the CSS-style properties a native
surface applies instead of calling the engine. display_text() and
display_word_list() pass text through unchanged for native surfaces and run
the engine otherwise.

RULES:
- With native_hyphenation=True the engine is never invoked and the text is
  returned exactly as given.
- Word lists are hyphenated word by word, then joined with the separator.
- This module renders nothing itself.
"""

from typing import Dict, Iterable

from .core import hyphenate_text, hyphenate_word

HYPHENATION_LANG = "de"

NATIVE_HYPHENATION_STYLE: Dict[str, str] = {
    "hyphens": "auto",
    "-webkit-hyphens": "auto",
    "-moz-hyphens": "auto",
    "-ms-hyphens": "auto",
    "word-break": "break-word",
    "overflow-wrap": "break-word",
}


def display_text(text: str, native_hyphenation: bool = False) -> str:
    """Prepare text for a surface, hyphenating only when it cannot do so itself."""
    if native_hyphenation:
        return text
    return hyphenate_text(text)


def display_word_list(
    words: Iterable[str],
    native_hyphenation: bool = False,
    separator: str = ", ",
) -> str:
    """Join words for display, e.g. the members of a solved word group.

    Args:
        words: The words, in display order.
        native_hyphenation: True if the surface hyphenates on its own.
        separator: Text placed between words.

    Returns:
        The joined string, with soft hyphens inside each word unless the
        surface hyphenates natively.
    """
    if native_hyphenation:
        return separator.join(words)
    return separator.join(hyphenate_word(w) for w in words)
