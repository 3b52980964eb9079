"""Data models for the German hyphenation engine.

WHY: The boundary finder makes every decision from two small pieces of
data: the class of a character (vowel, consonant, other) and the result of
an affix lookup. Naming them as types keeps the rule code readable.

HOW: CharClass is a plain Enum. AffixMatch is a NamedTuple so a match can be
unpacked directly (``affix, offset = match``) or read by field name.

RULES:
- Words themselves are plain ``str`` values and are never mutated.
- Boundaries are plain ``int`` offsets: "insert a marker before index i".
- AffixMatch.offset is the END of a prefix but the START of a suffix.
"""

from enum import Enum
from typing import NamedTuple


class CharClass(Enum):
    """Phonological class of a single character."""

    VOWEL = "vowel"
    CONSONANT = "consonant"
    OTHER = "other"


class AffixMatch(NamedTuple):
    """A prefix or suffix found at the edge of a word.

    Attributes:
        affix: The matched table entry (lower case).
        offset: For prefixes, the offset just past the prefix. For suffixes,
                the offset where the suffix begins.
    """

    affix: str
    offset: int
