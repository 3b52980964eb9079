"""Core hyphenation logic: classification, boundary detection, marker insertion.

WHY: Narrow displays without language-aware line breaking cut long German
compounds at arbitrary letters (or not at all). Inserting soft hyphens at
plausible syllable boundaries lets the renderer wrap them cleanly. This
module is the whole engine, a deterministic heuristic pass over hand-curated
affix tables and local character-class patterns, not a dictionary hyphenator.

HOW: The pipeline has three stages:
  1. find_boundaries(): affix detection at the edges, then a left-to-right
     scan of interior offsets applying three character-class rules.
  2. insert_markers(): inserts U+00AD before each boundary, right to left,
     clamped to a minimum syllable length of 2.
  3. hyphenate_text(): splits text into whitespace / non-whitespace runs
     and hyphenates each non-whitespace run independently.

RULES:
- No function here raises for string input; "cannot hyphenate" means the
  word comes back unchanged (empty boundary list).
- Text content is never modified; only U+00AD markers are added.
  strip_markers(hyphenate_text(t)) == t for every t.
- Classification is case-insensitive; output keeps the original case.
- The only shared state is the frozen tables in tables.py.
"""

import re
from typing import List, Sequence

from .models import CharClass
from .tables import AFFIX_TABLE, CLUSTER_TABLE

SOFT_HYPHEN = "\u00ad"
HYPHEN = "-"

# Words shorter than this are never hyphenated.
MIN_WORD_LENGTH = 5
# Minimum number of original characters on each side of a marker.
MIN_SYLLABLE_CHARS = 2

VOWELS = frozenset("aeiouäöüy")
CONSONANTS = frozenset("bcdfghjklmnpqrstvwxzß")
# Accepted as written; compatibility forms such as U+212A KELVIN SIGN are not.
GERMAN_LETTERS = frozenset(
    "abcdefghijklmnopqrstuvwxyzäöüß"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÜẞ"
)

# Maximal runs of whitespace or of non-whitespace.
RUN_RE = re.compile(r"\s+|\S+")


# =============================================================================
# Character Classification
# =============================================================================

def classify(char: str) -> CharClass:
    """Classify a single character as vowel, consonant or other.

    Case-insensitive. Umlauts and "y" are vowels, "ß" is a consonant.
    Anything that is not exactly one German letter is CharClass.OTHER.
    """
    if char not in GERMAN_LETTERS:
        return CharClass.OTHER
    lower = char.lower()
    if lower in VOWELS:
        return CharClass.VOWEL
    if lower in CONSONANTS:
        return CharClass.CONSONANT
    return CharClass.OTHER


def is_german_word(word: str) -> bool:
    """True if every character of a non-empty word is a German letter."""
    return bool(word) and all(classify(c) is not CharClass.OTHER for c in word)


# =============================================================================
# Boundary Detection
# =============================================================================

def find_boundaries(word: str) -> List[int]:
    """Find offsets at which a syllable boundary is plausible.

    WHY: German orthography favours open syllables, splits differing
    consonants between syllables unless they form a conventional unit, and
    allows splitting doubled consonants. Morpheme edges (prefixes, suffixes)
    are more reliable than any of these, so they are detected first.

    HOW:
      1. Bail out (empty list) for words that are too short, already contain
         a hyphen or soft hyphen, or contain non-German characters.
      2. A separable prefix match records its end as a boundary.
      3. A suffix match records where the suffix starts; it is added last.
      4. Interior offsets between the two are scanned; at each offset the
         first matching rule wins:
           a. vowel, consonant, vowel    -> split before the consonant
           b. two different consonants   -> split between them, unless an
              inseparable cluster sits in the 3-character window or one side
              has no vowel
           c. doubled consonant (not s)  -> split between them

    RULES:
    - Offsets refer to the original word; 0 < offset < len(word).
    - The result is strictly ascending with no duplicates.
    - Only rule b consults the cluster table. A single-consonant cluster
      start between vowels (the "qu" in "Liquide") is split by rule a.
    - Never raises.

    Args:
        word: A single word, without surrounding whitespace.

    Returns:
        Ascending list of boundary offsets (possibly empty).
    """
    if len(word) < MIN_WORD_LENGTH:
        return []
    if HYPHEN in word or SOFT_HYPHEN in word:
        return []
    if not is_german_word(word):
        return []

    lower = word.lower()
    length = len(lower)
    boundaries = set()

    # Prefix boundary
    prefix_end = 0
    prefix = AFFIX_TABLE.longest_prefix_match(lower)
    if prefix is not None and classify(lower[prefix.offset]) is not CharClass.OTHER:
        prefix_end = prefix.offset
        boundaries.add(prefix_end)

    # Suffix start (boundary added after the scan)
    suffix_start = length
    suffix = AFFIX_TABLE.longest_suffix_match(lower)
    if suffix is not None:
        suffix_start = suffix.offset

    for i in range(prefix_end + 1, suffix_start - 1):
        if i in boundaries:
            continue
        if _is_interior_boundary(lower, i):
            boundaries.add(i)

    if 1 < suffix_start < length:
        boundaries.add(suffix_start)

    return sorted(boundaries)


def _is_interior_boundary(lower: str, i: int) -> bool:
    """Apply the interior rules to offset i of a lower-cased word."""
    prev = classify(lower[i - 1])
    curr = classify(lower[i])
    nxt = classify(lower[i + 1]) if i + 1 < len(lower) else CharClass.OTHER

    # a. open syllable: V-CV
    if prev is CharClass.VOWEL and curr is CharClass.CONSONANT and nxt is CharClass.VOWEL:
        return True

    # b. differing consonants, unless a cluster or a vowel-less side
    if prev is CharClass.CONSONANT and curr is CharClass.CONSONANT and lower[i - 1] != lower[i]:
        if CLUSTER_TABLE.contains_cluster_around(lower, i):
            return False
        return _has_vowel(lower[:i]) and _has_vowel(lower[i:])

    # c. doubled consonant, except "ss"
    if prev is CharClass.CONSONANT and lower[i - 1] == lower[i] and lower[i] != "s":
        return True

    return False


def _has_vowel(chars: str) -> bool:
    return any(c in VOWELS for c in chars)


# =============================================================================
# Marker Insertion
# =============================================================================

def insert_markers(word: str, boundaries: Sequence[int]) -> str:
    """Insert a soft hyphen before each boundary offset.

    Offsets that would leave fewer than MIN_SYLLABLE_CHARS original
    characters on either side are dropped. Boundaries are processed from
    the highest offset down so earlier offsets stay valid.
    """
    result = word
    upper = len(word) - MIN_SYLLABLE_CHARS
    for pos in sorted(set(boundaries), reverse=True):
        if MIN_SYLLABLE_CHARS <= pos <= upper:
            result = result[:pos] + SOFT_HYPHEN + result[pos:]
    return result


def hyphenate_word(word: str) -> str:
    """Return word with soft hyphens at its syllable boundaries.

    Returns the word unchanged when it is too short, already hyphenated,
    contains non-German characters, or no rule fires.
    """
    boundaries = find_boundaries(word)
    if not boundaries:
        return word
    return insert_markers(word, boundaries)


def strip_markers(text: str) -> str:
    """Remove every soft hyphen from text."""
    return text.replace(SOFT_HYPHEN, "")


# =============================================================================
# Text Hyphenation
# =============================================================================

def split_runs(text: str) -> List[str]:
    """Split text into maximal alternating whitespace / non-whitespace runs.

    "".join(split_runs(text)) == text for every text.
    """
    return RUN_RE.findall(text)


def hyphenate_text(text: str) -> str:
    """Hyphenate every non-whitespace run of text; whitespace is untouched.

    Args:
        text: Any text. Punctuation attached to a word (e.g. "Hamburg,")
              makes that run non-German, so it passes through unchanged.

    Returns:
        The text with soft hyphens inserted.
    """
    return "".join(
        run if run.isspace() else hyphenate_word(run)
        for run in split_runs(text)
    )
