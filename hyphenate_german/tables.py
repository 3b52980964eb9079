"""Affix and consonant-cluster tables for German hyphenation.

WHY: German derivational morphology gives the most reliable break points at
a word's edges (Ver-kehr, Frei-heit), and some consonant sequences are
never split (sch, ch, st, pf). Centralizing these hand-curated lists as
importable constants keeps the rule code in core.py free of data.

HOW: The raw lists are declared in reading order. AffixTable.build() and
ClusterTable.build() sort them longest-first exactly once, at import, and
freeze the result into tuples held by frozen dataclasses. AFFIX_TABLE and
CLUSTER_TABLE are the process-wide instances the engine uses.

RULES:
- Tables are frozen constants. Never re-sort or mutate them per call.
  Concurrent callers share them without locking.
- Longest entries are tried first; entries of equal length keep their
  declaration order.
- An affix only matches if at least MIN_REMAINDER characters remain.
- All entries are lower case; lookups expect a lower-cased word.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .models import AffixMatch

# An affix must leave at least this many characters of the word.
MIN_REMAINDER = 3

# Common German prefixes that can be separated
PREFIXES: Tuple[str, ...] = (
    "über", "unter", "hinter", "zwischen", "durch", "wider",
    "ge", "be", "ver", "zer", "ent", "emp", "er", "miss", "un",
    "vor", "nach", "aus", "ein", "auf", "ab", "an", "bei",
    "mit", "zu", "hin", "her", "um", "herum", "hinaus", "heraus",
)

# Common German derivational suffixes
SUFFIXES: Tuple[str, ...] = (
    "schaft", "heit", "keit", "ung", "lich", "isch", "chen", "lein",
    "bar", "sam", "haft", "los", "voll", "reich", "arm", "wert",
    "weise", "artig", "mäßig", "tum", "nis", "sal", "sel",
    "tion", "sion", "ieren", "ismus", "ist", "ität",
)

# Consonant clusters that should not be split
INSEPARABLE_CLUSTERS: Tuple[str, ...] = (
    "sch", "ch", "ck", "ph", "th", "qu", "pf", "st", "sp",
    "bl", "br", "cl", "cr", "dr", "fl", "fr", "gl", "gr",
    "kl", "kn", "kr", "pl", "pr", "tr", "schl", "schn",
    "schm", "schr", "schw", "spr", "str",
)


def longest_first(entries: Iterable[str]) -> Tuple[str, ...]:
    """Return entries ordered by descending length (stable for ties)."""
    return tuple(sorted(entries, key=len, reverse=True))


@dataclass(frozen=True)
class AffixTable:
    """Separable prefixes and derivational suffixes, longest first.

    Use AffixTable.build() rather than the constructor so the ordering
    invariant holds.
    """

    prefixes: Tuple[str, ...]
    suffixes: Tuple[str, ...]

    @classmethod
    def build(cls, prefixes: Iterable[str], suffixes: Iterable[str]) -> "AffixTable":
        return cls(prefixes=longest_first(prefixes), suffixes=longest_first(suffixes))

    def longest_prefix_match(self, lower_word: str) -> Optional[AffixMatch]:
        """Find the longest prefix that leaves at least MIN_REMAINDER characters.

        Args:
            lower_word: The word, already lower-cased.

        Returns:
            AffixMatch with the prefix and its end offset, or None.
        """
        for prefix in self.prefixes:
            if lower_word.startswith(prefix) and len(lower_word) - len(prefix) >= MIN_REMAINDER:
                return AffixMatch(prefix, len(prefix))
        return None

    def longest_suffix_match(self, lower_word: str) -> Optional[AffixMatch]:
        """Find the longest suffix that leaves at least MIN_REMAINDER characters.

        Args:
            lower_word: The word, already lower-cased.

        Returns:
            AffixMatch with the suffix and its start offset, or None.
        """
        for suffix in self.suffixes:
            start = len(lower_word) - len(suffix)
            if lower_word.endswith(suffix) and start >= MIN_REMAINDER:
                return AffixMatch(suffix, start)
        return None


@dataclass(frozen=True)
class ClusterTable:
    """Consonant sequences that are never split, longest first."""

    clusters: Tuple[str, ...]

    @classmethod
    def build(cls, clusters: Iterable[str]) -> "ClusterTable":
        return cls(clusters=longest_first(clusters))

    def contains_cluster_around(self, lower_word: str, index: int) -> bool:
        """True if a cluster lies inside the 3-character window centred on index.

        The window is ``lower_word[index - 1:index + 2]``, i.e. the characters
        before, at and after the candidate boundary. Callers pass index >= 1.
        """
        window = lower_word[index - 1:index + 2]
        return any(cluster in window for cluster in self.clusters)


AFFIX_TABLE = AffixTable.build(PREFIXES, SUFFIXES)
CLUSTER_TABLE = ClusterTable.build(INSEPARABLE_CLUSTERS)
