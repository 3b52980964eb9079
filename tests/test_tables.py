"""Unit tests for the affix and cluster tables.

WHY: Longest-match behaviour depends entirely on the tables being ordered
longest-first, and concurrent callers depend on them never changing. A
wrong order silently turns "unter-" into "un-".

HOW: Checks the frozen ordering, the remainder rule for prefix and suffix
lookups, and the 3-character cluster window.

RULES:
- Lookups are always given lower-cased words, as core.py does.
"""

import dataclasses

import pytest

from hyphenate_german.models import AffixMatch
from hyphenate_german.tables import (
    AFFIX_TABLE,
    CLUSTER_TABLE,
    PREFIXES,
    SUFFIXES,
    AffixTable,
    ClusterTable,
    longest_first,
)


class TestOrdering:
    """Tables are sorted longest-first once, at import."""

    def test_prefixes_longest_first(self):
        lengths = [len(p) for p in AFFIX_TABLE.prefixes]
        assert lengths == sorted(lengths, reverse=True)

    def test_suffixes_longest_first(self):
        lengths = [len(s) for s in AFFIX_TABLE.suffixes]
        assert lengths == sorted(lengths, reverse=True)

    def test_clusters_longest_first(self):
        lengths = [len(c) for c in CLUSTER_TABLE.clusters]
        assert lengths == sorted(lengths, reverse=True)

    def test_ties_keep_declaration_order(self):
        assert AFFIX_TABLE.prefixes[:4] == ("zwischen", "hinter", "hinaus", "heraus")

    def test_no_entries_lost(self):
        assert sorted(AFFIX_TABLE.prefixes) == sorted(PREFIXES)
        assert sorted(AFFIX_TABLE.suffixes) == sorted(SUFFIXES)

    def test_longest_first_accepts_any_iterable(self):
        assert longest_first(iter(["ab", "abc", "a"])) == ("abc", "ab", "a")


class TestImmutability:
    """Shared tables cannot be changed after construction."""

    def test_tables_are_tuples(self):
        assert isinstance(AFFIX_TABLE.prefixes, tuple)
        assert isinstance(AFFIX_TABLE.suffixes, tuple)
        assert isinstance(CLUSTER_TABLE.clusters, tuple)

    def test_affix_table_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            AFFIX_TABLE.prefixes = ("un",)

    def test_cluster_table_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            CLUSTER_TABLE.clusters = ()

    def test_build_sorts_custom_entries(self):
        table = AffixTable.build(["ab", "abend"], ["e", "en"])
        assert table.prefixes == ("abend", "ab")
        assert table.suffixes == ("en", "e")
        assert ClusterTable.build(["ch", "sch"]).clusters == ("sch", "ch")


class TestPrefixMatch:
    """longest_prefix_match() prefers longer prefixes and keeps 3 characters."""

    def test_longer_prefix_wins(self):
        assert AFFIX_TABLE.longest_prefix_match("unterhaltung") == AffixMatch("unter", 5)

    def test_herum_beats_her(self):
        assert AFFIX_TABLE.longest_prefix_match("herumlaufen") == AffixMatch("herum", 5)

    def test_exactly_three_remaining(self):
        assert AFFIX_TABLE.longest_prefix_match("überall") == AffixMatch("über", 4)

    def test_too_little_remaining(self):
        assert AFFIX_TABLE.longest_prefix_match("übers") is None

    def test_falls_back_to_shorter_prefix(self):
        # "unter" does not match "unten", but "un" does
        assert AFFIX_TABLE.longest_prefix_match("unten") == AffixMatch("un", 2)

    def test_no_prefix(self):
        assert AFFIX_TABLE.longest_prefix_match("hamburg") is None


class TestSuffixMatch:
    """longest_suffix_match() prefers longer suffixes and keeps 3 characters."""

    def test_heit(self):
        assert AFFIX_TABLE.longest_suffix_match("freiheit") == AffixMatch("heit", 4)

    def test_schaft_beats_haft(self):
        assert AFFIX_TABLE.longest_suffix_match("gesellschaft") == AffixMatch("schaft", 6)

    def test_too_little_remaining(self):
        assert AFFIX_TABLE.longest_suffix_match("bung") is None

    def test_whole_word_is_not_a_suffix(self):
        assert AFFIX_TABLE.longest_suffix_match("keit") is None

    def test_no_suffix(self):
        assert AFFIX_TABLE.longest_suffix_match("hamburg") is None


class TestClusterWindow:
    """contains_cluster_around() looks at word[i-1:i+2]."""

    def test_sch_at_start(self):
        assert CLUSTER_TABLE.contains_cluster_around("schön", 1)

    def test_ch_window(self):
        assert CLUSTER_TABLE.contains_cluster_around("schön", 2)

    def test_no_cluster(self):
        assert not CLUSTER_TABLE.contains_cluster_around("hamburg", 3)

    def test_cluster_after_boundary(self):
        # window "rtr" contains "tr"
        assert CLUSTER_TABLE.contains_cluster_around("partrag", 3)

    def test_four_letter_cluster_never_fits_window(self):
        table = ClusterTable.build(["schl"])
        assert not table.contains_cluster_around("schlaf", 1)
