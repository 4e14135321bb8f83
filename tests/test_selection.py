"""Tests for position quotas and pick toggling."""

import pytest

from teambuilder.services.selection import (
    CLASSIC_QUOTAS,
    FULL_QUOTAS,
    RosterStatus,
    TeamSelection,
    empty_selection,
    has_entries,
    is_complete,
    quotas_for,
    roster_status,
)


class TestIsComplete:
    def test_exact_counts_are_complete(self):
        picks = {"QB": [1, 2], "WR": [3, 4], "RB": [5, 6], "TE": [7]}
        assert is_complete(CLASSIC_QUOTAS, picks)

    def test_short_position_is_incomplete(self):
        picks = {"QB": [1], "WR": [3, 4], "RB": [5, 6], "TE": [7]}
        assert not is_complete(CLASSIC_QUOTAS, picks)

    def test_over_quota_is_incomplete(self):
        """Completeness needs equality, not at-least."""
        picks = {"QB": [1, 2, 8], "WR": [3, 4], "RB": [5, 6], "TE": [7]}
        assert not is_complete(CLASSIC_QUOTAS, picks)

    def test_missing_position_is_incomplete(self):
        picks = {"QB": [1, 2], "WR": [3, 4], "RB": [5, 6]}
        assert not is_complete(CLASSIC_QUOTAS, picks)

    def test_extra_positions_are_ignored(self):
        picks = {"QB": [1, 2], "WR": [3, 4], "RB": [5, 6], "TE": [7], "K": [9]}
        assert is_complete(CLASSIC_QUOTAS, picks)

    def test_full_table_requires_dst_and_k(self):
        picks = {"QB": [1, 2], "WR": [3, 4], "RB": [5, 6], "TE": [7]}
        assert not is_complete(FULL_QUOTAS, picks)
        assert is_complete(FULL_QUOTAS, {**picks, "DST": [16], "K": [19]})


class TestTeamSelection:
    def test_starts_with_empty_bucket_per_position(self):
        sel = TeamSelection(FULL_QUOTAS)
        assert sel.as_dict() == {"QB": [], "WR": [], "RB": [], "TE": [], "DST": [], "K": []}

    def test_toggle_adds_until_quota(self):
        sel = TeamSelection(CLASSIC_QUOTAS)
        assert sel.toggle("QB", 1)
        assert sel.toggle("QB", 2)
        assert not sel.toggle("QB", 3)
        assert sel.picks("QB") == [1, 2]

    def test_toggle_at_quota_leaves_selection_unchanged(self):
        sel = TeamSelection(CLASSIC_QUOTAS, {"TE": [7]})
        before = sel.as_dict()
        sel.toggle("TE", 8)
        assert sel.as_dict() == before

    def test_toggle_selected_always_removes(self):
        sel = TeamSelection(CLASSIC_QUOTAS, {"QB": [1, 2]})
        assert sel.count("QB") == sel.quota("QB")
        assert sel.toggle("QB", 1)
        assert sel.picks("QB") == [2]

    def test_order_of_picks_is_kept(self):
        sel = TeamSelection(CLASSIC_QUOTAS)
        sel.toggle("WR", 6)
        sel.toggle("WR", 5)
        assert sel.picks("WR") == [6, 5]

    def test_unknown_position_has_zero_quota(self):
        sel = TeamSelection(CLASSIC_QUOTAS)
        assert not sel.toggle("K", 19)
        assert sel.picks("K") == []

    def test_can_select_mirrors_disabled_checkbox(self):
        sel = TeamSelection(CLASSIC_QUOTAS, {"TE": [7]})
        assert sel.can_select("TE", 7)
        assert not sel.can_select("TE", 8)
        assert sel.can_select("QB", 1)

    def test_remaining(self):
        sel = TeamSelection(CLASSIC_QUOTAS, {"QB": [1]})
        assert sel.remaining("QB") == 1
        assert sel.remaining("TE") == 1

    def test_clear_resets_all_buckets(self):
        sel = TeamSelection(CLASSIC_QUOTAS, {"QB": [1, 2], "TE": [7]})
        sel.clear()
        assert sel.as_dict() == empty_selection(CLASSIC_QUOTAS)

    def test_initial_picks_respect_quota(self):
        sel = TeamSelection(CLASSIC_QUOTAS, {"TE": [7, 8]})
        assert sel.picks("TE") == [7]

    def test_as_dict_is_a_copy(self):
        sel = TeamSelection(CLASSIC_QUOTAS)
        out = sel.as_dict()
        out["QB"].append(99)
        assert sel.picks("QB") == []


class TestRosterStatus:
    def test_empty_buckets_are_empty(self):
        assert roster_status(CLASSIC_QUOTAS, empty_selection(CLASSIC_QUOTAS)) is RosterStatus.EMPTY
        assert roster_status(CLASSIC_QUOTAS, {}) is RosterStatus.EMPTY

    def test_partial_is_editing(self):
        assert roster_status(CLASSIC_QUOTAS, {"QB": [1]}) is RosterStatus.EDITING

    def test_complete(self):
        picks = {"QB": [1, 2], "WR": [3, 4], "RB": [5, 6], "TE": [7]}
        assert roster_status(CLASSIC_QUOTAS, picks) is RosterStatus.COMPLETE

    def test_has_entries(self):
        assert not has_entries({"QB": [], "WR": []})
        assert has_entries({"QB": [], "WR": [3]})


def test_quotas_for_known_formats():
    assert quotas_for("classic") == CLASSIC_QUOTAS
    assert quotas_for("full") == FULL_QUOTAS


def test_quotas_for_unknown_format():
    with pytest.raises(ValueError):
        quotas_for("dynasty")
