"""
Position quotas and the pick/toggle rules used by the team builder.

A roster is complete only when every position in the quota table holds
exactly its quota, never more and never fewer.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List, Mapping

QuotaTable = Dict[str, int]
Selection = Dict[str, List[int]]

CLASSIC_QUOTAS: QuotaTable = {"QB": 2, "WR": 2, "RB": 2, "TE": 1}
FULL_QUOTAS: QuotaTable = {"QB": 2, "WR": 2, "RB": 2, "TE": 1, "DST": 1, "K": 1}

QUOTA_TABLES: Dict[str, QuotaTable] = {
    "classic": CLASSIC_QUOTAS,
    "full": FULL_QUOTAS,
}


class RosterStatus(str, Enum):
    EMPTY = "empty"
    EDITING = "editing"
    COMPLETE = "complete"


def quotas_for(roster_format: str) -> QuotaTable:
    try:
        return dict(QUOTA_TABLES[roster_format])
    except KeyError:
        raise ValueError(f"Unknown roster format {roster_format!r}; expected one of {sorted(QUOTA_TABLES)}")


def empty_selection(quotas: Mapping[str, int]) -> Selection:
    return {pos: [] for pos in quotas}


def is_complete(quotas: Mapping[str, int], selection: Mapping[str, Iterable[int]]) -> bool:
    return all(len(list(selection.get(pos, []))) == need for pos, need in quotas.items())


def has_entries(selection: Mapping[str, Iterable[int]]) -> bool:
    """True if any position bucket holds at least one pick."""
    return any(len(list(ids)) > 0 for ids in selection.values())


def roster_status(quotas: Mapping[str, int], selection: Mapping[str, Iterable[int]]) -> RosterStatus:
    if not has_entries(selection):
        return RosterStatus.EMPTY
    if is_complete(quotas, selection):
        return RosterStatus.COMPLETE
    return RosterStatus.EDITING


class TeamSelection:
    """
    Picks grouped by position. Removing a pick is always allowed; adding one
    is silently refused once the position is at quota. Positions outside the
    quota table have a quota of zero.
    """

    def __init__(self, quotas: Mapping[str, int], picks: Mapping[str, Iterable[int]] | None = None):
        self.quotas: QuotaTable = dict(quotas)
        self._picks: Selection = empty_selection(self.quotas)
        for pos, ids in (picks or {}).items():
            for pid in ids:
                if not self.is_selected(pos, pid):
                    self.toggle(pos, pid)

    def quota(self, position: str) -> int:
        return self.quotas.get(position, 0)

    def picks(self, position: str) -> List[int]:
        return list(self._picks.get(position, []))

    def count(self, position: str) -> int:
        return len(self._picks.get(position, []))

    def remaining(self, position: str) -> int:
        return max(self.quota(position) - self.count(position), 0)

    def is_selected(self, position: str, player_id: int) -> bool:
        return player_id in self._picks.get(position, [])

    def can_select(self, position: str, player_id: int) -> bool:
        """Whether the checkbox for this player would be enabled."""
        return self.is_selected(position, player_id) or self.count(position) < self.quota(position)

    def toggle(self, position: str, player_id: int) -> bool:
        """Add or remove a pick. Returns False when the add was refused."""
        current = self._picks.get(position, [])
        if player_id in current:
            self._picks[position] = [pid for pid in current if pid != player_id]
            return True
        if len(current) < self.quota(position):
            self._picks[position] = current + [player_id]
            return True
        return False

    def clear(self) -> None:
        self._picks = empty_selection(self.quotas)

    @property
    def complete(self) -> bool:
        return is_complete(self.quotas, self._picks)

    @property
    def status(self) -> RosterStatus:
        return roster_status(self.quotas, self._picks)

    def as_dict(self) -> Selection:
        return {pos: list(ids) for pos, ids in self._picks.items()}
