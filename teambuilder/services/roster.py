from __future__ import annotations

import logging
from typing import Dict, List

from teambuilder.core.errors import BadRequest, NotFound
from teambuilder.db.store import RecordStore

logger = logging.getLogger(__name__)

TeamPlayers = Dict[str, List[int]]


class RosterService:
    def __init__(self, store: RecordStore):
        self.store = store

    def save_roster(self, team_name: str | None, selection: TeamPlayers | None) -> None:
        """Overwrite the account's roster with `selection` in full."""
        if not team_name or selection is None:
            raise BadRequest("Missing teamName or teamPlayers")
        record = self.store.get(team_name)
        if record is None:
            raise NotFound("User not found")

        record["teamPlayers"] = {pos: list(ids) for pos, ids in selection.items()}
        self.store.put(team_name, record)
        logger.info(
            "saved roster for %r (%d players)",
            team_name, sum(len(ids) for ids in selection.values()),
        )

    def get_roster(self, team_name: str) -> TeamPlayers:
        record = self.store.get(team_name)
        if record is None:
            raise NotFound("User not found")
        return record.get("teamPlayers") or {}
