"""
Client-side team builder session.

Flow: UNAUTHENTICATED -> EDITING -> SAVED, and back to EDITING through
delete_and_rechoose(). Whether the session is SAVED is worked out from the
saved team itself (any position holding a pick), not tracked as a flag, so
a saved roster that is non-empty but incomplete still shows as saved.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional, Tuple

import requests

from teambuilder.client.api import ApiError, FantasyApiClient
from teambuilder.core.config import settings
from teambuilder.schemas.player import Player
from teambuilder.services.catalog import find_player, group_by_position, load_players
from teambuilder.services.selection import (
    RosterStatus,
    Selection,
    TeamSelection,
    empty_selection,
    has_entries,
    quotas_for,
    roster_status,
)

logger = logging.getLogger(__name__)


class BuilderState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    EDITING = "editing"
    SAVED = "saved"


@dataclass(frozen=True)
class Credentials:
    # Identity only; the password is never kept after sign-in
    team_name: str


class TeamBuilder:
    def __init__(
        self,
        api: FantasyApiClient,
        quotas: Optional[Mapping[str, int]] = None,
        players: Optional[List[Player]] = None,
    ):
        self.api = api
        self.quotas: Dict[str, int] = dict(quotas) if quotas is not None else quotas_for(settings.ROSTER_FORMAT)
        self.players: List[Player] = players if players is not None else load_players()
        self.selection = TeamSelection(self.quotas)
        self.saved_team: Selection = {}
        self.credentials: Optional[Credentials] = None
        self.error: str = ""

    # ---------- derived state ----------

    @property
    def state(self) -> BuilderState:
        if self.credentials is None:
            return BuilderState.UNAUTHENTICATED
        if has_entries(self.saved_team):
            return BuilderState.SAVED
        return BuilderState.EDITING

    @property
    def status(self) -> RosterStatus:
        if self.state is BuilderState.SAVED:
            return roster_status(self.quotas, self.saved_team)
        return self.selection.status

    @property
    def can_save(self) -> bool:
        return self.state is BuilderState.EDITING and self.selection.complete

    def available_players(self) -> Dict[str, List[Player]]:
        return group_by_position(self.players, self.quotas)

    # ---------- auth ----------

    def sign_in(self, team_name: str, password: str) -> bool:
        return self._authenticate(self.api.login, team_name, password)

    def register(self, team_name: str, password: str) -> bool:
        return self._authenticate(self.api.register, team_name, password)

    def _authenticate(self, call: Callable[[str, str], None], team_name: str, password: str) -> bool:
        self.error = ""
        try:
            call(team_name, password)
        except ApiError as e:
            self.error = e.message
            return False
        except requests.RequestException as e:
            logger.warning("auth request failed: %s", e)
            self.error = "Error"
            return False

        self.credentials = Credentials(team_name=team_name)
        self.refresh_saved_team()
        return True

    def logout(self) -> None:
        self.credentials = None
        self.saved_team = {}
        self.selection.clear()
        self.error = ""

    # ---------- roster ----------

    def refresh_saved_team(self) -> None:
        """Load the stored roster. Failures are logged, not reported to the user."""
        if self.credentials is None:
            return
        try:
            self.saved_team = self.api.get_team(self.credentials.team_name)
        except (ApiError, requests.RequestException) as e:
            logger.warning("could not load saved team for %r: %s", self.credentials.team_name, e)

    def toggle(self, position: str, player_id: int) -> bool:
        if self.state is not BuilderState.EDITING:
            return False
        return self.selection.toggle(position, player_id)

    def save(self) -> bool:
        """Persist the current picks. Only available once every quota is met."""
        if not self.can_save or self.credentials is None:
            return False
        picks = self.selection.as_dict()
        self.saved_team = picks
        try:
            self.api.save_team(self.credentials.team_name, picks)
        except (ApiError, requests.RequestException) as e:
            logger.warning("save failed for %r: %s", self.credentials.team_name, e)
            self.error = getattr(e, "message", None) or "Error"
            return False
        return True

    def delete_and_rechoose(self) -> None:
        if self.credentials is None:
            return
        cleared = empty_selection(self.quotas)
        self.saved_team = {}
        self.selection.clear()
        try:
            self.api.save_team(self.credentials.team_name, cleared)
        except (ApiError, requests.RequestException) as e:
            logger.warning("clearing saved team failed for %r: %s", self.credentials.team_name, e)

    def summary(self) -> List[Tuple[str, Player]]:
        """(position, player) for each saved pick; ids not in the catalog are skipped."""
        rows: List[Tuple[str, Player]] = []
        for pos, ids in self.saved_team.items():
            for pid in ids:
                player = find_player(self.players, pid)
                if player is not None:
                    rows.append((pos, player))
        return rows
