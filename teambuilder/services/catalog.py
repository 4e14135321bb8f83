from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from teambuilder.schemas.player import FbsTeam, Player

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
PLAYERS_FILE = DATA_DIR / "players.json"
FBS_TEAMS_FILE = DATA_DIR / "fbs_teams.json"


def _load_array(path: Path) -> list:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array")
    return data


def load_players(path: Path | str | None = None) -> List[Player]:
    path = Path(path) if path else PLAYERS_FILE
    players = [Player(**p) for p in _load_array(path)]
    logger.debug("loaded %d players from %s", len(players), path)
    return players


def load_fbs_teams(path: Path | str | None = None) -> List[FbsTeam]:
    path = Path(path) if path else FBS_TEAMS_FILE
    return [FbsTeam(**t) for t in _load_array(path)]


def group_by_position(players: Iterable[Player], positions: Iterable[str]) -> Dict[str, List[Player]]:
    """Players bucketed by position, in catalog order. Only the given positions appear."""
    groups: Dict[str, List[Player]] = {pos: [] for pos in positions}
    for p in players:
        if p.position in groups:
            groups[p.position].append(p)
    return groups


def find_player(players: Iterable[Player], player_id: int) -> Optional[Player]:
    return next((p for p in players if p.id == player_id), None)
