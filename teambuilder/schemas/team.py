from pydantic import BaseModel, Field, StrictInt
from typing import Dict, List, Optional

class SaveTeamRequest(BaseModel):
    team_name: Optional[str] = Field(default=None, alias="teamName")
    team_players: Optional[Dict[str, List[StrictInt]]] = Field(default=None, alias="teamPlayers")

class TeamResponse(BaseModel):
    teamPlayers: Dict[str, List[int]]
