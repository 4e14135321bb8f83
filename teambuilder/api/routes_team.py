# teambuilder/api/routes_team.py
from fastapi import APIRouter, Depends, HTTPException, Path

from teambuilder.core.errors import TeamBuilderError
from teambuilder.deps import get_roster_service
from teambuilder.schemas.account import SuccessResponse
from teambuilder.schemas.team import SaveTeamRequest, TeamResponse
from teambuilder.services.roster import RosterService

router = APIRouter(tags=["team"])


@router.post("/save-team", response_model=SuccessResponse)
def save_team(
    body: SaveTeamRequest,
    rosters: RosterService = Depends(get_roster_service),
):
    """Replaces the stored roster wholesale. An empty map is a valid roster."""
    try:
        rosters.save_roster(body.team_name, body.team_players)
    except TeamBuilderError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return SuccessResponse()


@router.get("/team/{team_name:path}", response_model=TeamResponse)
def get_team(
    team_name: str = Path(..., description="Account team name"),
    rosters: RosterService = Depends(get_roster_service),
):
    try:
        return TeamResponse(teamPlayers=rosters.get_roster(team_name))
    except TeamBuilderError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
