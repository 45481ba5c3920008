from fastapi import APIRouter, Depends, status

from rosterapi.api.deps import get_team_service
from rosterapi.schemas.messages import MessageOut
from rosterapi.schemas.players import PlayerOut
from rosterapi.schemas.teams import TeamNoChampion, TeamUpdate, TeamWithChampion
from rosterapi.services.team_service import TeamService

router = APIRouter(prefix="/api/v1", tags=["teams"])


@router.post("/teams", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
def add_team(payload: TeamWithChampion, service: TeamService = Depends(get_team_service)):
    return MessageOut(detail=service.add_team(payload))


@router.get("/teams", response_model=list[TeamNoChampion])
def list_teams(service: TeamService = Depends(get_team_service)):
    return service.list_teams()


@router.get("/teams/{team_name}", response_model=TeamWithChampion)
def get_team(team_name: str, service: TeamService = Depends(get_team_service)):
    return service.get_team(team_name)


@router.get("/teams/{team_name}/players", response_model=list[PlayerOut])
def list_team_players(team_name: str, service: TeamService = Depends(get_team_service)):
    return service.list_team_players(team_name)


@router.put("/teams/{team_id}", response_model=MessageOut)
def update_team(team_id: int, payload: TeamUpdate, service: TeamService = Depends(get_team_service)):
    # A missing id still answers 200, with a "not updated" message
    return MessageOut(detail=service.update_team(team_id, payload))


@router.delete("/teams/{team_id}", response_model=MessageOut)
def delete_team(team_id: int, service: TeamService = Depends(get_team_service)):
    return MessageOut(detail=service.delete_team(team_id))
