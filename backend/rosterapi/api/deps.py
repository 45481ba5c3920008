from fastapi import Depends
from sqlalchemy.orm import Session

from rosterapi.crud.crud_player import PlayerRepository
from rosterapi.crud.crud_team import TeamRepository
from rosterapi.db.session import get_db
from rosterapi.services.player_service import PlayerService
from rosterapi.services.team_service import TeamService


# Services are built per request around the request's session
def get_team_service(db: Session = Depends(get_db)) -> TeamService:
    return TeamService(TeamRepository(db), PlayerRepository(db))


def get_player_service(db: Session = Depends(get_db)) -> PlayerService:
    return PlayerService(PlayerRepository(db), TeamRepository(db))
