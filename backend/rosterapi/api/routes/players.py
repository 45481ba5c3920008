from fastapi import APIRouter, Depends, status

from rosterapi.api.deps import get_player_service
from rosterapi.schemas.messages import MessageOut
from rosterapi.schemas.players import PlayerCreate, PlayerOut
from rosterapi.services.player_service import PlayerService

router = APIRouter(prefix="/api/v1", tags=["players"])


@router.post("/players", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
def add_player(payload: PlayerCreate, service: PlayerService = Depends(get_player_service)):
    return MessageOut(detail=service.add_player(payload))


@router.get("/players/{name}", response_model=PlayerOut)
def get_player(name: str, service: PlayerService = Depends(get_player_service)):
    return service.get_player(name)
