from __future__ import annotations

import logging

from rosterapi.core.errors import PlayerNotFound
from rosterapi.crud.crud_player import PlayerRepository
from rosterapi.crud.crud_team import TeamRepository
from rosterapi.schemas.players import PlayerCreate, PlayerOut
from rosterapi.services import mapping

logger = logging.getLogger(__name__)


class PlayerService:
    def __init__(self, players: PlayerRepository, teams: TeamRepository):
        self.players = players
        self.teams = teams

    def add_player(self, payload: PlayerCreate) -> str:
        # teamId is not checked here; the FK constraint rejects unknown teams
        player = self.players.save(mapping.player_from_transport(payload))
        logger.info("Player added: id=%s name=%s team_id=%s", player.id, player.name, player.team_id)
        return f"Player {player.name} added"

    def get_player(self, name: str) -> PlayerOut:
        player = self.players.find_by_name(name)
        if player is None:
            logger.warning("Player lookup failed: name=%s", name)
            raise PlayerNotFound(name)

        team = self.teams.find_by_id(player.team_id)
        return mapping.player_to_transport(player, team)
