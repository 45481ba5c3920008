from __future__ import annotations

import logging

from rosterapi.core.errors import TeamNotFound
from rosterapi.crud.crud_player import PlayerRepository
from rosterapi.crud.crud_team import TeamRepository
from rosterapi.schemas.players import PlayerOut
from rosterapi.schemas.teams import TeamNoChampion, TeamUpdate, TeamWithChampion
from rosterapi.services import mapping

logger = logging.getLogger(__name__)


class TeamService:
    def __init__(self, teams: TeamRepository, players: PlayerRepository):
        self.teams = teams
        self.players = players

    def add_team(self, payload: TeamWithChampion) -> str:
        team = self.teams.save(mapping.team_from_transport(payload))
        logger.info("Team added: id=%s name=%s", team.id, team.team_name)
        return f"Team {team.team_name} added"

    def get_team(self, team_name: str) -> TeamWithChampion:
        team = self.teams.find_by_name(team_name)
        if team is None:
            logger.warning("Team lookup failed: name=%s", team_name)
            raise TeamNotFound(team_name)
        return mapping.team_to_with_champion(team)

    def list_teams(self) -> list[TeamNoChampion]:
        return [mapping.team_to_no_champion(t) for t in self.teams.find_all()]

    def update_team(self, team_id: int, payload: TeamUpdate) -> str:
        team = self.teams.find_by_id(team_id)
        if team is None:
            # Reported back as a message, not raised
            logger.warning("Team not updated, no such id: %s", team_id)
            return f"Team {team_id} not updated: no team with that id"

        mapping.apply_team_update(payload, team)
        self.teams.save(team)
        logger.info("Team updated: id=%s fields=%s", team_id, sorted(payload.model_fields_set))
        return f"Team {team_id} updated"

    def delete_team(self, team_id: int) -> str:
        # No existence check: deleting a missing id answers the same way
        deleted = self.teams.delete_by_id(team_id)
        logger.info("Team delete: id=%s rows=%s", team_id, deleted)
        return f"Team {team_id} deleted"

    def list_team_players(self, team_name: str) -> list[PlayerOut]:
        team = self.teams.find_by_name(team_name)
        if team is None:
            raise TeamNotFound(team_name)
        return [mapping.player_to_transport(p, team) for p in self.players.find_by_team_id(team.id)]
