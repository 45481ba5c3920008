"""Field-by-field copies between entities and transport shapes.

One function per view and direction. Nothing here opens a query: when a
player view needs its team, the caller looks the team up and passes it in.
"""

from rosterapi.models.players import Player
from rosterapi.models.teams import Team
from rosterapi.schemas.players import PlayerCreate, PlayerOut
from rosterapi.schemas.teams import TeamNoChampion, TeamUpdate, TeamWithChampion


def team_from_transport(payload: TeamWithChampion) -> Team:
    # id is system assigned, never taken from the request
    return Team(
        team_name=payload.team_name,
        wins=payload.wins,
        losses=payload.losses,
        is_current_champion=payload.is_current_champion,
    )


def team_to_with_champion(team: Team) -> TeamWithChampion:
    return TeamWithChampion(
        id=team.id,
        team_name=team.team_name,
        wins=team.wins,
        losses=team.losses,
        is_current_champion=team.is_current_champion,
    )


def team_to_no_champion(team: Team) -> TeamNoChampion:
    return TeamNoChampion(
        id=team.id,
        team_name=team.team_name,
        wins=team.wins,
        losses=team.losses,
    )


def apply_team_update(payload: TeamUpdate, team: Team) -> Team:
    """Overwrite only the fields the client actually sent."""
    sent = payload.model_fields_set

    if "team_name" in sent:
        team.team_name = payload.team_name
    if "wins" in sent:
        team.wins = payload.wins
    if "losses" in sent:
        team.losses = payload.losses
    if "is_current_champion" in sent:
        team.is_current_champion = payload.is_current_champion

    return team


def player_from_transport(payload: PlayerCreate) -> Player:
    return Player(
        name=payload.name,
        position=payload.position,
        team_id=payload.team_id,
    )


def player_to_transport(player: Player, team: Team | None) -> PlayerOut:
    # team_id stays on the entity; the read view only shows the team's name
    return PlayerOut(
        name=player.name,
        position=player.position,
        team_name=team.team_name if team is not None else None,
    )
