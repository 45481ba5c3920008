from rosterapi.crud.base import BaseRepository
from rosterapi.models.teams import Team


class TeamRepository(BaseRepository):
    model = Team

    def find_by_name(self, team_name: str) -> Team | None:
        # team_name is UNIQUE, so at most one row
        return self.db.query(Team).filter(Team.team_name == team_name).one_or_none()
