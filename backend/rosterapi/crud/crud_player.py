from rosterapi.crud.base import BaseRepository
from rosterapi.models.players import Player


class PlayerRepository(BaseRepository):
    model = Player

    def find_by_name(self, name: str) -> Player | None:
        return self.db.query(Player).filter(Player.name == name).one_or_none()

    def find_by_team_id(self, team_id: int) -> list[Player]:
        return (
            self.db.query(Player)
            .filter(Player.team_id == team_id)
            .order_by(Player.id.asc())
            .all()
        )
