from sqlalchemy import Column, Integer, String, ForeignKey

from rosterapi.db.base import Base


class Player(Base):
    __tablename__ = "players"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String, nullable=False, unique=True, index=True)
    position = Column(String, nullable=True)  # "Quarterback", "Wide Receiver"...

    # The player side owns the FK; the store removes players with their team.
    # No relationship() here: the team is looked up explicitly when needed.
    team_id = Column(
        Integer,
        ForeignKey("teams.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"Player(id={self.id!r}, name={self.name!r}, team_id={self.team_id!r})"
