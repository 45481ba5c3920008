from sqlalchemy import Column, Integer, String, Boolean

from rosterapi.db.base import Base


class Team(Base):
    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, index=True)

    team_name = Column(String, nullable=False, unique=True, index=True)  # ej: "Cowboys"
    wins = Column(Integer, nullable=True)
    losses = Column(Integer, nullable=True)
    is_current_champion = Column(Boolean, nullable=True)

    def __repr__(self) -> str:
        return f"Team(id={self.id!r}, team_name={self.team_name!r})"
