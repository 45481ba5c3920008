# Import the models here so SQLAlchemy registers them before create_all
from rosterapi.models.teams import Team  # noqa: F401
from rosterapi.models.players import Player  # noqa: F401
