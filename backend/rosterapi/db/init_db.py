from rosterapi.db.session import engine
from rosterapi.db.base import Base

# Registers the models on Base.metadata before creating tables
import rosterapi.models  # noqa: F401


def init_db(bind=None):
    Base.metadata.create_all(bind=bind or engine)
