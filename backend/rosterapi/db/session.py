from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from rosterapi.core.config import settings


def is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def enable_sqlite_foreign_keys(engine) -> None:
    # SQLite ignores FOREIGN KEY / ON DELETE CASCADE unless enabled per connection
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# SQLite needs this when used from FastAPI (several threads)
connect_args = {"check_same_thread": False} if is_sqlite(settings.DATABASE_URL) else {}

engine = create_engine(
    settings.DATABASE_URL,
    connect_args=connect_args,
    echo=settings.SQL_ECHO,
)

if is_sqlite(settings.DATABASE_URL):
    enable_sqlite_foreign_keys(engine)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# FastAPI dependency: one session per request, always closed at the end
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
