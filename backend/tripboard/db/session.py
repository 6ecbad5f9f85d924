"""
Database session management.
"""
from typing import Iterator
from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from tripboard.db.base import Base


class Database:
    """
    Store handle owning the engine and session factory.

    Built once by the application factory and kept on ``app.state``;
    ``create_all`` runs at startup and ``dispose`` at shutdown.
    """

    def __init__(self, url: str, echo: bool = False):
        connect_args = {}
        engine_kwargs = {"pool_pre_ping": True}
        if url.startswith("sqlite"):
            # Sessions are opened in the threadpool and used on the event loop
            connect_args["check_same_thread"] = False
        else:
            engine_kwargs["pool_recycle"] = 3600

        self.engine = create_engine(url, echo=echo, connect_args=connect_args, **engine_kwargs)

        if url.startswith("sqlite"):
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self):
        """Create all tables."""
        # Import models so they are registered on the metadata
        import tripboard.models  # noqa: F401
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self):
        self.engine.dispose()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_db(request: Request) -> Iterator[Session]:
    """Dependency for getting database session."""
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()
