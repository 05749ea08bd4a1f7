# app/db/session.py
from typing import Generator, Optional

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.logging import logger

Base = declarative_base()


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


class Database:
    """
    Owns the engine and session factory for one application instance.
    Nothing is connected until init() is called.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self.engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    def init(self, create_tables: bool = True) -> None:
        if self.engine is not None:
            return

        kwargs = {"echo": self.echo, "pool_pre_ping": True}
        if self.is_sqlite:
            # SQLite requires check_same_thread=False for FastAPI (multi-threaded)
            kwargs["connect_args"] = {"check_same_thread": False}
            if _is_memory_sqlite(self.url):
                # An in-memory database lives as long as its single connection
                kwargs["poolclass"] = StaticPool

        self.engine = create_engine(self.url, **kwargs)

        if self.is_sqlite:
            @event.listens_for(self.engine, "connect")
            def _set_sqlite_pragma(dbapi_connection, connection_record):
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

        self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

        if create_tables:
            # Import models so they are registered on Base.metadata
            import app.models  # noqa: F401
            Base.metadata.create_all(bind=self.engine)
            logger.info("Database tables created")

    def shutdown(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
            logger.info("Database connections closed")
        self.engine = None
        self._session_factory = None

    def session(self) -> Session:
        if self._session_factory is None:
            raise RuntimeError("Database.init() must be called before opening sessions")
        return self._session_factory()

    def reset(self) -> None:
        """Drop and recreate every table."""
        import app.models  # noqa: F401
        self.init(create_tables=False)
        Base.metadata.drop_all(bind=self.engine)
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables dropped and recreated")


def commit_or_raise(db: Session, error: Exception) -> None:
    """
    Commit, turning a constraint violation into ``error``.
    Covers writes that raced past an existence check.
    """
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning(f"Constraint violation on commit: {exc.orig}")
        raise error from exc


# Dependency to get DB session
def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()
