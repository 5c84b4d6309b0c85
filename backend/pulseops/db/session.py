from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from pulseops.core.config import settings


def create_db_engine(url: str, **kwargs) -> Engine:
    """Create an engine for ``url``.

    SQLite connections get foreign key enforcement switched on so that
    panels can never point at a missing dashboard.
    """
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)

    db_engine = create_engine(url, echo=settings.SQL_ECHO, **kwargs)

    if db_engine.dialect.name == "sqlite":
        event.listen(db_engine, "connect", _enable_sqlite_foreign_keys)

    return db_engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = create_db_engine(settings.SQLALCHEMY_DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def get_db_session():
    """
    Session context manager for code outside FastAPI dependency injection
    (startup seeding, scripts).

    Usage:
        with get_db_session() as db:
            crud.dashboard.list(db)
    """
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
