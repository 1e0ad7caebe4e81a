# eshop/data/database.py
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from eshop.domain.errors import StoreError
from eshop.utils.logging import get_logger
from eshop.utils.retry import db_connect_retry
from eshop.utils.settings import Settings

logger = get_logger(__name__)

Base = declarative_base()

# bind ustawiany w init_engine, jedna sesja na request
SessionLocal = sessionmaker(autocommit=False, autoflush=False)

engine: Engine | None = None


def _is_memory_sqlite(url) -> bool:
    rendered = str(url)
    return rendered in ("sqlite://", "sqlite:///:memory:") or ":memory:" in rendered


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # sqlite domyslnie ignoruje FK
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def init_engine(settings: Settings) -> Engine:
    global engine

    url = settings.sqlalchemy_url
    kwargs = {"echo": settings.db_echo, "pool_pre_ping": True}

    is_sqlite = str(url).startswith("sqlite")
    if is_sqlite:
        kwargs["connect_args"] = {"check_same_thread": False, "timeout": 15}
        if _is_memory_sqlite(url):
            # jedna wspolna baza w pamieci dla wszystkich polaczen
            kwargs["poolclass"] = StaticPool

    if engine is not None:
        engine.dispose()

    engine = create_engine(url, **kwargs)
    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    SessionLocal.configure(bind=engine)
    logger.info(f"Database engine ready ({engine.url.render_as_string(hide_password=True)})")
    return engine


def create_schema(bind: Engine, attempts: int = 1) -> None:
    # rejestracja wszystkich modeli w Base.metadata przed create_all
    from eshop.data import models  # noqa: F401

    @db_connect_retry(attempts)
    def _create():
        Base.metadata.create_all(bind=bind)

    _create()
    logger.info(f"Tables ready: {sorted(Base.metadata.tables.keys())}")


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def ping(db: Session) -> bool:
    try:
        db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database ping failed: {e}")
        return False


@contextmanager
def store_errors(db: Session, action: str) -> Iterator[None]:
    """
    Zamienia bledy SQLAlchemy na StoreError (z rollbackiem).
    Bledy domenowe przechodza bez zmian.
    """
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"Store failure while {action}")
        raise StoreError(f"Store failure while {action}") from e
