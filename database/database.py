import contextlib
import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from core.config_loader import load_config
from database.models import Base

logger = logging.getLogger(__name__)


def build_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True, pool_size=5, max_overflow=10)


class DatabaseManager:
    """Owns the engine and session factory for one database URL."""

    def __init__(self, url: str):
        self.url = url
        self.engine = build_engine(url)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def get_session(self) -> Session:
        return self.SessionLocal()

    @contextlib.contextmanager
    def session_scope(self):
        """Provide a transactional scope around a series of operations."""
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_all(self) -> None:
        Base.metadata.create_all(bind=self.engine)


_db_manager: Optional[DatabaseManager] = None


def get_db_manager() -> DatabaseManager:
    global _db_manager
    if _db_manager is None:
        url = load_config().database.url
        _db_manager = DatabaseManager(url)
        logger.info(f"Database engine created for {_db_manager.engine.url.render_as_string(hide_password=True)}")
    return _db_manager


@contextlib.contextmanager
def db_session_scope():
    """Provide a transactional scope around a series of operations."""
    with get_db_manager().session_scope() as session:
        yield session
