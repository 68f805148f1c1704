"""Database engine and sessions"""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from typing import Generator
import logging

from config import settings

logger = logging.getLogger(__name__)

# SQLite connections are shared across FastAPI worker threads
connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

engine = create_engine(settings.database_url, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db():
    """Creates all tables"""
    # Models must be imported so they register on Base.metadata
    from . import models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    logger.info(f"Database initialized (railway={settings.is_railway})")


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency yielding a session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
