from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from .config import Settings

Base = declarative_base()


def build_session_factory(settings: Settings) -> sessionmaker | None:
    """
    Build the process-wide session factory, or None when DATABASE_URL is unset.

    The factory is created once by the app factory and shared by requests;
    a missing URL is reported by /health-env and raised on first store use.
    """
    if not settings.DATABASE_URL:
        return None
    engine = create_engine(str(settings.DATABASE_URL), pool_pre_ping=True)
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)
