"""
Database connection and session management for the persisted key-value store
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from valencio.config import settings


def build_engine(url: str, echo: bool = False):
    """Create an engine; SQLite needs cross-thread access for the ASGI worker threads."""
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False}, echo=echo)
    return create_engine(
        url,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,  # Verify connections before using
        pool_recycle=3600,
        echo=echo,
    )


engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency for FastAPI to get database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None) -> None:
    """Create the key-value table if it does not exist yet."""
    from valencio import models  # noqa: F401  (registers tables on Base.metadata)
    Base.metadata.create_all(bind=bind or engine)
