"""SQLAlchemy engine, session factory and declarative base."""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from rsvp_service.config import settings


def _connect_args(url: str) -> dict:
    if url.startswith("sqlite"):
        # Sync endpoints run in a threadpool, so connections cross threads
        return {"check_same_thread": False}
    if url.startswith("postgresql"):
        return {"options": f"-c timezone={settings.DB_TIMEZONE}"}
    return {}


engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    pool_pre_ping=True,
    connect_args=_connect_args(settings.DATABASE_URL),
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """FastAPI dependency — one session per request, always closed."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
