from contextlib import contextmanager

from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel, create_engine

from .config import DATABASE_URL

# Registers the users/tasks tables on SQLModel.metadata
from .models import Task, User  # noqa: F401


def _create_engine(url: str = DATABASE_URL):
    if url.startswith("sqlite"):
        # Request handlers run in the threadpool, off the creating thread
        return create_engine(url, echo=False, connect_args={"check_same_thread": False})

    return create_engine(url, echo=False, pool_pre_ping=True, poolclass=NullPool)


engine = _create_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """One session per request; closed once the response is sent."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_session():
    """Session for manage_users.py and other code outside a request."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def create_tables(bind=None):
    """Create the users and tasks tables on ``bind`` (the app engine by default)."""
    SQLModel.metadata.create_all(bind=bind or engine)
