"""Shared fixtures: an in-memory database and an API client bound to it."""

from datetime import datetime, timezone
from typing import Callable, Dict, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from taskboard.database import create_tables, get_db
from taskboard.main import app
from taskboard.models import Task, TaskStatus, User, UserRole
from taskboard.security import get_password_hash

from helpers import auth_headers

DEFAULT_PASSWORD = "secret1"


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def client(session_factory):
    """API client where every request gets its own session on the test engine."""

    def _get_test_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def make_user(db) -> Callable[..., User]:
    def _make_user(
        email: str,
        role: UserRole = UserRole.USER,
        password: str = DEFAULT_PASSWORD,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> User:
        user = User(
            email=email,
            hashed_password=get_password_hash(password),
            role=role,
            first_name=first_name,
            last_name=last_name,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def make_task(db) -> Callable[..., Task]:
    def _make_task(
        owner: User,
        title: str = "Write report",
        status: TaskStatus = TaskStatus.TODO,
        assignee: Optional[User] = None,
        created_at: Optional[datetime] = None,
    ) -> Task:
        task = Task(
            title=title,
            description="Quarterly numbers",
            due_date=datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc),
            status=status,
            user_id=owner.id,
            created_by_id=owner.id,
            assigned_to_id=assignee.id if assignee else None,
            created_at=created_at or datetime.now(timezone.utc),
        )
        db.add(task)
        db.commit()
        db.refresh(task)
        return task

    return _make_task


@pytest.fixture()
def admin(make_user) -> User:
    return make_user("admin@example.com", role=UserRole.ADMIN, first_name="Ada", last_name="Admin")


@pytest.fixture()
def member(make_user) -> User:
    return make_user("member@example.com", role=UserRole.USER, first_name="Max", last_name="Member")


@pytest.fixture()
def admin_headers(admin) -> Dict[str, str]:
    return auth_headers(admin)


@pytest.fixture()
def member_headers(member) -> Dict[str, str]:
    return auth_headers(member)
