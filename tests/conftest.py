"""
Pytest fixtures for Bookmore tests.

Each test gets a fresh in-memory SQLite database; the API client uses it
through a get_db override.
"""
import os
from collections.abc import Callable, Iterator

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from bookmore.core.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from bookmore.core.security import get_password_hasher, get_token_provider  # noqa: E402
from bookmore.main import create_app  # noqa: E402
from bookmore.models import Challenge, Review, User  # noqa: E402


@pytest.fixture
def test_db() -> Iterator[sessionmaker]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    yield TestingSessionLocal

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(test_db) -> Iterator[Session]:
    session = test_db()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(test_db) -> Iterator[TestClient]:
    app = create_app()

    def override_get_db() -> Iterator[Session]:
        db = test_db()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def make_user(test_db) -> Callable[..., User]:
    """Insert an account directly, bypassing the join endpoint"""

    def _make_user(email: str, nickname: str, password: str = "password") -> User:
        session = test_db()
        try:
            user = User(
                email=email,
                nickname=nickname,
                password=get_password_hasher().hash(password),
            )
            session.add(user)
            session.commit()
            session.refresh(user)
            session.expunge(user)
            return user
        finally:
            session.close()

    return _make_user


@pytest.fixture
def make_review(test_db) -> Callable[..., Review]:
    def _make_review(user: User, isbn: str = "9788936434120", content: str = "Loved it") -> Review:
        session = test_db()
        try:
            review = Review(user_id=user.id, isbn=isbn, content=content, spoiler=False, likes_count=0)
            session.add(review)
            session.commit()
            session.refresh(review)
            session.expunge(review)
            return review
        finally:
            session.close()

    return _make_review


@pytest.fixture
def make_challenge(test_db) -> Callable[..., Challenge]:
    def _make_challenge(user: User, title: str = "Read 10 books", progress: int = 0) -> Challenge:
        session = test_db()
        try:
            challenge = Challenge(user_id=user.id, title=title, description="this year")
            challenge.update_progress(progress)
            session.add(challenge)
            session.commit()
            session.refresh(challenge)
            session.expunge(challenge)
            return challenge
        finally:
            session.close()

    return _make_challenge


@pytest.fixture
def auth_headers() -> Callable[[str], dict]:
    def _auth_headers(email: str) -> dict:
        return {"Authorization": f"Bearer {get_token_provider().create_token(email)}"}

    return _auth_headers
