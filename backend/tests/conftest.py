"""Pytest configuration and fixtures for tests."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.repositories import InMemoryListingRepository, SqlListingRepository


@pytest.fixture(scope="session")
def engine():
    """Create an in-memory SQLite database shared across threads."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    # Import all models so they're registered
    import app.models  # noqa: F401

    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def db(engine) -> Session:
    """Provide a fresh database session for each test, with empty tables."""
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        for table in reversed(Base.metadata.sorted_tables):
            session.execute(table.delete())
        session.commit()
        session.close()


@pytest.fixture
def sql_repo(db: Session) -> SqlListingRepository:
    return SqlListingRepository(db)


@pytest.fixture
def memory_repo() -> InMemoryListingRepository:
    return InMemoryListingRepository()


@pytest.fixture
def client(db: Session):
    """TestClient wired to the test database."""
    from app.main import app

    app.dependency_overrides[get_db] = lambda: db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
