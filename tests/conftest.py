"""Pytest fixtures for testing"""

import os

# Settings are read at import time; point them at SQLite before the app loads
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

import pytest
from datetime import date
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker, Session
from finance_gateway.api.main import create_app
from finance_gateway.infrastructure.database.models import Base, User
from finance_gateway.infrastructure.database.session import build_engine, get_db
from finance_gateway.infrastructure.database.repositories import UserRepository
from finance_gateway.infrastructure.security import create_access_token, hash_password
from finance_gateway.domain.models import LedgerEntry


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = build_engine(TEST_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def user(db: Session) -> User:
    """Registered user with password 'correct-horse'"""
    db_user = UserRepository(db).create_user(
        email="amara@example.com",
        name="Amara",
        password_hash=hash_password("correct-horse"),
    )
    db.commit()
    return db_user


@pytest.fixture
def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token(str(user.id))}"}


@pytest.fixture
def other_auth_headers(db: Session) -> dict:
    """Bearer headers for a second, unrelated user"""
    other = UserRepository(db).create_user(
        email="nimal@example.com",
        name="Nimal",
        password_hash=hash_password("another-secret"),
    )
    db.commit()
    return {"Authorization": f"Bearer {create_access_token(str(other.id))}"}


@pytest.fixture
def sample_entries() -> list[LedgerEntry]:
    """A month of expenses across three categories"""
    return [
        LedgerEntry(title="Rent", amount=1200.0, category="housing", entry_date=date(2024, 5, 1)),
        LedgerEntry(title="Groceries", amount=250.0, category="food", entry_date=date(2024, 5, 3)),
        LedgerEntry(title="Takeaway", amount=40.5, category="food", entry_date=date(2024, 5, 9)),
        LedgerEntry(title="Bus pass", amount=60.0, category="transport", entry_date=date(2024, 5, 2)),
    ]
