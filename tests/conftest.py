import os

# Antes de importar o app: sem bootstrap do banco real, logs legíveis
os.environ["INIT_DB_ON_STARTUP"] = "false"
os.environ["LOG_JSON"] = "false"

from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from student_management.core.security import Principal, create_access_token
from student_management.db.base import Base
from student_management.models.user import User

STUDENT_PAYLOAD = {
    "nome": "Alice",
    "idade": 10,
    "serie": 5,
    "notaMedia": 8.5,
    "endereco": "123 Main St",
    "nomePai": "John Doe",
    "nomeMae": "Jane Doe",
    "dataNascimento": "2013-05-15",
}


# Create an in-memory SQLite database for testing
@pytest.fixture(scope="session")
def engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture(autouse=True)
def _reset_tables(engine):
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="session")
def TestingSessionLocal(engine):
    """Create a session factory for the test database."""
    # mesmas opções do SessionLocal de produção
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


# Override the database dependency to use our test database
@pytest.fixture
def override_get_db(TestingSessionLocal):
    def _override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()
    return _override_get_db


@pytest.fixture
def db_session(TestingSessionLocal):
    """Create a database session for each test."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(override_get_db):
    """Create a test client for API tests."""
    from fastapi.testclient import TestClient
    from student_management.main import app
    from student_management.db import get_db

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def test_users(db_session):
    """Same credentials the seed loads."""
    users = [
        User(id=1, username="admin", password="admin123"),
        User(id=2, username="user", password="user123"),
    ]
    db_session.add_all(users)
    db_session.commit()
    return users


@pytest.fixture
def auth_headers():
    issued = create_access_token("admin")
    return {"Authorization": f"Bearer {issued.token}"}


@pytest.fixture
def actor():
    return Principal(username="admin", expires_at=datetime.now(UTC) + timedelta(hours=1))


@pytest.fixture
def student_payload():
    return dict(STUDENT_PAYLOAD)
