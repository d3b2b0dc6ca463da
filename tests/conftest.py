import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from exam_portal.core.deps import get_db
from exam_portal.db.init_db import create_schema
from exam_portal.db.seed import seed_roster
from exam_portal.db.session import make_engine
from exam_portal.main import app
from exam_portal.services.evaluation_store import EvaluationStore


@pytest.fixture()
def session_factory():
    """A private in-memory database per test, seeded with the demo roster."""
    engine = make_engine()
    create_schema(engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    db = TestingSessionLocal()
    try:
        seed_roster(db)
    finally:
        db.close()

    yield TestingSessionLocal
    engine.dispose()


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def store(db):
    return EvaluationStore(db)


@pytest.fixture()
def client(session_factory):
    """Test client that uses the test DB session via dependency override."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
