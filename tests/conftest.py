# tests/conftest.py
import os
import tempfile

# Point the app at a throwaway database before it is imported
_db_dir = tempfile.mkdtemp(prefix="tinylink-tests-")
os.environ["TINYLINK_DATABASE_URL"] = "sqlite:///" + os.path.join(_db_dir, "test.db")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from tinylink.database import Base, SessionLocal, engine  # noqa: E402
from tinylink.main import app  # noqa: E402


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def other_client():
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
