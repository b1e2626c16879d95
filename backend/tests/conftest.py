import os, sys
import tempfile
import pytest
from fastapi.testclient import TestClient

# Isolated SQLite file for the whole run; must be set before focusflow is imported
_tmpdir = tempfile.mkdtemp(prefix="focusflow-tests-")
os.environ["DATABASE_URL"] = f"sqlite+pysqlite:///{os.path.join(_tmpdir, 'test.db')}"

# Put backend/ first on sys.path so the local focusflow package wins
backend_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if backend_root not in sys.path:
    sys.path.insert(0, backend_root)

from focusflow.main import app  # noqa: E402
from focusflow.db.session import engine, Base, SessionLocal  # noqa: E402
from focusflow.db import models  # noqa: E402,F401


def _reset_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture(scope="function")  # fresh DB per test
def client():
    _reset_schema()
    return TestClient(app)


@pytest.fixture(scope="function")
def db():
    _reset_schema()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()