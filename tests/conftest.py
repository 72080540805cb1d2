"""
Shared test fixtures and configuration for jsonserver tests.
"""
import json
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from jsonserver import create_app
from jsonserver.config import TestConfig
from jsonserver.services.crud import CrudEngine
from jsonserver.storage.json_store import DocumentStore


class FakeClock:
    """Deterministic timestamps: each call returns the next second."""

    def __init__(self):
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return f"2024-01-01T00:00:{self.calls:02d}.000Z"


@pytest.fixture
def db_file(tmp_path: Path) -> Path:
    """Path of a database file that does not exist yet."""
    return tmp_path / "data" / "db.json"


@pytest.fixture
def docs_file(tmp_path: Path) -> Path:
    path = tmp_path / "API_DOCUMENTATION.md"
    path.write_text("# Test Docs\n\n- `GET /collections`\n", encoding="utf-8")
    return path


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    path = tmp_path / "public"
    path.mkdir()
    return path


@pytest.fixture
def app(db_file: Path, docs_file: Path, public_dir: Path) -> Flask:
    """Create a Flask app backed by a temporary database file."""
    config = type("IsolatedTestConfig", (TestConfig,), {
        "DB_FILE": db_file,
        "DOCS_FILE": docs_file,
        "PUBLIC_DIR": public_dir,
    })
    app = create_app(config)
    yield app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def document_store(db_file: Path) -> DocumentStore:
    return DocumentStore(db_file)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def engine(document_store: DocumentStore, clock: FakeClock) -> CrudEngine:
    return CrudEngine(document_store, clock=clock)


@pytest.fixture
def seed_db(db_file: Path):
    """Write a document to the database file before the test touches it."""
    def _seed(doc: dict) -> Path:
        db_file.parent.mkdir(parents=True, exist_ok=True)
        db_file.write_text(json.dumps(doc, indent=2), encoding="utf-8")
        return db_file
    return _seed


@pytest.fixture
def read_db(db_file: Path):
    """Read the database file back from disk."""
    def _read() -> dict:
        with open(db_file, encoding="utf-8") as f:
            return json.load(f)
    return _read
