"""
Shared fixtures.

The database and upload directory point at a throwaway temp directory. The
environment has to be set before anything from satrecruit is imported,
because settings and the engine are built at import time.
"""

import os
import shutil
import tempfile
from pathlib import Path

_TMP_DIR = Path(tempfile.mkdtemp(prefix="satrecruit-tests-"))

os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'test.db'}"
os.environ["UPLOAD_DIR"] = str(_TMP_DIR / "uploads")
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "ground-station-42"
os.environ["REQUIRE_ADMIN_AUTH"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from satrecruit.core.config import get_settings
from satrecruit.db import models  # noqa: F401
from satrecruit.db.session import Base, engine
from satrecruit.main import app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "ground-station-42"

PDF_BYTES = b"%PDF-1.4\n1 0 obj << /Type /Catalog >> endobj\ntrailer << >>\n%%EOF\n"


@pytest.fixture(autouse=True)
def reset_state():
    """Fresh schema and empty upload directory for every test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    upload_dir = get_settings().upload_path
    shutil.rmtree(upload_dir, ignore_errors=True)
    upload_dir.mkdir(parents=True, exist_ok=True)
    yield


@pytest.fixture
def client():
    """Client with startup run (tables, department seed, admin user)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(client):
    response = client.post(
        "/api/auth/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def upload_dir():
    return get_settings().upload_path


def application_form(**overrides):
    """A valid application form; keyword arguments replace fields."""
    form = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "phone": "+44 20 7946 0000",
        "departmentId": "1",
        "experience": "1-3",
        "skills": "C, Math",
        "coverLetter": "I would love to build satellites.",
    }
    form.update(overrides)
    return {k: v for k, v in form.items() if v is not None}


def pytest_sessionfinish(session, exitstatus):
    engine.dispose()
    shutil.rmtree(_TMP_DIR, ignore_errors=True)
