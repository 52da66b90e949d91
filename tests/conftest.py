"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and points
the application at an in-memory SQLite database before anything imports it.
"""

import os
import sys
import tempfile
from pathlib import Path

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="mealbox-uploads-"))
os.environ.setdefault("KLARNA_API_URL", "https://klarna.test")

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest

from domain.models import Base, engine, SessionLocal


@pytest.fixture
def db_session():
    """Fresh schema per test on the shared in-memory database."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def _clear_dependency_overrides():
    yield
    from main import app

    app.dependency_overrides.clear()
