"""Shared pytest fixtures: Flask app + test client."""

import sys
from pathlib import Path

import pytest

# backend/ modules import each other as top-level modules
BACKEND_DIR = Path(__file__).resolve().parent.parent / "backend"
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from app import create_app  # noqa: E402


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "DEFAULT_LOCALE": "ar",
        "LOCALE_COOKIE": "lang",
    })
    return app


@pytest.fixture
def client(app):
    return app.test_client()
