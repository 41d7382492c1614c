"""
Pytest configuration for the CI/CD demo API tests.

Puts the project root on ``sys.path`` so tests can import ``api`` without an
install, and provides an app factory that never reads the developer's ``.env``.
"""
import os
import sys

import pytest
from fastapi.testclient import TestClient

current_dir = os.path.dirname(__file__)
project_root = os.path.abspath(os.path.join(current_dir, ".."))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from api.config import Settings  # noqa: E402
from api.counters import RequestCounterStore  # noqa: E402
from api.main import create_app  # noqa: E402


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


@pytest.fixture
def counters():
    return RequestCounterStore()


@pytest.fixture
def app(counters):
    return create_app(make_settings(NODE_ENV="test", PORT=3000, PERFORMANCE_DELAY_MS=100), counters)


@pytest.fixture
def client(app):
    return TestClient(app)
