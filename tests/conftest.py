import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure the project root is on sys.path for direct pytest runs
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from main import create_app
from registry import SEED_BOOKS, BookRegistry


@pytest.fixture
def registry():
    return BookRegistry(SEED_BOOKS)


@pytest.fixture
def client(registry):
    with TestClient(create_app(registry=registry)) as c:
        yield c
