"""
Pytest configuration and shared fixtures for Enum Options API tests.

Provides FastAPI test clients and sample enums used across the suite.
"""
import os
import sys
from enum import Enum, IntEnum
from typing import AsyncGenerator, Generator

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

# ── Test Configuration ───────────────────────────────────────────────
# Set test-only values before settings are loaded
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("CORS_ORIGINS", "http://localhost:3000")

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport

from main import app
from utils.enum_options import display_names


# ── Client Fixtures ──────────────────────────────────────────────────


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Async client bound to the ASGI app (no lifespan)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture(scope="function")
def test_client() -> Generator[TestClient, None, None]:
    """Synchronous FastAPI test client (runs the lifespan)."""
    with TestClient(app) as c:
        yield c


# ── Sample Enums ─────────────────────────────────────────────────────


@display_names(Red="Bright red", Blue="   ")
class Color(Enum):
    Red = "r"
    Green = "g"
    Blue = "b"
    Crimson = "r"  # alias of Red


class Priority(IntEnum):
    LOW = 1
    MEDIUM = 2
    HIGH = 3


@pytest.fixture
def color_enum():
    """Enum with a label, a whitespace-only label, an unlabelled member and an alias."""
    return Color


@pytest.fixture
def priority_enum():
    """Enum with no display names at all."""
    return Priority
