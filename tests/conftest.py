"""Pytest fixtures for testing."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from envelope_api.api.main import app


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client for testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def circular_payload() -> dict:
    """A payload that refers to itself and cannot be rendered as JSON."""
    payload: dict = {"name": "loop"}
    payload["self"] = payload
    return payload
