"""Service test fixtures: fake text generator + FastAPI test client.

Invariants:
    - No test reaches the real Gemini API: get_text_generator is overridden
    - Each test gets a fresh FakeGenerator
"""

import pytest
from httpx import ASGITransport, AsyncClient

from bfhl.api.dependencies import get_text_generator
from bfhl.main import app
from tests.services.fake_generator import FakeGenerator


@pytest.fixture
def fake_generator():
    return FakeGenerator()


@pytest.fixture
async def client(fake_generator):
    """FastAPI test client with the Gemini dependency overridden."""
    app.dependency_overrides[get_text_generator] = lambda: fake_generator

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
