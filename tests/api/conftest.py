"""API test fixtures - app built from explicit Settings with a fake backend.

Invariants:
    - Every test gets a fresh app and a fresh FakeRelayBackend
    - No lifespan run: logging setup stays out of test output
"""

import pytest
from httpx import ASGITransport, AsyncClient

from rosati_render.config import Settings
from rosati_render.main import create_app
from tests.api.http_helpers import JPEG_BYTES, TEST_TOKEN
from tests.fake_backend import FakeRelayBackend


@pytest.fixture
def settings():
    return Settings(_env_file=None, bearer_token=TEST_TOKEN)


@pytest.fixture
def backend():
    return FakeRelayBackend()


@pytest.fixture
def app(settings, backend):
    return create_app(settings, backend=backend)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def jpeg_file():
    return {"image": ("house.jpg", JPEG_BYTES, "image/jpeg")}
