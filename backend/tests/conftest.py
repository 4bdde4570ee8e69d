"""Integration/E2E test fixtures.

This conftest loads the full app and is used for integration/e2e tests.
Unit tests in tests/unit/ build their own objects and do not need the app.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, AsyncIterator, Generator, cast

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

# Load .env.test first (test overrides of the default environment)
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)

from infrastructure.health_metrics.engine_factory import reset_health_engine  # noqa: E402

# Check if running unit tests only (env var set by the test runner)
UNIT_TESTS_ONLY = os.getenv("PYTEST_UNIT_ONLY", "0") == "1"


@pytest.fixture(autouse=True)
def _reset_engine() -> Generator[None, None, None]:
    """Reset health engine singletons before and after each test.

    Tests that change ADVISORY_DEDUPLICATE get a freshly wired orchestrator.
    """
    reset_health_engine()
    yield
    reset_health_engine()


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client for GraphQL/REST tests.

    Uses httpx.AsyncClient with an explicit ASGITransport and a fake
    base_url for relative requests.
    """
    if UNIT_TESTS_ONLY:
        pytest.skip("Integration tests disabled (PYTEST_UNIT_ONLY=1)")

    from app import app

    transport = ASGITransport(app=cast(Any, app))
    async with AsyncClient(
        transport=transport,
        base_url="http://testserver",
    ) as ac:
        yield ac
