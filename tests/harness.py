"""Test harness for unit and integration tests.

Integration tests assume postgres is running and migrated.
Settings are loaded from environment variables (configure via .env or export).
"""

import pytest_asyncio

from diu.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - in-memory persistence
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_create_post(unit_env):
            service = await unit_env.get(PostService)
            post = await service.create_post(UserId("user-1"), "hello")
            assert post.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
