"""Container fixtures for Hoots client tests.

Tests run against the in-memory Hoots backend and an in-memory session
unless they unmock a component; unmocking "api" needs a running backend
configured through API__HOST / API__PORT.
"""

import pytest_asyncio

from hoot.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Make a fixture yielding a request-scoped client container.

    Each test gets its own APP scope, so the stores, the identity and the
    in-memory backend start empty every time.

    Args:
        unmock: Components to resolve with their production providers

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_post_hoot(unit_env):
            identity = await unit_env.get(IdentityContext)
            identity.sign_in(make_token("u1"))
            use_case = await unit_env.get(CreateHootUseCase)
            ...
    """

    @pytest_asyncio.fixture
    async def _client_env():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _client_env
