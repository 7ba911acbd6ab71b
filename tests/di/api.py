"""Mock Hoots backend providers for testing."""

from dishka import Scope, provide

from hoot.domain.repository import HootRepository
from hoot.domain.service import IdentityContext
from hoot.persistence.repository.inmemory import InMemoryHootRepository
from hoot.util.di.infrastructure.api import ApiProvider


class MockApiProvider(ApiProvider):
    """Mock backend provider using the in-memory repository.

    APP scope is per container, and every test builds its own container,
    so each test starts from an empty backend.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_hoot_repository(self, identity: IdentityContext) -> HootRepository:
        """Provide in-memory hoot repository."""
        return InMemoryHootRepository(identity=identity)
