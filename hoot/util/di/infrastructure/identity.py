"""Identity infrastructure providers."""

from dishka import Scope, provide

from hoot.config import Settings
from hoot.domain.service import IdentityContext
from hoot.util.di.base import ProviderBase


class IdentityProvider(ProviderBase):
    """Identity component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Production identity provider, backed by the persisted token file."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_context(self, settings: Settings) -> IdentityContext:
        """Provide the process-wide identity context.

        The persisted session is not read here; the context restores it on
        first access.
        """
        return IdentityContext(token_path=settings.session.token_path)
