"""Hoots backend infrastructure providers."""

from dishka import Scope, provide

from hoot.adapter.api import HttpHootRepository
from hoot.config import ApiSettings
from hoot.domain.repository import HootRepository
from hoot.domain.service import IdentityContext
from hoot.util.di.base import ProviderBase
from hoot.util.error import ConfigurationError


class ApiProvider(ProviderBase):
    """Hoots backend component base."""

    __mock_component__ = "api"


class ProdApiProvider(ApiProvider):
    """Production backend provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_hoot_repository(
        self, api_settings: ApiSettings, identity: IdentityContext
    ) -> HootRepository:
        """Provide the REST hoot repository.

        Raises:
            ConfigurationError: If the backend host is not configured
        """
        if not api_settings.host:
            raise ConfigurationError("Hoots backend host must be configured")

        return HttpHootRepository(
            base_url=api_settings.base_url,
            identity=identity,
            timeout=api_settings.timeout,
        )
