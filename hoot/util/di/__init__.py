"""Dependency injection module."""

from typing import Type

from hoot.util.di.application import ProdApplicationProvider
from hoot.util.di.base import Component, ProviderBase
from hoot.util.di.core import ProdConfigProvider
from hoot.util.di.infrastructure import (
    ApiProvider,
    IdentityProvider,
    ProdApiProvider,
    ProdIdentityProvider,
)

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    IdentityProvider,
    ApiProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    Automatically determines if provider is mockable by checking for subclasses.

    - No subclasses: Concrete provider, use directly
    - Has subclasses: Mockable component, select by __is_mock__ flag

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        # Concrete provider - no implementations, use as-is
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "ApiProvider",
    "IdentityProvider",
    # Infrastructure implementations
    "ProdApiProvider",
    "ProdIdentityProvider",
]
