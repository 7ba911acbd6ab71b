"""Mock providers for testing."""

from .api import MockApiProvider
from .identity import MockIdentityProvider
from .container import build_test_container

__all__ = [
    "MockApiProvider",
    "MockIdentityProvider",
    "build_test_container",
]
