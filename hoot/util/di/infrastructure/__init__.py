"""Infrastructure providers."""

# Import bases
from .api import ApiProvider
from .identity import IdentityProvider

# Import implementations (needed for __subclasses__())
from .api import ProdApiProvider  # noqa: F401
from .identity import ProdIdentityProvider  # noqa: F401

__all__ = [
    "ApiProvider",
    "IdentityProvider",
    "ProdApiProvider",
    "ProdIdentityProvider",
]
