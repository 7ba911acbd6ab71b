"""Domain services."""

from .base import Service
from .identity import IdentityContext

__all__ = [
    "IdentityContext",
    "Service",
]
