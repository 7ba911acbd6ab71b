"""Repository implementations."""

from hoot.adapter.api import HttpHootRepository
from hoot.domain.repository import HootRepository

from .inmemory import InMemoryHootRepository

__all__ = [
    "HootRepository",
    "HttpHootRepository",
    "InMemoryHootRepository",
]
