"""In-memory repository implementations for testing."""

from .hoot import InMemoryHootRepository

__all__ = ["InMemoryHootRepository"]
