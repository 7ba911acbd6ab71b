"""Repository interfaces."""

from .hoot import HootRepository

__all__ = ["HootRepository"]
