"""Hoots REST API adapter."""

from .client import HttpHootRepository

__all__ = ["HttpHootRepository"]
