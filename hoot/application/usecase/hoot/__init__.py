"""Hoot use cases."""

from .create_hoot import CreateHootRequest, CreateHootResponse, CreateHootUseCase
from .delete_hoot import DeleteHootRequest, DeleteHootResponse, DeleteHootUseCase
from .update_hoot import UpdateHootRequest, UpdateHootResponse, UpdateHootUseCase

__all__ = [
    "CreateHootRequest",
    "CreateHootResponse",
    "CreateHootUseCase",
    "DeleteHootRequest",
    "DeleteHootResponse",
    "DeleteHootUseCase",
    "UpdateHootRequest",
    "UpdateHootResponse",
    "UpdateHootUseCase",
]
