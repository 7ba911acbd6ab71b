"""Domain value objects for Hoots."""

from hoot.domain.value.identifiers import CommentId, HootId, UserId
from hoot.domain.value.types import CommentFields, HootCategory, HootFields

__all__ = [
    # Identifiers
    "UserId",
    "HootId",
    "CommentId",
    # Types
    "HootCategory",
    "HootFields",
    "CommentFields",
]
