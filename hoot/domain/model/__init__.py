"""Domain model entities for Hoots."""

from hoot.domain.model.comment import Comment
from hoot.domain.model.hoot import Hoot
from hoot.domain.model.user import User

__all__ = [
    "User",
    "Hoot",
    "Comment",
]
