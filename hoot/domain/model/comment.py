"""Comment entity.

Comments always belong to exactly one hoot and have no store entry of
their own; the hoot detail aggregate owns them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from hoot.domain.model.common import DomainModel, coerce_author
from hoot.domain.model.user import User
from hoot.domain.value import CommentId


class Comment(DomainModel):
    """Comment entity."""

    id: CommentId = Field(alias="_id")
    author: Optional[User] = None
    text: str
    created_at: datetime = Field(alias="createdAt", default_factory=datetime.now)

    @field_validator("author", mode="before")
    @classmethod
    def expand_author(cls, v: object) -> object:
        """Expand a bare author id into a partial user."""
        return coerce_author(v)
