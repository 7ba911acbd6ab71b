"""Hoot aggregate root.

A hoot is a user-authored post with a category, title and body text, and
the ordered comments made on it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from hoot.domain.model.comment import Comment
from hoot.domain.model.common import DomainModel, coerce_author
from hoot.domain.model.user import User
from hoot.domain.value import HootCategory, HootId


class Hoot(DomainModel):
    """Hoot aggregate root.

    List payloads usually carry no comments; detail payloads embed the
    full comment sequence in server order.
    """

    id: HootId = Field(alias="_id")
    author: Optional[User] = None
    category: HootCategory
    title: str
    text: str
    created_at: datetime = Field(alias="createdAt", default_factory=datetime.now)
    comments: list[Comment] = Field(default_factory=list)

    @field_validator("author", mode="before")
    @classmethod
    def expand_author(cls, v: object) -> object:
        """Expand a bare author id into a partial user."""
        return coerce_author(v)

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, v: object) -> object:
        """Accept category names in any case."""
        if isinstance(v, str):
            return HootCategory(v)
        return v

    def find_comment(self, comment_id: str) -> Optional[Comment]:
        """Find one of this hoot's comments by id.

        Args:
            comment_id: Comment ID

        Returns:
            The comment if present, None otherwise
        """
        return next((c for c in self.comments if c.id == comment_id), None)
