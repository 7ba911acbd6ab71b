"""Test configuration and helpers."""

from datetime import datetime

import jwt

from hoot.domain.model import Comment, Hoot, User
from hoot.domain.value import CommentId, HootCategory, HootId, UserId


def make_token(user_id: str, username: str | None = None) -> str:
    """Issue a session token shaped like the backend's.

    The client never verifies signatures, so any secret will do.

    Args:
        user_id: User ID to embed
        username: Username to embed (defaults to the id)

    Returns:
        Encoded JWT
    """
    claims = {"payload": {"_id": user_id, "username": username or user_id}}
    return jwt.encode(claims, "test-secret", algorithm="HS256")


def make_hoot(
    hoot_id: str,
    author_id: str | None = "u1",
    title: str = "Test Hoot",
    comments: list[Comment] | None = None,
) -> Hoot:
    """Build a hoot record for store tests."""
    return Hoot(
        id=HootId(hoot_id),
        author=User(id=UserId(author_id), username=author_id) if author_id else None,
        category=HootCategory.NEWS,
        title=title,
        text="Hoot body",
        created_at=datetime(2024, 1, 1, 12, 0, 0),
        comments=comments or [],
    )


def make_comment(comment_id: str, author_id: str = "u1", text: str = "A comment") -> Comment:
    """Build a comment record for store tests."""
    return Comment(
        id=CommentId(comment_id),
        author=User(id=UserId(author_id), username=author_id),
        text=text,
        created_at=datetime(2024, 1, 1, 12, 30, 0),
    )
