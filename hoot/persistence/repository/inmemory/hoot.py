"""In-memory Hoots backend for testing and offline use."""

from datetime import datetime
from uuid import uuid4

from hoot.domain.error import AuthError, ForbiddenError, NotFoundError
from hoot.domain.model import Comment, Hoot, User
from hoot.domain.repository import HootRepository
from hoot.domain.service import IdentityContext
from hoot.domain.value import CommentFields, CommentId, HootFields, HootId


class InMemoryHootRepository(HootRepository):
    """In-memory implementation of HootRepository.

    Behaves like the backend: it assigns ids and timestamps, enforces
    authorship on edits and deletes, and keeps the authoritative comment
    list of every hoot. Records are returned as copies, so nothing a
    caller holds is ever changed behind its back.
    """

    def __init__(self, identity: IdentityContext) -> None:
        self.identity = identity
        self._hoots: dict[HootId, Hoot] = {}

    async def list_hoots(self) -> list[Hoot]:
        """List hoots, newest first."""
        self._require_user()
        return list(reversed(self._hoots.values()))

    async def get_hoot(self, hoot_id: HootId) -> Hoot:
        """Get a hoot with its comments."""
        self._require_user()
        return self._find(hoot_id)

    async def create_hoot(self, fields: HootFields) -> Hoot:
        """Create a hoot authored by the signed-in user."""
        user = self._require_user()
        hoot = Hoot(
            id=HootId(uuid4().hex),
            author=user,
            category=fields.category,
            title=fields.title,
            text=fields.text,
            created_at=datetime.now(),
            comments=[],
        )
        self._hoots[hoot.id] = hoot
        return hoot

    async def update_hoot(self, hoot_id: HootId, fields: HootFields) -> Hoot:
        """Update a hoot owned by the signed-in user."""
        user = self._require_user()
        hoot = self._find(hoot_id)
        self._check_author(hoot.author, user, "hoot", hoot_id)

        updated = hoot.model_copy(
            update={
                "title": fields.title,
                "text": fields.text,
                "category": fields.category,
            }
        )
        self._hoots[hoot_id] = updated
        return updated

    async def delete_hoot(self, hoot_id: HootId) -> Hoot:
        """Delete a hoot owned by the signed-in user."""
        user = self._require_user()
        hoot = self._find(hoot_id)
        self._check_author(hoot.author, user, "hoot", hoot_id)
        return self._hoots.pop(hoot_id)

    async def create_comment(self, hoot_id: HootId, fields: CommentFields) -> Comment:
        """Append a comment to a hoot."""
        user = self._require_user()
        hoot = self._find(hoot_id)
        comment = Comment(
            id=CommentId(uuid4().hex),
            author=user,
            text=fields.text,
            created_at=datetime.now(),
        )
        self._hoots[hoot_id] = hoot.model_copy(
            update={"comments": [*hoot.comments, comment]}
        )
        return comment

    async def update_comment(
        self, hoot_id: HootId, comment_id: CommentId, fields: CommentFields
    ) -> Comment:
        """Update a comment owned by the signed-in user."""
        user = self._require_user()
        hoot = self._find(hoot_id)
        comment = self._find_comment(hoot, comment_id)
        self._check_author(comment.author, user, "comment", comment_id)

        updated = comment.model_copy(update={"text": fields.text})
        self._hoots[hoot_id] = hoot.model_copy(
            update={
                "comments": [
                    updated if c.id == comment_id else c for c in hoot.comments
                ]
            }
        )
        return updated

    async def delete_comment(self, hoot_id: HootId, comment_id: CommentId) -> Comment:
        """Delete a comment owned by the signed-in user."""
        user = self._require_user()
        hoot = self._find(hoot_id)
        comment = self._find_comment(hoot, comment_id)
        self._check_author(comment.author, user, "comment", comment_id)

        self._hoots[hoot_id] = hoot.model_copy(
            update={"comments": [c for c in hoot.comments if c.id != comment_id]}
        )
        return comment

    def _require_user(self) -> User:
        user = self.identity.current_user
        if user is None:
            raise AuthError("No session established", status_code=401)
        return user

    def _find(self, hoot_id: HootId) -> Hoot:
        hoot = self._hoots.get(hoot_id)
        if hoot is None:
            raise NotFoundError("hoot", hoot_id)
        return hoot

    @staticmethod
    def _find_comment(hoot: Hoot, comment_id: CommentId) -> Comment:
        comment = hoot.find_comment(comment_id)
        if comment is None:
            raise NotFoundError("comment", comment_id)
        return comment

    @staticmethod
    def _check_author(
        author: User | None, user: User, resource: str, resource_id: str
    ) -> None:
        if author is None or author.id != user.id:
            raise ForbiddenError(resource, resource_id, user.id)
