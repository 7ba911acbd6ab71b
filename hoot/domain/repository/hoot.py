"""Hoot repository interface."""

from abc import ABC, abstractmethod
from typing import List

from hoot.domain.model import Comment, Hoot
from hoot.domain.value import CommentFields, CommentId, HootFields, HootId


class HootRepository(ABC):
    """Remote resource contract for hoots and their comments.

    Implementations talk to the Hoots backend (or stand in for it) and
    never touch local state; reconciling stores with the returned records
    is the caller's job.

    Every operation raises a ``HootClientError`` subclass on failure:
    ``AuthError`` when no valid session exists, ``NotFoundError`` for
    unknown ids, ``ForbiddenError`` when the caller is not the author,
    ``ValidationError`` for rejected payloads and ``TransportError`` for
    everything else.
    """

    @abstractmethod
    async def list_hoots(self) -> List[Hoot]:
        """List hoots visible to the current session, in server order."""
        pass

    @abstractmethod
    async def get_hoot(self, hoot_id: HootId) -> Hoot:
        """Fetch one hoot with its comments embedded.

        Args:
            hoot_id: The hoot's unique identifier

        Returns:
            The hoot
        """
        pass

    @abstractmethod
    async def create_hoot(self, fields: HootFields) -> Hoot:
        """Create a hoot authored by the current user.

        Args:
            fields: Title, text and category

        Returns:
            The created hoot, with server-assigned id and timestamp
        """
        pass

    @abstractmethod
    async def update_hoot(self, hoot_id: HootId, fields: HootFields) -> Hoot:
        """Replace a hoot's editable fields.

        Args:
            hoot_id: The hoot to update
            fields: New title, text and category

        Returns:
            The updated hoot
        """
        pass

    @abstractmethod
    async def delete_hoot(self, hoot_id: HootId) -> Hoot:
        """Delete a hoot.

        Args:
            hoot_id: The hoot to delete

        Returns:
            The deleted hoot, echoed back for local removal
        """
        pass

    @abstractmethod
    async def create_comment(self, hoot_id: HootId, fields: CommentFields) -> Comment:
        """Add a comment to a hoot.

        Args:
            hoot_id: Parent hoot
            fields: Comment text

        Returns:
            The created comment
        """
        pass

    @abstractmethod
    async def update_comment(
        self, hoot_id: HootId, comment_id: CommentId, fields: CommentFields
    ) -> Comment:
        """Replace a comment's text.

        Args:
            hoot_id: Parent hoot
            comment_id: The comment to update
            fields: New comment text

        Returns:
            The updated comment
        """
        pass

    @abstractmethod
    async def delete_comment(self, hoot_id: HootId, comment_id: CommentId) -> Comment:
        """Delete a comment.

        Args:
            hoot_id: Parent hoot
            comment_id: The comment to delete

        Returns:
            The deleted comment
        """
        pass
