"""Update comment use case."""

import logfire
from pydantic import BaseModel

from hoot.application.routes import Route
from hoot.application.store import HootDetailStore
from hoot.application.usecase.base import BaseUseCase, build_fields
from hoot.domain.model import Comment
from hoot.domain.repository import HootRepository
from hoot.domain.value import CommentFields, CommentId, HootId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    hoot_id: str
    comment_id: str
    text: str  # New text content (required, cannot be blank)


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: Comment
    navigate_to: str


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing one's own comment."""

    def __init__(
        self, hoot_repository: HootRepository, hoot_detail: HootDetailStore
    ) -> None:
        self.hoot_repository = hoot_repository
        self.hoot_detail = hoot_detail

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            ValidationError: If the text is blank
            ForbiddenError: If the user is not the comment's author
        """
        hoot_id = HootId(request.hoot_id)
        comment_id = CommentId(request.comment_id)
        fields = build_fields(CommentFields, text=request.text)

        comment = await self.hoot_repository.update_comment(hoot_id, comment_id, fields)

        if self.hoot_detail.holds(hoot_id):
            self.hoot_detail.apply_comment_update(comment_id, comment)
        logfire.info("Comment edited", hoot_id=hoot_id, comment_id=comment_id)

        return UpdateCommentResponse(
            comment=comment, navigate_to=Route.HOOT_DETAIL.build(hootId=hoot_id)
        )
