"""Delete comment use case."""

import logfire
from pydantic import BaseModel

from hoot.application.routes import Route
from hoot.application.store import HootDetailStore
from hoot.application.usecase.base import BaseUseCase
from hoot.domain.model import Comment
from hoot.domain.repository import HootRepository
from hoot.domain.value import CommentId, HootId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    hoot_id: str
    comment_id: str


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment: Comment
    navigate_to: str


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting one's own comment."""

    def __init__(
        self, hoot_repository: HootRepository, hoot_detail: HootDetailStore
    ) -> None:
        self.hoot_repository = hoot_repository
        self.hoot_detail = hoot_detail

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        hoot_id = HootId(request.hoot_id)
        comment_id = CommentId(request.comment_id)
        deleted = await self.hoot_repository.delete_comment(hoot_id, comment_id)

        if self.hoot_detail.holds(hoot_id):
            self.hoot_detail.apply_comment_delete(comment_id)
        logfire.info("Comment deleted", hoot_id=hoot_id, comment_id=comment_id)

        return DeleteCommentResponse(
            comment=deleted, navigate_to=Route.HOOT_DETAIL.build(hootId=hoot_id)
        )
