"""Create comment use case."""

import logfire
from pydantic import BaseModel

from hoot.application.routes import Route
from hoot.application.store import HootDetailStore
from hoot.application.usecase.base import BaseUseCase, build_fields
from hoot.domain.model import Comment
from hoot.domain.repository import HootRepository
from hoot.domain.value import CommentFields, HootId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    hoot_id: str
    text: str


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: Comment
    navigate_to: str


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a hoot from its detail page."""

    def __init__(
        self, hoot_repository: HootRepository, hoot_detail: HootDetailStore
    ) -> None:
        """Initialize create comment use case.

        Args:
            hoot_repository: Remote resource client
            hoot_detail: Hoot detail store
        """
        self.hoot_repository = hoot_repository
        self.hoot_detail = hoot_detail

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        The new comment is appended to the detail store when it holds the
        commented hoot; the collection store keeps no comments.

        Raises:
            ValidationError: If the text is blank
            NotFoundError: If the hoot no longer exists
        """
        hoot_id = HootId(request.hoot_id)
        fields = build_fields(CommentFields, text=request.text)
        comment = await self.hoot_repository.create_comment(hoot_id, fields)

        if self.hoot_detail.holds(hoot_id):
            self.hoot_detail.apply_comment_create(comment)
        logfire.info("Comment posted", hoot_id=hoot_id, comment_id=comment.id)

        return CreateCommentResponse(
            comment=comment, navigate_to=Route.HOOT_DETAIL.build(hootId=hoot_id)
        )
