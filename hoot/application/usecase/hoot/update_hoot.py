"""Update hoot use case."""

import logfire
from pydantic import BaseModel

from hoot.application.routes import Route
from hoot.application.store import HootCollectionStore, HootDetailStore
from hoot.application.usecase.base import BaseUseCase, build_fields
from hoot.domain.model import Hoot
from hoot.domain.repository import HootRepository
from hoot.domain.value import HootFields, HootId


class UpdateHootRequest(BaseModel):
    """Update hoot request."""

    hoot_id: str
    title: str
    text: str
    category: str


class UpdateHootResponse(BaseModel):
    """Update hoot response."""

    hoot: Hoot
    navigate_to: str


class UpdateHootUseCase(BaseUseCase):
    """Use case for editing one's own hoot."""

    def __init__(
        self,
        hoot_repository: HootRepository,
        hoot_collection: HootCollectionStore,
        hoot_detail: HootDetailStore,
    ) -> None:
        """Initialize update hoot use case.

        Args:
            hoot_repository: Remote resource client
            hoot_collection: Hoot list store
            hoot_detail: Hoot detail store
        """
        self.hoot_repository = hoot_repository
        self.hoot_collection = hoot_collection
        self.hoot_detail = hoot_detail

    async def execute(self, request: UpdateHootRequest) -> UpdateHootResponse:
        """Execute update hoot flow.

        The list entry is replaced only if the list holds it; an edit of a
        hoot the list never loaded waits for the next list load.

        Raises:
            ValidationError: If a field is blank or the category unknown
            ForbiddenError: If the user is not the author
            NotFoundError: If the hoot no longer exists
        """
        hoot_id = HootId(request.hoot_id)
        fields = build_fields(
            HootFields,
            title=request.title,
            text=request.text,
            category=request.category,
        )
        hoot = await self.hoot_repository.update_hoot(hoot_id, fields)

        self.hoot_collection.apply_update(hoot_id, hoot)
        self.hoot_detail.apply_update(hoot)
        logfire.info("Hoot edited", hoot_id=hoot_id)

        return UpdateHootResponse(
            hoot=hoot, navigate_to=Route.HOOT_DETAIL.build(hootId=hoot_id)
        )
