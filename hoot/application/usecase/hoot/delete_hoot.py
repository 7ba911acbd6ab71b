"""Delete hoot use case."""

import logfire
from pydantic import BaseModel

from hoot.application.routes import Route
from hoot.application.store import HootCollectionStore, HootDetailStore
from hoot.application.usecase.base import BaseUseCase
from hoot.domain.model import Hoot
from hoot.domain.repository import HootRepository
from hoot.domain.value import HootId


class DeleteHootRequest(BaseModel):
    """Delete hoot request."""

    hoot_id: str


class DeleteHootResponse(BaseModel):
    """Delete hoot response."""

    hoot: Hoot
    navigate_to: str


class DeleteHootUseCase(BaseUseCase):
    """Use case for deleting one's own hoot."""

    def __init__(
        self,
        hoot_repository: HootRepository,
        hoot_collection: HootCollectionStore,
        hoot_detail: HootDetailStore,
    ) -> None:
        self.hoot_repository = hoot_repository
        self.hoot_collection = hoot_collection
        self.hoot_detail = hoot_detail

    async def execute(self, request: DeleteHootRequest) -> DeleteHootResponse:
        """Delete the hoot, drop it from both stores, go back to the list.

        Raises:
            ForbiddenError: If the user is not the author (stores untouched)
        """
        hoot_id = HootId(request.hoot_id)
        deleted = await self.hoot_repository.delete_hoot(hoot_id)

        self.hoot_collection.apply_delete(deleted.id)
        if self.hoot_detail.holds(deleted.id):
            self.hoot_detail.clear()
        logfire.info("Hoot deleted", hoot_id=deleted.id)

        return DeleteHootResponse(hoot=deleted, navigate_to=Route.HOOT_LIST.value)
