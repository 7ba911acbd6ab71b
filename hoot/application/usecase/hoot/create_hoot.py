"""Create hoot use case."""

import logfire
from pydantic import BaseModel

from hoot.application.routes import Route
from hoot.application.store import HootCollectionStore
from hoot.application.usecase.base import BaseUseCase, build_fields
from hoot.domain.model import Hoot
from hoot.domain.repository import HootRepository
from hoot.domain.value import HootFields


class CreateHootRequest(BaseModel):
    """Create hoot request (raw hoot form values)."""

    title: str
    text: str
    category: str


class CreateHootResponse(BaseModel):
    """Create hoot response."""

    hoot: Hoot
    navigate_to: str


class CreateHootUseCase(BaseUseCase):
    """Use case for posting a new hoot."""

    def __init__(
        self, hoot_repository: HootRepository, hoot_collection: HootCollectionStore
    ) -> None:
        """Initialize create hoot use case.

        Args:
            hoot_repository: Remote resource client
            hoot_collection: Hoot list store
        """
        self.hoot_repository = hoot_repository
        self.hoot_collection = hoot_collection

    async def execute(self, request: CreateHootRequest) -> CreateHootResponse:
        """Execute create hoot flow.

        Steps:
        1. Validate the form fields
        2. Create the hoot on the backend
        3. Prepend it to the collection
        4. Send the user to the hoot list

        Raises:
            ValidationError: If a field is blank or the category unknown
            HootClientError: If the backend call fails (stores untouched)
        """
        fields = build_fields(
            HootFields,
            title=request.title,
            text=request.text,
            category=request.category,
        )
        hoot = await self.hoot_repository.create_hoot(fields)
        self.hoot_collection.apply_create(hoot)
        logfire.info("Hoot posted", hoot_id=hoot.id)

        return CreateHootResponse(hoot=hoot, navigate_to=Route.HOOT_LIST.value)
