"""Application layer DI providers."""

from dishka import Scope, provide

from hoot.application.store import HootCollectionStore, HootDetailStore
from hoot.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    UpdateCommentUseCase,
)
from hoot.application.usecase.hoot import (
    CreateHootUseCase,
    DeleteHootUseCase,
    UpdateHootUseCase,
)
from hoot.domain.repository import HootRepository
from hoot.domain.service import IdentityContext
from hoot.interface.navigation import NavigationController
from hoot.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application provider - concrete, no mocks needed.

    Stores and the navigation controller live as long as the client
    (APP scope); use cases are built per user interaction (REQUEST scope).
    """

    # Stores
    @provide(scope=Scope.APP)
    def get_hoot_collection_store(
        self, hoot_repository: HootRepository, identity: IdentityContext
    ) -> HootCollectionStore:
        """Provide hoot list store."""
        return HootCollectionStore(hoot_repository=hoot_repository, identity=identity)

    @provide(scope=Scope.APP)
    def get_hoot_detail_store(self, hoot_repository: HootRepository) -> HootDetailStore:
        """Provide hoot detail store."""
        return HootDetailStore(hoot_repository=hoot_repository)

    @provide(scope=Scope.APP)
    def get_navigation_controller(
        self,
        identity: IdentityContext,
        hoot_collection: HootCollectionStore,
        hoot_detail: HootDetailStore,
    ) -> NavigationController:
        """Provide navigation controller."""
        return NavigationController(
            identity=identity,
            hoot_collection=hoot_collection,
            hoot_detail=hoot_detail,
        )

    # Hoot use cases
    @provide(scope=Scope.REQUEST)
    def get_create_hoot_use_case(
        self, hoot_repository: HootRepository, hoot_collection: HootCollectionStore
    ) -> CreateHootUseCase:
        """Provide create hoot use case."""
        return CreateHootUseCase(
            hoot_repository=hoot_repository, hoot_collection=hoot_collection
        )

    @provide(scope=Scope.REQUEST)
    def get_update_hoot_use_case(
        self,
        hoot_repository: HootRepository,
        hoot_collection: HootCollectionStore,
        hoot_detail: HootDetailStore,
    ) -> UpdateHootUseCase:
        """Provide update hoot use case."""
        return UpdateHootUseCase(
            hoot_repository=hoot_repository,
            hoot_collection=hoot_collection,
            hoot_detail=hoot_detail,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_hoot_use_case(
        self,
        hoot_repository: HootRepository,
        hoot_collection: HootCollectionStore,
        hoot_detail: HootDetailStore,
    ) -> DeleteHootUseCase:
        """Provide delete hoot use case."""
        return DeleteHootUseCase(
            hoot_repository=hoot_repository,
            hoot_collection=hoot_collection,
            hoot_detail=hoot_detail,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, hoot_repository: HootRepository, hoot_detail: HootDetailStore
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            hoot_repository=hoot_repository, hoot_detail=hoot_detail
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, hoot_repository: HootRepository, hoot_detail: HootDetailStore
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            hoot_repository=hoot_repository, hoot_detail=hoot_detail
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, hoot_repository: HootRepository, hoot_detail: HootDetailStore
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            hoot_repository=hoot_repository, hoot_detail=hoot_detail
        )
