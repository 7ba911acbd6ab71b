"""Navigation controller.

Applies the route gate to every navigation and pulls the data the
target needs. The hoot list is fetched when the signed-in identity
changes; the hoot detail is fetched on every navigation to a hoot.
"""

import logfire

from hoot.application.routes import RouteDecision, authorize
from hoot.application.store import HootCollectionStore, HootDetailStore
from hoot.domain.error import HootClientError
from hoot.domain.service import IdentityContext
from hoot.domain.value import HootId


class NavigationController:
    """Entry point for view-driven navigation."""

    def __init__(
        self,
        identity: IdentityContext,
        hoot_collection: HootCollectionStore,
        hoot_detail: HootDetailStore,
    ) -> None:
        """Initialize navigation controller.

        Args:
            identity: Signed-in identity
            hoot_collection: Hoot list store
            hoot_detail: Hoot detail store
        """
        self.identity = identity
        self.hoot_collection = hoot_collection
        self.hoot_detail = hoot_detail
        self.current: RouteDecision | None = None

    async def navigate(self, path: str) -> RouteDecision:
        """Open a path.

        Denied paths come back with ``allow=False`` and a redirect target
        and load nothing. For allowed hoot routes (detail, edit, comment
        edit) the hoot is fetched; a failed fetch is reported in
        ``error`` rather than raised, and the detail store keeps its
        previous state.

        Args:
            path: Requested path

        Returns:
            Routing decision
        """
        with logfire.span("navigation.navigate", path=path):
            decision = authorize(self.identity.current_user, path)
            if not decision.allow:
                logfire.info(
                    "Navigation denied",
                    path=path,
                    redirect_target=decision.redirect_target,
                )
                return decision

            hoot_id = decision.params.get("hootId")
            if hoot_id is not None:
                try:
                    await self.hoot_detail.load(HootId(hoot_id))
                except HootClientError as e:
                    decision = decision.model_copy(update={"error": str(e)})

            self.current = decision
            return decision

    async def on_identity_changed(self) -> HootClientError | None:
        """Bring the stores in line with who is signed in.

        A signed-in user gets a fresh hoot list; signing out clears both
        stores so nothing leaks into the next session.

        Returns:
            The list fetch failure, if any
        """
        user = self.identity.current_user
        if user is None:
            self.hoot_collection.clear()
            self.hoot_detail.clear()
            logfire.info("Stores cleared after sign-out")
            return None

        try:
            await self.hoot_collection.load()
        except HootClientError as e:
            logfire.warn("Hoot list load failed", user_id=user.id, error=str(e))
            return e
        return None
