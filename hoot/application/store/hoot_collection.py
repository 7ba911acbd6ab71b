"""Hoot collection store.

Local copy of the hoot list shown on the list page. It is filled by a
full fetch and then patched from mutation responses; it never merges a
fetch with what it held before.

Known gap, kept on purpose: ``apply_update`` for a hoot that is not in
the collection (edited from the detail page before the list was ever
loaded) is dropped, and the edit only shows up on the next ``load``.
"""

import logfire

from hoot.domain.error import AuthError
from hoot.domain.model import Hoot
from hoot.domain.repository import HootRepository
from hoot.domain.service import IdentityContext
from hoot.domain.value import HootId


class HootCollectionStore:
    """Ordered, id-unique sequence of hoots, newest first.

    The sequence is an immutable tuple that is swapped on every change,
    so an apply call that changes nothing leaves the very same object in
    place.
    """

    def __init__(
        self, hoot_repository: HootRepository, identity: IdentityContext
    ) -> None:
        """Initialize hoot collection store.

        Args:
            hoot_repository: Remote resource client
            identity: Signed-in identity
        """
        self.hoot_repository = hoot_repository
        self.identity = identity
        self._hoots: tuple[Hoot, ...] = ()
        # Bumped by every load and clear; a fetch only lands if still current
        self._generation = 0

    @property
    def hoots(self) -> tuple[Hoot, ...]:
        return self._hoots

    def get(self, hoot_id: HootId) -> Hoot | None:
        return next((h for h in self._hoots if h.id == hoot_id), None)

    def __len__(self) -> int:
        return len(self._hoots)

    async def load(self) -> tuple[Hoot, ...]:
        """Replace the collection with the hoots the backend lists.

        A response that arrives after the store was cleared, reloaded or
        the signed-in user changed is dropped.

        Returns:
            The collection as it stands after the fetch

        Raises:
            AuthError: If nobody is signed in (no request is sent)
            HootClientError: If the fetch fails; the collection is kept
        """
        user = self.identity.current_user
        if user is None:
            raise AuthError("Hoot list requires a signed-in user")

        self._generation += 1
        generation = self._generation

        with logfire.span("hoot_collection.load", user_id=user.id):
            fetched = await self.hoot_repository.list_hoots()

            current = self.identity.current_user
            superseded = generation != self._generation
            if superseded or current is None or current.id != user.id:
                logfire.info("Discarding stale hoot list", user_id=user.id)
                return self._hoots

            self._hoots = self._unique(fetched)
            logfire.info("Hoot collection loaded", count=len(self._hoots))
            return self._hoots

    def apply_create(self, hoot: Hoot) -> None:
        """Put a newly created hoot first."""
        rest = tuple(h for h in self._hoots if h.id != hoot.id)
        self._hoots = (hoot, *rest)
        logfire.debug("Hoot prepended", hoot_id=hoot.id, count=len(self._hoots))

    def apply_delete(self, hoot_id: HootId) -> None:
        """Remove a hoot; unknown ids are ignored."""
        if self.get(hoot_id) is None:
            return
        self._hoots = tuple(h for h in self._hoots if h.id != hoot_id)
        logfire.debug("Hoot removed", hoot_id=hoot_id, count=len(self._hoots))

    def apply_update(self, hoot_id: HootId, hoot: Hoot) -> None:
        """Replace a hoot in place; unknown ids are ignored."""
        if self.get(hoot_id) is None:
            logfire.debug("Update for hoot outside collection dropped", hoot_id=hoot_id)
            return
        self._hoots = self._unique(
            hoot if h.id == hoot_id else h for h in self._hoots
        )

    def clear(self) -> None:
        self._generation += 1
        self._hoots = ()

    @staticmethod
    def _unique(hoots) -> tuple[Hoot, ...]:
        """Keep the first occurrence of each id, preserving order."""
        seen: set[HootId] = set()
        unique = []
        for hoot in hoots:
            if hoot.id not in seen:
                seen.add(hoot.id)
                unique.append(hoot)
        return tuple(unique)
