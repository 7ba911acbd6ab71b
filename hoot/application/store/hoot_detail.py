"""Hoot detail store.

Holds the hoot open on the detail page together with its comments. It
is fetched on every navigation to a hoot and is not shared with the
collection store; comment mutations are patched in here only.
"""

from enum import Enum

import logfire

from hoot.domain.error import HootClientError
from hoot.domain.model import Comment, Hoot
from hoot.domain.repository import HootRepository
from hoot.domain.value import CommentId, HootId


class LoadState(str, Enum):
    """Loading state of the detail aggregate."""

    UNLOADED = "unloaded"
    LOADING = "loading"
    LOADED = "loaded"


class HootDetailStore:
    """One hoot and its ordered comments, addressed by route id."""

    def __init__(self, hoot_repository: HootRepository) -> None:
        self.hoot_repository = hoot_repository
        self.hoot_id: HootId | None = None
        self.hoot: Hoot | None = None
        self.status = LoadState.UNLOADED
        self.last_error: HootClientError | None = None

    @property
    def is_ready(self) -> bool:
        """False while views must show a loading indicator."""
        return self.status == LoadState.LOADED and self.hoot is not None

    @property
    def comments(self) -> list[Comment]:
        return list(self.hoot.comments) if self.hoot else []

    async def load(self, hoot_id: HootId) -> Hoot:
        """Fetch a hoot with its comments.

        Switching to another id drops the previous hoot first. If the
        route moved on while the fetch was in flight, the late response
        is not applied.

        Args:
            hoot_id: Hoot to show

        Returns:
            The fetched hoot

        Raises:
            HootClientError: If the fetch fails; the previous state is kept
        """
        with logfire.span("hoot_detail.load", hoot_id=hoot_id):
            if hoot_id != self.hoot_id:
                self.hoot = None
            self.hoot_id = hoot_id
            self.status = LoadState.LOADING
            self.last_error = None

            try:
                hoot = await self.hoot_repository.get_hoot(hoot_id)
            except HootClientError as e:
                if self.hoot_id == hoot_id:
                    self.status = (
                        LoadState.LOADED if self.hoot is not None else LoadState.UNLOADED
                    )
                    self.last_error = e
                logfire.warn("Hoot detail load failed", hoot_id=hoot_id, error=str(e))
                raise

            if self.hoot_id != hoot_id:
                logfire.info(
                    "Discarding stale hoot detail", hoot_id=hoot_id, current=self.hoot_id
                )
                return hoot

            self.hoot = hoot
            self.status = LoadState.LOADED
            logfire.info(
                "Hoot detail loaded", hoot_id=hoot_id, comments=len(hoot.comments)
            )
            return hoot

    def holds(self, hoot_id: HootId) -> bool:
        """Whether the loaded hoot is the given one."""
        return self.hoot is not None and self.hoot.id == hoot_id

    def find_comment(self, comment_id: CommentId) -> Comment | None:
        return self.hoot.find_comment(comment_id) if self.hoot else None

    def apply_update(self, hoot: Hoot) -> None:
        """Take an edited hoot, keeping loaded comments the response lacks."""
        if not self.holds(hoot.id):
            return
        if not hoot.comments:
            hoot = hoot.model_copy(update={"comments": self.hoot.comments})
        self.hoot = hoot

    def apply_comment_create(self, comment: Comment) -> None:
        """Append a new comment to the loaded hoot."""
        if self.hoot is None:
            return
        self._set_comments([*self.hoot.comments, comment])
        logfire.debug("Comment appended", hoot_id=self.hoot.id, comment_id=comment.id)

    def apply_comment_delete(self, comment_id: CommentId) -> None:
        """Remove exactly one comment; unknown ids are ignored."""
        if self.find_comment(comment_id) is None:
            return
        comments = list(self.hoot.comments)
        del comments[next(i for i, c in enumerate(comments) if c.id == comment_id)]
        self._set_comments(comments)
        logfire.debug("Comment removed", hoot_id=self.hoot.id, comment_id=comment_id)

    def apply_comment_update(self, comment_id: CommentId, comment: Comment) -> None:
        """Replace a comment in place; unknown ids are ignored."""
        if self.find_comment(comment_id) is None:
            return
        self._set_comments(
            [comment if c.id == comment_id else c for c in self.hoot.comments]
        )

    def clear(self) -> None:
        self.hoot_id = None
        self.hoot = None
        self.status = LoadState.UNLOADED
        self.last_error = None

    def _set_comments(self, comments: list[Comment]) -> None:
        self.hoot = self.hoot.model_copy(update={"comments": comments})
