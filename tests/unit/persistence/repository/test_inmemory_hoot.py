"""Unit tests for InMemoryHootRepository."""

import pytest

from hoot.domain.error import AuthError, ForbiddenError, NotFoundError
from hoot.domain.service import IdentityContext
from hoot.domain.value import CommentFields, HootCategory, HootFields
from hoot.persistence.repository import InMemoryHootRepository
from tests.conftest import make_token

FIELDS = HootFields(title="Hi", text="body", category=HootCategory.SPORTS)


@pytest.fixture
def identity() -> IdentityContext:
    identity = IdentityContext(token_path=None)
    identity.sign_in(make_token("u1", "alice"))
    return identity


@pytest.fixture
def repository(identity) -> InMemoryHootRepository:
    return InMemoryHootRepository(identity)


class TestHoots:
    """Tests for hoot records."""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_author(self, repository):
        hoot = await repository.create_hoot(FIELDS)

        assert hoot.id
        assert hoot.author.id == "u1"
        assert await repository.get_hoot(hoot.id) == hoot

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit_or_delete(self, repository, identity):
        hoot = await repository.create_hoot(FIELDS)
        identity.sign_in(make_token("u2"))

        with pytest.raises(ForbiddenError):
            await repository.update_hoot(hoot.id, FIELDS)
        with pytest.raises(ForbiddenError):
            await repository.delete_hoot(hoot.id)

    @pytest.mark.asyncio
    async def test_deleted_hoot_is_gone(self, repository):
        hoot = await repository.create_hoot(FIELDS)

        await repository.delete_hoot(hoot.id)

        with pytest.raises(NotFoundError):
            await repository.get_hoot(hoot.id)

    @pytest.mark.asyncio
    async def test_anonymous_is_rejected(self, repository, identity):
        identity.sign_out()

        with pytest.raises(AuthError):
            await repository.list_hoots()


class TestComments:
    """Tests for comments nested under a hoot."""

    @pytest.mark.asyncio
    async def test_comments_are_kept_on_the_hoot(self, repository):
        hoot = await repository.create_hoot(FIELDS)

        first = await repository.create_comment(hoot.id, CommentFields(text="one"))
        second = await repository.create_comment(hoot.id, CommentFields(text="two"))
        await repository.delete_comment(hoot.id, first.id)

        stored = await repository.get_hoot(hoot.id)
        assert [c.id for c in stored.comments] == [second.id]

    @pytest.mark.asyncio
    async def test_comment_author_check(self, repository, identity):
        hoot = await repository.create_hoot(FIELDS)
        comment = await repository.create_comment(hoot.id, CommentFields(text="one"))
        identity.sign_in(make_token("u2"))

        with pytest.raises(ForbiddenError):
            await repository.update_comment(hoot.id, comment.id, CommentFields(text="x"))

    @pytest.mark.asyncio
    async def test_unknown_comment(self, repository):
        hoot = await repository.create_hoot(FIELDS)

        with pytest.raises(NotFoundError):
            await repository.delete_comment(hoot.id, "missing")
