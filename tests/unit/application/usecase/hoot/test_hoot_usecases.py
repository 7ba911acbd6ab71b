"""Unit tests for hoot use cases."""

import pytest

from hoot.application.store import HootCollectionStore, HootDetailStore
from hoot.application.usecase.hoot import (
    CreateHootRequest,
    CreateHootUseCase,
    DeleteHootRequest,
    DeleteHootUseCase,
    UpdateHootRequest,
    UpdateHootUseCase,
)
from hoot.domain.error import ForbiddenError, ValidationError
from hoot.domain.repository import HootRepository
from hoot.domain.service import IdentityContext
from hoot.domain.value import HootCategory
from tests.conftest import make_token
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def post_hoot(env, title: str = "Hi"):
    use_case = await env.get(CreateHootUseCase)
    response = await use_case.execute(
        CreateHootRequest(title=title, text="body", category="news")
    )
    return response.hoot


class TestCreateHoot:
    """Tests for CreateHootUseCase."""

    @pytest.mark.asyncio
    async def test_create_prepends_and_navigates_to_list(self, unit_env):
        """Created hoot should go first in the collection."""
        # Arrange
        identity = await unit_env.get(IdentityContext)
        identity.sign_in(make_token("u1"))
        collection = await unit_env.get(HootCollectionStore)
        use_case = await unit_env.get(CreateHootUseCase)
        await post_hoot(unit_env, "older")

        # Act
        response = await use_case.execute(
            CreateHootRequest(title="newer", text="body", category="Music")
        )

        # Assert
        assert response.navigate_to == "/hoots"
        assert response.hoot.category is HootCategory.MUSIC
        assert [h.title for h in collection.hoots] == ["newer", "older"]

    @pytest.mark.asyncio
    async def test_blank_title_fails_without_backend_call(self, unit_env):
        """Invalid form input never reaches the backend."""
        identity = await unit_env.get(IdentityContext)
        identity.sign_in(make_token("u1"))
        repository = await unit_env.get(HootRepository)
        collection = await unit_env.get(HootCollectionStore)
        use_case = await unit_env.get(CreateHootUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateHootRequest(title="  ", text="body", category="News")
            )

        assert await repository.list_hoots() == []
        assert collection.hoots == ()

    @pytest.mark.asyncio
    async def test_unknown_category_rejected(self, unit_env):
        identity = await unit_env.get(IdentityContext)
        identity.sign_in(make_token("u1"))
        use_case = await unit_env.get(CreateHootUseCase)

        with pytest.raises(ValidationError, match="category"):
            await use_case.execute(
                CreateHootRequest(title="Hi", text="body", category="Poetry")
            )


class TestUpdateHoot:
    """Tests for UpdateHootUseCase."""

    @pytest.mark.asyncio
    async def test_update_patches_both_stores(self, unit_env):
        """Edit should show in the list and on the open detail page."""
        # Arrange
        identity = await unit_env.get(IdentityContext)
        identity.sign_in(make_token("u1"))
        collection = await unit_env.get(HootCollectionStore)
        detail = await unit_env.get(HootDetailStore)
        hoot = await post_hoot(unit_env)
        await detail.load(hoot.id)
        use_case = await unit_env.get(UpdateHootUseCase)

        # Act
        response = await use_case.execute(
            UpdateHootRequest(
                hoot_id=hoot.id, title="Edited", text="new body", category="Sports"
            )
        )

        # Assert
        assert response.navigate_to == f"/hoots/{hoot.id}"
        assert collection.get(hoot.id).title == "Edited"
        assert detail.hoot.title == "Edited"
        assert detail.hoot.category is HootCategory.SPORTS

    @pytest.mark.asyncio
    async def test_update_of_unlisted_hoot_skips_collection(self, unit_env):
        """An edit of a hoot the list does not hold leaves the list alone."""
        identity = await unit_env.get(IdentityContext)
        identity.sign_in(make_token("u1"))
        collection = await unit_env.get(HootCollectionStore)
        hoot = await post_hoot(unit_env)
        collection.clear()
        use_case = await unit_env.get(UpdateHootUseCase)

        await use_case.execute(
            UpdateHootRequest(hoot_id=hoot.id, title="Edited", text="b", category="News")
        )

        assert collection.hoots == ()

    @pytest.mark.asyncio
    async def test_forbidden_update_leaves_stores_untouched(self, unit_env):
        """Editing someone else's hoot fails and changes nothing locally."""
        identity = await unit_env.get(IdentityContext)
        identity.sign_in(make_token("u1"))
        collection = await unit_env.get(HootCollectionStore)
        hoot = await post_hoot(unit_env)
        identity.sign_in(make_token("u2"))
        use_case = await unit_env.get(UpdateHootUseCase)

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                UpdateHootRequest(hoot_id=hoot.id, title="Mine", text="b", category="News")
            )

        assert collection.get(hoot.id).title == "Hi"


class TestDeleteHoot:
    """Tests for DeleteHootUseCase."""

    @pytest.mark.asyncio
    async def test_delete_removes_and_navigates_to_list(self, unit_env):
        # Arrange
        identity = await unit_env.get(IdentityContext)
        identity.sign_in(make_token("u1"))
        collection = await unit_env.get(HootCollectionStore)
        detail = await unit_env.get(HootDetailStore)
        keep = await post_hoot(unit_env, "keep")
        doomed = await post_hoot(unit_env, "doomed")
        await detail.load(doomed.id)
        use_case = await unit_env.get(DeleteHootUseCase)

        # Act
        response = await use_case.execute(DeleteHootRequest(hoot_id=doomed.id))

        # Assert
        assert response.navigate_to == "/hoots"
        assert [h.id for h in collection.hoots] == [keep.id]
        assert detail.hoot is None

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        """Deleting someone else's hoot fails and changes nothing locally."""
        # Arrange
        identity = await unit_env.get(IdentityContext)
        identity.sign_in(make_token("u1"))
        collection = await unit_env.get(HootCollectionStore)
        detail = await unit_env.get(HootDetailStore)
        hoot = await post_hoot(unit_env)
        await collection.load()
        await detail.load(hoot.id)
        before = collection.hoots
        identity.sign_in(make_token("u2"))
        use_case = await unit_env.get(DeleteHootUseCase)

        # Act
        with pytest.raises(ForbiddenError):
            await use_case.execute(DeleteHootRequest(hoot_id=hoot.id))

        # Assert
        assert collection.hoots is before
        assert detail.holds(hoot.id)
