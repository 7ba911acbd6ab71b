"""End-to-end client flows against the in-memory backend."""

import pytest

from hoot.application.routes import can_mutate
from hoot.application.store import HootCollectionStore, HootDetailStore
from hoot.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from hoot.application.usecase.hoot import (
    CreateHootRequest,
    CreateHootUseCase,
    UpdateHootRequest,
    UpdateHootUseCase,
)
from hoot.domain.service import IdentityContext
from hoot.interface.navigation import NavigationController
from tests.conftest import make_token
from tests.harness import create_env_fixture

e2e_env = create_env_fixture()


class TestScenarios:
    """User journeys through navigation, use cases and stores."""

    @pytest.mark.asyncio
    async def test_post_then_comment_then_delete_comment(self, e2e_env):
        """Post a hoot, comment on it twice, delete the first comment."""
        identity = await e2e_env.get(IdentityContext)
        navigation = await e2e_env.get(NavigationController)
        collection = await e2e_env.get(HootCollectionStore)
        detail = await e2e_env.get(HootDetailStore)

        identity.sign_in(make_token("u1", "alice"))
        assert await navigation.on_identity_changed() is None

        created = await (await e2e_env.get(CreateHootUseCase)).execute(
            CreateHootRequest(title="Owls", text="They hoot", category="News")
        )
        assert created.navigate_to == "/hoots"
        assert collection.hoots[0].id == created.hoot.id

        decision = await navigation.navigate(f"/hoots/{created.hoot.id}")
        assert decision.allow and detail.is_ready
        assert can_mutate(detail.hoot, identity.current_user)

        commenting = await e2e_env.get(CreateCommentUseCase)
        first = await commenting.execute(
            CreateCommentRequest(hoot_id=created.hoot.id, text="first")
        )
        await commenting.execute(
            CreateCommentRequest(hoot_id=created.hoot.id, text="second")
        )

        await (await e2e_env.get(DeleteCommentUseCase)).execute(
            DeleteCommentRequest(hoot_id=created.hoot.id, comment_id=first.comment.id)
        )
        assert [c.text for c in detail.comments] == ["second"]

        # A fresh fetch agrees with the patched store
        await navigation.navigate(f"/hoots/{created.hoot.id}")
        assert [c.text for c in detail.comments] == ["second"]

    @pytest.mark.asyncio
    async def test_edit_from_detail_before_list_loaded(self, e2e_env):
        """The list picks up a detail-page edit only on its next load."""
        identity = await e2e_env.get(IdentityContext)
        navigation = await e2e_env.get(NavigationController)
        collection = await e2e_env.get(HootCollectionStore)
        detail = await e2e_env.get(HootDetailStore)

        identity.sign_in(make_token("u1"))
        created = await (await e2e_env.get(CreateHootUseCase)).execute(
            CreateHootRequest(title="Draft", text="body", category="Games")
        )
        collection.clear()

        await navigation.navigate(f"/hoots/{created.hoot.id}/edit")
        response = await (await e2e_env.get(UpdateHootUseCase)).execute(
            UpdateHootRequest(
                hoot_id=created.hoot.id, title="Final", text="body", category="Games"
            )
        )

        assert response.navigate_to == f"/hoots/{created.hoot.id}"
        assert detail.hoot.title == "Final"
        assert collection.get(created.hoot.id) is None

        await navigation.on_identity_changed()
        assert collection.get(created.hoot.id).title == "Final"

    @pytest.mark.asyncio
    async def test_other_user_sees_no_controls_and_sign_out_gates(self, e2e_env):
        """A second user reads but cannot mutate; signing out locks the routes."""
        identity = await e2e_env.get(IdentityContext)
        navigation = await e2e_env.get(NavigationController)
        detail = await e2e_env.get(HootDetailStore)

        identity.sign_in(make_token("u1"))
        created = await (await e2e_env.get(CreateHootUseCase)).execute(
            CreateHootRequest(title="Mine", text="body", category="Music")
        )

        identity.sign_in(make_token("u2"))
        await navigation.on_identity_changed()
        await navigation.navigate(f"/hoots/{created.hoot.id}")
        assert detail.is_ready
        assert not can_mutate(detail.hoot, identity.current_user)

        sign_in_page = await navigation.navigate("/sign-in")
        assert sign_in_page.redirect_target == "/hoots"

        identity.sign_out()
        await navigation.on_identity_changed()
        decision = await navigation.navigate("/hoots")
        assert decision.allow is False
        assert decision.redirect_target == "/sign-in"
