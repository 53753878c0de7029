"""Tests for modules.site.context."""

import pytest

from modules.navigation import ADMIN_NAVIGATION
from modules.site import RenderContext
from tests.factories.identity import make_super_admin, make_user


@pytest.mark.unit
class TestRenderContext:
    """Tests for RenderContext."""

    def test_localize(self):
        ctx = RenderContext(lang="ar")
        assert ctx.localize({"en": "Pumps", "ar": "مضخات"}) == "مضخات"
        assert ctx.localize({"en": "Pumps"}) == "Pumps"
        assert ctx.localize(None) == ""

    def test_navigation_without_user(self):
        assert RenderContext(lang="en").navigation() == []

    def test_navigation_for_editor(self):
        ctx = RenderContext(lang="en", user=make_user(permissions=["manage-media"]))
        assert [item.name for item in ctx.navigation()] == ["Dashboard", "Media"]

    def test_navigation_for_admin(self):
        ctx = RenderContext(lang="en", user=make_super_admin())
        assert ctx.navigation() == list(ADMIN_NAVIGATION)

    def test_predicates_without_user(self):
        ctx = RenderContext(lang="en")
        assert ctx.has_permission("manage-media") is False
        assert ctx.has_role("admin") is False

    def test_context_is_immutable(self):
        ctx = RenderContext(lang="en")
        with pytest.raises(AttributeError):
            ctx.lang = "ar"
