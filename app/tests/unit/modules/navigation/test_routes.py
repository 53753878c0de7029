"""Tests for modules.navigation.routes."""

import pytest

from modules.navigation import (
    ADMIN_NAVIGATION,
    RouteDecision,
    check_route_access,
    login_redirect,
    match_route,
)
from tests.factories.identity import make_super_admin, make_user


def deny(_name):
    return False


@pytest.mark.unit
class TestMatchRoute:
    """Tests for match_route()."""

    def test_literal_beats_parameter(self):
        assert match_route("/admin/products/create").pattern == "/admin/products/create"
        assert match_route("/admin/products/12").pattern == "/admin/products/:id"

    def test_edit_route(self):
        assert match_route("/admin/users/5/edit").pattern == "/admin/users/:id/edit"

    def test_trailing_slash_and_query_are_ignored(self):
        assert match_route("/admin/products/?page=2").pattern == "/admin/products"

    def test_unknown_path(self):
        assert match_route("/admin/invoices") is None
        assert match_route("/admin/products/1/2/3") is None


@pytest.mark.unit
class TestCheckRouteAccess:
    """Tests for check_route_access()."""

    def test_signed_out_requires_login(self):
        decision = check_route_access("/admin/products", None, deny, deny)
        assert decision == RouteDecision.LOGIN_REQUIRED
        assert login_redirect("/admin/products") == "/admin/login?from=%2Fadmin%2Fproducts"

    def test_login_page_is_public(self):
        assert check_route_access("/admin/login", None, deny, deny) == RouteDecision.ALLOWED

    def test_dashboard_needs_no_permission(self):
        user = make_user()
        assert check_route_access("/admin", user, deny, deny) == RouteDecision.ALLOWED
        assert check_route_access("/admin/dashboard", user, deny, deny) == RouteDecision.ALLOWED

    def test_permission_denied(self):
        user = make_user(permissions=["manage-media"])
        decision = check_route_access(
            "/admin/products/3/edit", user, user.has_permission, user.has_role
        )
        assert decision == RouteDecision.PERMISSION_DENIED

    def test_permission_granted(self):
        user = make_user(permissions=["manage-settings"])
        decision = check_route_access(
            "/admin/contact/settings", user, user.has_permission, user.has_role
        )
        assert decision == RouteDecision.ALLOWED

    def test_role_denied(self):
        from modules.navigation import AdminRoute

        routes = [AdminRoute("/admin/audit", role="auditor")]
        user = make_user(roles=["editor"])
        decision = check_route_access("/admin/audit", user, user.has_permission, user.has_role, routes)
        assert decision == RouteDecision.ROLE_DENIED

    def test_not_found(self):
        assert check_route_access("/admin/invoices", make_user(), deny, deny) == RouteDecision.NOT_FOUND

    def test_super_admin_reaches_every_menu_entry(self):
        user = make_super_admin()
        hrefs = [item.href for item in ADMIN_NAVIGATION if item.href]
        hrefs += [child.href for item in ADMIN_NAVIGATION for child in item.children or ()]
        for href in hrefs:
            assert check_route_access(href, user, deny, user.has_role) == RouteDecision.ALLOWED

    def test_super_admin_skips_route_permission(self):
        admin = make_super_admin()
        editor = make_user(permissions=("manage-hero-slides",))
        assert admin.has_permission("manage-content") is False
        assert (
            check_route_access("/admin/hero-slides", admin, admin.has_permission, admin.has_role)
            == RouteDecision.ALLOWED
        )
        assert (
            check_route_access("/admin/hero-slides", editor, editor.has_permission, editor.has_role)
            == RouteDecision.PERMISSION_DENIED
        )
