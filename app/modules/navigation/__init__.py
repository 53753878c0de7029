"""Admin and public navigation: menus, permission filtering and route guard."""

from modules.navigation.filtering import filter_navigation, is_super_admin
from modules.navigation.menus import ADMIN_NAVIGATION, PUBLIC_NAVIGATION
from modules.navigation.models import NavigationItem
from modules.navigation.routes import (
    ADMIN_ROUTES,
    AdminRoute,
    RouteDecision,
    check_route_access,
    login_redirect,
    match_route,
)
from modules.navigation.state import (
    MenuState,
    is_active,
    is_group_active,
    is_public_active,
)

__all__ = [
    "ADMIN_NAVIGATION",
    "ADMIN_ROUTES",
    "AdminRoute",
    "MenuState",
    "NavigationItem",
    "PUBLIC_NAVIGATION",
    "RouteDecision",
    "check_route_access",
    "filter_navigation",
    "is_active",
    "is_group_active",
    "is_public_active",
    "is_super_admin",
    "login_redirect",
    "match_route",
]
