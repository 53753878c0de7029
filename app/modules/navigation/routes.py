"""Admin route table and access guard.

Every admin page declares the permission (and optionally the role) needed
to open it. ``check_route_access`` answers whether a user may open a path,
or where the request should go instead.

Patterns use ``:name`` placeholders for single path segments. When several
patterns match, the one with the most literal segments wins, so
``/admin/products/create`` never resolves to ``/admin/products/:id``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple
from urllib.parse import urlencode

from modules.navigation.filtering import Predicate, is_super_admin

LOGIN_PATH = "/admin/login"


class RouteDecision(Enum):
    ALLOWED = "allowed"
    LOGIN_REQUIRED = "login_required"
    PERMISSION_DENIED = "permission_denied"
    ROLE_DENIED = "role_denied"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class AdminRoute:
    pattern: str
    permission: Optional[str] = None
    role: Optional[str] = None
    public: bool = False

    @property
    def segments(self) -> Tuple[str, ...]:
        return _split(self.pattern)

    def matches(self, path: str) -> bool:
        parts = _split(path)
        if len(parts) != len(self.segments):
            return False
        for expected, actual in zip(self.segments, parts):
            if expected.startswith(":"):
                continue
            if expected != actual:
                return False
        return True

    @property
    def specificity(self) -> int:
        return sum(1 for segment in self.segments if not segment.startswith(":"))


def _crud_routes(resource: str, permission: str) -> List[AdminRoute]:
    base = f"/admin/{resource}"
    return [
        AdminRoute(base, permission=permission),
        AdminRoute(f"{base}/create", permission=permission),
        AdminRoute(f"{base}/:id/edit", permission=permission),
        AdminRoute(f"{base}/:id", permission=permission),
    ]


ADMIN_ROUTES: Tuple[AdminRoute, ...] = (
    AdminRoute(LOGIN_PATH, public=True),
    AdminRoute("/admin"),
    AdminRoute("/admin/dashboard"),
    *_crud_routes("products", "manage-products"),
    *_crud_routes("categories", "manage-categories"),
    *_crud_routes("news", "manage-press-releases"),
    AdminRoute("/admin/about", permission="manage-company-info"),
    *_crud_routes("hero-slides", "manage-content"),
    *_crud_routes("partners", "manage-partners"),
    AdminRoute("/admin/contact", permission="view-form-submissions"),
    AdminRoute("/admin/contact/settings", permission="manage-settings"),
    *_crud_routes("users", "manage-users"),
    AdminRoute("/admin/account-create", permission="manage-users"),
    AdminRoute("/admin/languages", permission="manage-languages"),
    AdminRoute("/admin/media", permission="manage-media"),
    AdminRoute("/admin/settings", permission="manage-settings"),
)


def _split(path: str) -> Tuple[str, ...]:
    path = path.split("?", 1)[0].split("#", 1)[0]
    return tuple(segment for segment in path.split("/") if segment)


def match_route(
    path: str, routes: Iterable[AdminRoute] = ADMIN_ROUTES
) -> Optional[AdminRoute]:
    """Return the most specific route matching ``path``, or None."""
    best: Optional[AdminRoute] = None
    for route in routes:
        if route.matches(path) and (best is None or route.specificity > best.specificity):
            best = route
    return best


def login_redirect(path: str) -> str:
    """Login URL that returns to ``path`` after signing in."""
    return f"{LOGIN_PATH}?{urlencode({'from': path})}"


def check_route_access(
    path: str,
    user: Any,
    has_permission: Predicate,
    has_role: Predicate,
    routes: Iterable[AdminRoute] = ADMIN_ROUTES,
) -> RouteDecision:
    """Decide whether ``user`` may open the admin page at ``path``.

    Super-admins pass every permission and role check, even for a permission
    none of their roles carries: an admin without ``manage-content`` still
    opens "/admin/hero-slides". Only non-admin users are held to
    ``AdminRoute.permission``.

    Args:
        path: Requested path, e.g. "/admin/products/12/edit".
        user: Signed-in user, or None.
        has_permission: Permission predicate for the same user.
        has_role: Role predicate for the same user.
        routes: Route table to match against.

    Returns:
        The access decision. For ``LOGIN_REQUIRED`` send the user to
        ``login_redirect(path)``.
    """
    route = match_route(path, routes)
    if route is None:
        return RouteDecision.NOT_FOUND
    if route.public:
        return RouteDecision.ALLOWED
    if user is None:
        return RouteDecision.LOGIN_REQUIRED
    if is_super_admin(user, has_role):
        return RouteDecision.ALLOWED
    if route.permission and not has_permission(route.permission):
        return RouteDecision.PERMISSION_DENIED
    if route.role and not has_role(route.role):
        return RouteDecision.ROLE_DENIED
    return RouteDecision.ALLOWED
