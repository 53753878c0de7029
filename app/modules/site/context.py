"""Per-request rendering context."""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from infrastructure.i18n import resolve_localized
from infrastructure.i18n.resolvers import DEFAULT_FALLBACK_LANGUAGE
from modules.navigation import ADMIN_NAVIGATION, NavigationItem, filter_navigation


def _deny(_name: Optional[str]) -> bool:
    return False


@dataclass(frozen=True)
class RenderContext:
    """Language and user for one render, passed down explicitly.

    Usage:
        ctx = RenderContext(lang="ar", user=session.user)
        ctx.localize(product["name"])
        ctx.navigation()
    """

    lang: str
    fallback_lang: str = DEFAULT_FALLBACK_LANGUAGE
    user: Any = None

    def localize(self, content: Any) -> str:
        return resolve_localized(content, self.lang, self.fallback_lang)

    def has_permission(self, name: Optional[str]) -> bool:
        check = getattr(self.user, "has_permission", _deny)
        return bool(check(name))

    def has_role(self, name: Optional[str]) -> bool:
        check = getattr(self.user, "has_role", _deny)
        return bool(check(name))

    def navigation(
        self, items: Iterable[NavigationItem] = ADMIN_NAVIGATION
    ) -> List[NavigationItem]:
        """Menu entries visible to this context's user."""
        return filter_navigation(items, self.user, self.has_permission, self.has_role)
