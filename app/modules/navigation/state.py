"""Menu expansion and active-entry state."""

from typing import Dict

from modules.navigation.models import NavigationItem


class MenuState:
    """Expanded/collapsed flags for menu groups, keyed by group name.

    Groups start collapsed. Toggling one group leaves the others untouched.
    """

    def __init__(self):
        self._expanded: Dict[str, bool] = {}

    def toggle(self, name: str) -> bool:
        """Flip one group and return its new state."""
        self._expanded[name] = not self._expanded.get(name, False)
        return self._expanded[name]

    def is_expanded(self, name: str) -> bool:
        return self._expanded.get(name, False)

    def expand(self, name: str) -> None:
        self._expanded[name] = True

    def collapse_all(self) -> None:
        self._expanded.clear()


def is_active(href: str, current_path: str) -> bool:
    """Admin menu entries are active on an exact path match only."""
    return bool(href) and href == current_path


def is_group_active(item: NavigationItem, current_path: str) -> bool:
    """True if one of the group's children is the current page."""
    return any(is_active(child.href, current_path) for child in item.children or ())


def is_public_active(href: str, current_path: str) -> bool:
    """Public header entries match by prefix, except home which is exact."""
    if href == "/":
        return current_path == "/"
    return current_path.startswith(href)
