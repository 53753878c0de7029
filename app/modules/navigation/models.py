"""Navigation menu models."""

from dataclasses import dataclass
from typing import Optional, Tuple

# Icon identifiers follow the lucide icon set names used by the front end
IconRef = str


@dataclass(frozen=True)
class NavigationItem:
    """One menu entry, or a group header when ``children`` is set.

    Attributes:
        name: Label shown when no catalog key is given; also the key for
            expansion state.
        href: Route path. Empty for pure group headers.
        icon: Icon identifier.
        permission: Permission required to see the entry. None means any
            authenticated user.
        children: Entries grouped under this header (one level only).
        label_key: UI catalog key for the label, e.g. "nav.home".
    """

    name: str
    href: str = ""
    icon: Optional[IconRef] = None
    permission: Optional[str] = None
    children: Optional[Tuple["NavigationItem", ...]] = None
    label_key: Optional[str] = None

    @property
    def is_group(self) -> bool:
        return self.children is not None
