"""Permission-gated menu filtering.

``filter_navigation`` narrows a static menu to the entries a user may see.
It is pure: the user snapshot and the two predicates are passed in, and the
input items are never mutated.

Rules:
    - No user: nothing is visible.
    - Super-admin: the whole menu, unfiltered.
    - Leaf: visible when it has no permission or the permission passes.
    - Group: kept with only its visible children, as long as at least one
      child is visible or the group's own permission passes.

Missing permission data grants nothing; only the super-admin bypass widens
what is shown.
"""

from dataclasses import replace
from typing import Any, Callable, Iterable, List, Optional

from infrastructure.identity.models import User, super_admin_role_names
from modules.navigation.models import NavigationItem

Predicate = Callable[[Optional[str]], bool]


def is_super_admin(user: Any, has_role: Predicate) -> bool:
    """True if the user bypasses permission filtering.

    ``User`` models carry the flag computed when they were loaded. Any other
    user object is checked through ``has_role``.
    """
    if user is None:
        return False
    if isinstance(user, User):
        return user.is_super_admin
    return any(has_role(name) for name in super_admin_role_names())


def is_item_visible(item: NavigationItem, has_permission: Predicate) -> bool:
    return item.permission is None or bool(has_permission(item.permission))


def filter_navigation(
    items: Iterable[NavigationItem],
    user: Any,
    has_permission: Predicate,
    has_role: Predicate,
) -> List[NavigationItem]:
    """Return the menu entries visible to ``user``, in declaration order.

    Args:
        items: Static menu, e.g. ``ADMIN_NAVIGATION``.
        user: Signed-in user, or None.
        has_permission: Permission predicate for the same user.
        has_role: Role predicate for the same user.

    Returns:
        A new list. Groups that survive carry only their visible children.
    """
    if user is None:
        return []

    if is_super_admin(user, has_role):
        return list(items)

    visible: List[NavigationItem] = []
    for item in items:
        if item.is_group:
            children = tuple(
                child for child in item.children if is_item_visible(child, has_permission)
            )
            own_permission = item.permission is not None and bool(
                has_permission(item.permission)
            )
            if children or own_permission:
                visible.append(replace(item, children=children))
        elif is_item_visible(item, has_permission):
            visible.append(item)
    return visible
