"""Test data factories for identity models and API user payloads."""

from typing import Iterable, List, Optional

from infrastructure.identity import User


def make_role_payload(name: str = "editor", permissions: Iterable[str] = ()) -> dict:
    """Role payload as returned by ``GET /user``."""
    return {"name": name, "permissions": [{"name": p} for p in permissions]}


def make_user_payload(
    user_id: int = 7,
    name: str = "Rana Haddad",
    email: str = "rana@example.com",
    roles: Optional[List[dict]] = None,
) -> dict:
    """User payload as returned by ``GET /user``."""
    return {
        "id": user_id,
        "name": name,
        "email": email,
        "roles": roles if roles is not None else [make_role_payload()],
    }


def make_user(
    permissions: Iterable[str] = (),
    roles: Iterable[str] = ("editor",),
    **kwargs,
) -> User:
    """User whose first role carries every given permission.

    Args:
        permissions: Permission names granted through the first role.
        roles: Role names, in order.
    """
    role_names = list(roles)
    role_payloads = [
        make_role_payload(name, permissions if index == 0 else ())
        for index, name in enumerate(role_names)
    ]
    return User.model_validate(make_user_payload(roles=role_payloads, **kwargs))


def make_super_admin(**kwargs) -> User:
    return make_user(permissions=(), roles=("admin",), **kwargs)
