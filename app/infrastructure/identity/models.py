"""User identity models.

The portal API returns the signed-in user as::

    {"id": 7, "name": "Rana", "email": "rana@example.com",
     "roles": [{"name": "editor", "permissions": [{"name": "manage-products"}]}]}

Roles and permissions are matched by exact, case-sensitive name.
"""

from typing import Any, List, Optional, Union

from pydantic import ConfigDict, Field, PrivateAttr, field_validator

from infrastructure.configuration import settings
from infrastructure.models import InfrastructureModel


def super_admin_role_names() -> List[str]:
    """Role names that bypass permission filtering."""
    return list(settings.navigation.SUPER_ADMIN_ROLES)


class Permission(InfrastructureModel):
    """A named capability, e.g. ``manage-products``."""

    name: str


class Role(InfrastructureModel):
    """A role and the permissions it grants.

    Permissions may arrive as objects (``{"name": "..."}``) or bare strings.
    """

    name: str
    permissions: List[Permission] = Field(default_factory=list)

    @field_validator("permissions", mode="before")
    @classmethod
    def normalize_permissions(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, list):
            return [{"name": p} if isinstance(p, str) else p for p in v]
        return v


class User(InfrastructureModel):
    """Signed-in user snapshot.

    ``is_super_admin`` is derived once, when the payload is loaded, from the
    configured super-admin role names.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[Union[int, str]] = None
    name: str = ""
    email: str = ""
    roles: List[Role] = Field(default_factory=list)

    _is_super_admin: bool = PrivateAttr(default=False)

    @field_validator("roles", mode="before")
    @classmethod
    def normalize_roles(cls, v: Any) -> Any:
        return [] if v is None else v

    def model_post_init(self, __context: Any) -> None:
        admin_roles = set(super_admin_role_names())
        self._is_super_admin = any(role.name in admin_roles for role in self.roles)

    @property
    def is_super_admin(self) -> bool:
        return self._is_super_admin

    def has_permission(self, name: Optional[str]) -> bool:
        """True if any role carries a permission with this name."""
        if not name:
            return False
        return any(
            permission.name == name
            for role in self.roles
            for permission in role.permissions
        )

    def has_role(self, name: Optional[str]) -> bool:
        """True if any role has this name."""
        if not name:
            return False
        return any(role.name == name for role in self.roles)
