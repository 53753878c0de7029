"""Admin navigation feature settings."""

import json
from typing import Annotated, Any, List

from pydantic import Field, field_validator
from pydantic_settings import NoDecode
import structlog

from infrastructure.configuration.base import FeatureSettings

logger = structlog.stdlib.get_logger().bind(component="config.navigation")

DEFAULT_SUPER_ADMIN_ROLES = ["admin", "super_admin", "super-admin"]


class NavigationSettings(FeatureSettings):
    """Configuration for permission-gated admin navigation.

    Environment Variables:
        SUPER_ADMIN_ROLES: Role names that see the whole admin menu. Accepts
            a JSON list (``["admin", "owner"]``) or a comma-separated string.

    Example:
        ```python
        from infrastructure.configuration import settings

        if role.name in settings.navigation.SUPER_ADMIN_ROLES:
            ...
        ```
    """

    SUPER_ADMIN_ROLES: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_SUPER_ADMIN_ROLES),
        alias="SUPER_ADMIN_ROLES",
    )

    @field_validator("SUPER_ADMIN_ROLES", mode="before")
    @classmethod
    def parse_super_admin_roles(cls, v: Any) -> Any:
        """Accept JSON lists or comma-separated role names."""
        if v is None or v == "":
            return list(DEFAULT_SUPER_ADMIN_ROLES)
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
            except json.JSONDecodeError:
                return [part.strip() for part in v.split(",") if part.strip()]
            if isinstance(parsed, list):
                return parsed
            logger.warning("invalid_super_admin_roles", value=v)
            return list(DEFAULT_SUPER_ADMIN_ROLES)
        return v
