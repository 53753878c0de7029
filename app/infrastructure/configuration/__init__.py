"""Portal configuration, loaded from the environment with pydantic-settings.

Example:
    ```python
    from infrastructure.configuration import settings

    settings.navigation.SUPER_ADMIN_ROLES
    ```
"""

from infrastructure.configuration.settings import Settings, settings

__all__ = ["Settings", "settings"]
