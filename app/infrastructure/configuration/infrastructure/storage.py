"""Local preference storage settings."""

from pathlib import Path

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class StorageSettings(InfrastructureSettings):
    """Durable client-side storage configuration.

    Environment Variables:
        PREFERENCES_FILE: JSON file holding the saved language, auth token
            and cached user

    Example:
        ```python
        from infrastructure.configuration import settings

        path = settings.storage.PREFERENCES_FILE
        ```
    """

    PREFERENCES_FILE: Path = Field(
        default=Path(".portal/preferences.json"), alias="PREFERENCES_FILE"
    )
