"""Settings sections for infrastructure."""

from infrastructure.configuration.infrastructure.storage import StorageSettings

__all__ = [
    "StorageSettings",
]
