"""Settings sections for integrations."""

from infrastructure.configuration.integrations.portal_api import ApiSettings

__all__ = [
    "ApiSettings",
]
