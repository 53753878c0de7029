"""Clients for external services consumed by the portal."""

from infrastructure.clients.portal_api import (
    ADMIN_RESOURCES,
    AdminResource,
    PortalApiClient,
)

__all__ = ["PortalApiClient", "AdminResource", "ADMIN_RESOURCES"]
