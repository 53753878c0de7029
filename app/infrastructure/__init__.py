"""Infrastructure modules for the portal.

Centralized infrastructure components:
- configuration: Settings management (settings)
- logging: structlog setup and session context
- operations: Operation results returned by remote calls
- models: API response envelope and base model
- persistence: Durable preference storage
- clients: Portal REST API client
- identity: User model and the authenticated session
- i18n: Localized content resolution, UI catalogs and language state
- services: Application-scoped singleton providers
"""
