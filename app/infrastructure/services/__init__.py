"""
Application-scoped services.

Provider functions returning the process-wide instances of the settings,
preference store, API client, translator, language state and session.
"""

from infrastructure.services.providers import (
    get_api_client,
    get_auth_session,
    get_language_service,
    get_preference_store,
    get_settings,
    get_translator,
)

__all__ = [
    "get_settings",
    "get_preference_store",
    "get_api_client",
    "get_translator",
    "get_language_service",
    "get_auth_session",
]
