"""
Factory functions for application-scoped services.

Each provider is cached so the whole process shares one instance, the way
the current language and the signed-in user must be shared.
"""

from functools import lru_cache

from infrastructure.clients import PortalApiClient
from infrastructure.configuration import Settings, settings
from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.service import LanguageService
from infrastructure.i18n.translator import Translator
from infrastructure.identity import AuthSession
from infrastructure.persistence import JsonFilePreferenceStore, PreferenceStore
from infrastructure.persistence.preferences import AUTH_TOKEN_KEY, LANGUAGE_KEY


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    Returns:
        Settings: The settings instance loaded from environment.
    """
    return settings


@lru_cache
def get_preference_store() -> PreferenceStore:
    """Get the durable preference store configured by PREFERENCES_FILE."""
    return JsonFilePreferenceStore(get_settings().storage.PREFERENCES_FILE)


@lru_cache
def get_api_client() -> PortalApiClient:
    """
    Get application-scoped portal API client.

    The bearer token and Accept-Language header are read from the
    preference store on every request. A 401 clears the signed-in session.
    """
    store = get_preference_store()
    return PortalApiClient(
        base_url=get_settings().api.API_BASE_URL,
        timeout=get_settings().api.API_TIMEOUT_SECONDS,
        token_provider=lambda: store.get(AUTH_TOKEN_KEY),
        language_provider=lambda: store.get(LANGUAGE_KEY),
        on_unauthorized=lambda: get_auth_session().clear(),
    )


@lru_cache
def get_translator() -> Translator:
    """Get the UI catalog translator with every bundled language preloaded."""
    return create_translator()


@lru_cache
def get_language_service() -> LanguageService:
    """Get the owner of the current-language selection."""
    return LanguageService(store=get_preference_store(), translator=get_translator())


@lru_cache
def get_auth_session() -> AuthSession:
    """Get the signed-in session."""
    return AuthSession(client=get_api_client(), store=get_preference_store())
