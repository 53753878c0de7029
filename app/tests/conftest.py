"""Shared fixtures for the portal test suite."""

import pytest

from infrastructure.persistence import InMemoryPreferenceStore
from infrastructure.services import providers


@pytest.fixture
def preference_store():
    """Empty in-memory preference store."""
    return InMemoryPreferenceStore()


@pytest.fixture(autouse=True)
def reset_providers():
    """Clear cached singletons so each test builds its own."""
    yield
    for provider in (
        providers.get_settings,
        providers.get_preference_store,
        providers.get_api_client,
        providers.get_translator,
        providers.get_language_service,
        providers.get_auth_session,
    ):
        provider.cache_clear()
