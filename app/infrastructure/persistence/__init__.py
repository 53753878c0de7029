"""Persistence layer for client-side preferences.

Durable key/value storage for the selected language, the auth token and
the cached user payload.
"""

from infrastructure.persistence.preferences import (
    InMemoryPreferenceStore,
    JsonFilePreferenceStore,
    PreferenceStore,
)

__all__ = [
    "PreferenceStore",
    "JsonFilePreferenceStore",
    "InMemoryPreferenceStore",
]
