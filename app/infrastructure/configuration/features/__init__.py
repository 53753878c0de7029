"""Settings sections for features."""

from infrastructure.configuration.features.i18n import I18nSettings
from infrastructure.configuration.features.navigation import NavigationSettings

__all__ = [
    "I18nSettings",
    "NavigationSettings",
]
