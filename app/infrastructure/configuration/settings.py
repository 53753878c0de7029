"""Top-level settings object aggregating every section."""

from typing import Dict, Type

from pydantic_settings import BaseSettings

from infrastructure.configuration.base import SECTION_CONFIG
from infrastructure.configuration.features import I18nSettings, NavigationSettings
from infrastructure.configuration.infrastructure import StorageSettings
from infrastructure.configuration.integrations import ApiSettings

# Attribute name -> section class, built from the environment when not passed
SECTIONS: Dict[str, Type[BaseSettings]] = {
    "api": ApiSettings,
    "i18n": I18nSettings,
    "navigation": NavigationSettings,
    "storage": StorageSettings,
}


class Settings(BaseSettings):
    """Portal settings.

    Sections:
        api: portal REST API connection
        i18n: default and fallback languages, catalog directory
        navigation: super-admin role names
        storage: preference file location

    Environment Variables:
        PREFIX: Deployment prefix; empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Commit deployed, stamped on log entries

    Example:
        ```python
        from infrastructure.configuration import settings

        settings.api.API_BASE_URL
        settings.i18n.FALLBACK_LANGUAGE
        ```
    """

    model_config = SECTION_CONFIG

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    api: ApiSettings
    i18n: I18nSettings
    navigation: NavigationSettings
    storage: StorageSettings

    def __init__(self, **kwargs):
        for name, section in SECTIONS.items():
            kwargs.setdefault(name, section())
        super().__init__(**kwargs)

    @property
    def is_production(self) -> bool:
        return not self.PREFIX


settings = Settings()
