"""Localization feature settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Configuration for language selection and UI catalogs.

    Environment Variables:
        DEFAULT_LANGUAGE: Language applied when no saved preference exists
        FALLBACK_LANGUAGE: Language tried when the current one has no value
        LOCALES_DIR: Directory holding the UI catalog YAML files
            (default: the app/locales directory shipped with the project)

    Example:
        ```python
        from infrastructure.configuration import settings

        fallback = settings.i18n.FALLBACK_LANGUAGE
        ```
    """

    DEFAULT_LANGUAGE: str = Field(default="en", alias="DEFAULT_LANGUAGE")
    FALLBACK_LANGUAGE: str = Field(default="en", alias="FALLBACK_LANGUAGE")
    LOCALES_DIR: Optional[Path] = Field(default=None, alias="LOCALES_DIR")
