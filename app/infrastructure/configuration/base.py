"""Base classes for settings sections.

Every section reads the process environment and an optional ``.env`` file.
Variable names are matched case-sensitively.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

SECTION_CONFIG = SettingsConfigDict(
    env_file=".env",
    case_sensitive=True,
    extra="ignore",
)


class SectionSettings(BaseSettings):
    """One group of related environment variables."""

    model_config = SECTION_CONFIG


class IntegrationSettings(SectionSettings):
    """Settings for a remote service, such as the portal REST API."""


class FeatureSettings(SectionSettings):
    """Settings for a portal feature, such as localization."""


class InfrastructureSettings(SectionSettings):
    """Settings for local resources, such as preference storage."""
