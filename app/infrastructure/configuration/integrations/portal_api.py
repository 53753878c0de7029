"""Portal REST API integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class ApiSettings(IntegrationSettings):
    """Portal REST API connection configuration.

    Environment Variables:
        API_BASE_URL: Base URL of the portal REST API
        API_TIMEOUT_SECONDS: Default request timeout in seconds

    Example:
        ```python
        from infrastructure.configuration import settings

        base_url = settings.api.API_BASE_URL
        ```
    """

    API_BASE_URL: str = Field(
        default="http://127.0.0.1:8000/api", alias="API_BASE_URL"
    )
    API_TIMEOUT_SECONDS: int = Field(default=30, alias="API_TIMEOUT_SECONDS")
