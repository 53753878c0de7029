"""Shared pydantic configuration for API-backed models."""

from pydantic import BaseModel, ConfigDict


class InfrastructureModel(BaseModel):
    """Base for models validated from portal API payloads.

    Unknown payload keys are ignored and string values are stripped.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
        extra="ignore",
    )
