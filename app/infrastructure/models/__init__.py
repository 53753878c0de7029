"""Pydantic models shared across infrastructure packages."""

from infrastructure.models.base import InfrastructureModel
from infrastructure.models.responses import APIResponse

__all__ = ["APIResponse", "InfrastructureModel"]
