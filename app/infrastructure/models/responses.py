"""Portal API response envelope.

Endpoints answer with::

    {"success": true, "data": {...}, "message": "optional"}

Failures use ``"success": false`` with a message, sometimes on a 2xx.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Envelope around every portal API payload."""

    model_config = ConfigDict(extra="ignore")

    success: bool
    data: Optional[T] = None
    message: Optional[str] = None
    error_code: Optional[str] = None
