"""Outcome classes for ``OperationResult``."""

from enum import Enum


class OperationStatus(Enum):
    """How an API call or session action ended.

    UNAUTHORIZED covers both 401 (signed out) and 403 (missing permission);
    ``error_code`` tells them apart.
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
