"""Result type for API calls and session actions.

Remote failures are reported as values rather than exceptions so callers
can show ``message`` to the user and branch on ``status``.
"""

from dataclasses import dataclass
from typing import Any, Optional

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Outcome of one API call or session action.

    Attributes:
        status: High-level outcome.
        message: Text suitable for a toast or a log entry.
        data: Payload on success; validation details on some errors.
        error_code: Machine-readable code, e.g. "HTTP_422" or "TIMEOUT".
        retry_after: Seconds to wait before retrying, when the server said so.
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    retry_after: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create a failed result with an explicit status."""
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            retry_after=retry_after,
            data=data,
        )

    @classmethod
    def transient_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
    ) -> "OperationResult":
        return cls.error(
            OperationStatus.TRANSIENT_ERROR, message, error_code, retry_after
        )

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None, data: Optional[Any] = None
    ) -> "OperationResult":
        return cls.error(
            OperationStatus.PERMANENT_ERROR, message, error_code, data=data
        )

    @classmethod
    def unauthorized(
        cls, message: str = "Unauthenticated", error_code: Optional[str] = None
    ) -> "OperationResult":
        return cls.error(OperationStatus.UNAUTHORIZED, message, error_code)

    @classmethod
    def not_found(
        cls, message: str = "Not found", error_code: Optional[str] = None
    ) -> "OperationResult":
        return cls.error(OperationStatus.NOT_FOUND, message, error_code)
