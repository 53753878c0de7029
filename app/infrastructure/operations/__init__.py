"""Operation result types and status enums.

Standardized result types returned by the API client and the session
services instead of raising on remote failures.
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
