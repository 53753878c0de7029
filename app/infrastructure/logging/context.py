"""Per-session context attached to every log entry.

Usage:
    with bind_session_context(user_id=user.id, language="ar", path="/admin/products"):
        logger.info("page_rendered")
"""

import uuid
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog


@contextmanager
def bind_session_context(
    correlation_id: Optional[str] = None,
    user_id: Optional[Any] = None,
    language: Optional[str] = None,
    path: Optional[str] = None,
    **extra: Any,
) -> Iterator[str]:
    """Bind session fields to structlog's context vars for the block.

    Fields left as None are not bound. A correlation id is generated when
    none is given.

    Yields:
        The correlation id in effect.
    """
    context = {
        "correlation_id": correlation_id or uuid.uuid4().hex,
        "user_id": user_id,
        "language": language,
        "path": path,
        **extra,
    }
    context = {key: value for key, value in context.items() if value is not None}

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["correlation_id"]
    finally:
        structlog.contextvars.unbind_contextvars(*context)


def get_correlation_id() -> Optional[str]:
    return structlog.contextvars.get_contextvars().get("correlation_id")


def clear_session_context() -> None:
    structlog.contextvars.clear_contextvars()
