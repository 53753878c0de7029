"""Structured logging for the portal, built on structlog.

Example:
    from infrastructure.logging import bind_session_context, get_module_logger

    logger = get_module_logger()

    with bind_session_context(user_id="42", language="ar"):
        logger.info("rendering_page")
"""

from infrastructure.logging.context import (
    bind_session_context,
    clear_session_context,
    get_correlation_id,
)
from infrastructure.logging.formatters import (
    SENSITIVE_PATTERNS,
    add_app_info,
    mask_sensitive_data,
)
from infrastructure.logging.setup import (
    build_processors,
    configure_logging,
    get_module_logger,
)

__all__ = [
    "configure_logging",
    "build_processors",
    "get_module_logger",
    "bind_session_context",
    "get_correlation_id",
    "clear_session_context",
    "add_app_info",
    "mask_sensitive_data",
    "SENSITIVE_PATTERNS",
]
