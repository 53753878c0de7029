"""Structlog configuration for the portal.

Log entries go through the standard library so third-party loggers
(``requests``, ``urllib3``) share the same output. Development renders to
the console; production (no ``PREFIX``) renders one JSON object per line.
Under pytest everything is silenced.

Usage:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("language_changed", language="ar")
"""

import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.types import Processor

from infrastructure.configuration import settings
from infrastructure.logging.formatters import add_app_info, mask_sensitive_data

APP_NAME = "derown-portal"

# Chatty libraries kept at WARNING unless LOG_LEVEL is DEBUG
QUIET_LOGGERS = ("urllib3", "requests")


def _running_under_pytest() -> bool:
    return "pytest" in sys.modules


def build_processors(is_production: bool) -> List[Processor]:
    """Processor chain shared by every logger, ending in the renderer."""
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
        add_app_info(APP_NAME, settings.GIT_SHA),
        mask_sensitive_data(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if is_production:
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the root logger.

    Args:
        log_level: Overrides the LOG_LEVEL setting.
        is_production: Overrides ``settings.is_production`` (JSON output).

    Returns:
        The root bound logger.
    """
    if _running_under_pytest():
        structlog.configure(
            processors=[structlog.stdlib.add_log_level, structlog.processors.KeyValueRenderer()],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(level=logging.CRITICAL + 1, force=True)
        return structlog.stdlib.get_logger()

    production = settings.is_production if is_production is None else is_production
    level = getattr(logging, (log_level or settings.LOG_LEVEL).upper(), logging.INFO)

    structlog.configure(
        processors=build_processors(production),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)
    if level > logging.DEBUG:
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Logger bound to the calling module.

    Binds ``component`` (last dotted segment) and ``module_path``, e.g.
    ``component="translator"``, ``module_path="infrastructure.i18n.translator"``.
    """
    module_name = sys._getframe(1).f_globals.get("__name__", "unknown")
    return logger.bind(component=module_name.rsplit(".", 1)[-1], module_path=module_name)
