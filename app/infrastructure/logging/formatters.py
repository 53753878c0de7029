"""Structlog processors used by ``configure_logging``."""

from typing import Any, Iterable, Mapping

REDACTED = "***REDACTED***"

# Keys containing any of these fragments are masked, at any nesting depth
SENSITIVE_PATTERNS = frozenset(
    {"password", "secret", "token", "authorization", "credential", "cookie", "bearer"}
)


def add_app_info(app_name: str, app_version: str = "unknown"):
    """Processor stamping ``app_name`` and ``app_version`` on every entry."""

    def processor(logger: Any, method_name: str, event_dict: dict) -> dict:
        event_dict.setdefault("app_name", app_name)
        event_dict.setdefault("app_version", app_version)
        return event_dict

    return processor


def _is_sensitive(key: Any, patterns: Iterable[str]) -> bool:
    key_lower = str(key).lower()
    return any(pattern in key_lower for pattern in patterns)


def _mask(value: Any, patterns: frozenset, mask_value: str) -> Any:
    if isinstance(value, Mapping):
        return {
            k: mask_value if _is_sensitive(k, patterns) and v is not None
            else _mask(v, patterns, mask_value)
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return type(value)(_mask(v, patterns, mask_value) for v in value)
    return value


def mask_sensitive_data(
    mask_value: str = REDACTED,
    additional_patterns: frozenset | None = None,
):
    """Processor replacing credentials with ``mask_value``.

    A key is sensitive when it contains one of the patterns, ignoring case,
    so ``auth_token`` and ``new_password_confirmation`` are both masked.
    Nested payloads such as ``credentials={"password": ...}`` are walked.
    None values are left alone.
    """
    patterns = SENSITIVE_PATTERNS | (additional_patterns or frozenset())

    def processor(logger: Any, method_name: str, event_dict: dict) -> dict:
        return _mask(event_dict, patterns, mask_value)

    return processor
