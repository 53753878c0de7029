"""Localizing API content records for display.

Content records come back from the API with localized fields as
``{"en": ..., "ar": ...}`` mappings. ``localize_record`` resolves the known
fields of one record to display strings and leaves everything else alone.
"""

from typing import Any, Dict, Mapping, Tuple

from infrastructure.i18n import resolve_localized
from infrastructure.i18n.resolvers import DEFAULT_FALLBACK_LANGUAGE

LOCALIZED_FIELDS: Dict[str, Tuple[str, ...]] = {
    "product": ("name", "description", "short_description"),
    "category": ("name", "description"),
    "press_release": ("title", "excerpt", "content"),
    "hero_slide": ("title", "subtitle", "button_text"),
    "partner": ("name", "description"),
    "company_info": ("about", "mission", "vision", "history", "values"),
}

# Nested records resolved along with their parent
NESTED_RECORDS: Dict[str, Dict[str, str]] = {
    "product": {"category": "category"},
}


def localize_record(
    kind: str,
    record: Mapping[str, Any],
    lang: str,
    fallback_lang: str = DEFAULT_FALLBACK_LANGUAGE,
) -> Dict[str, Any]:
    """Return a shallow copy of ``record`` with its localized fields resolved.

    Args:
        kind: Record type, one of ``LOCALIZED_FIELDS``.
        record: Record as returned by the API.
        lang: Language to display.
        fallback_lang: Language tried when ``lang`` has no value.

    Returns:
        New dict. Known fields missing from the record resolve to "".

    Raises:
        ValueError: If kind is not a known record type.
    """
    if kind not in LOCALIZED_FIELDS:
        raise ValueError(f"Unknown content kind: {kind}")

    localized = dict(record)
    for field in LOCALIZED_FIELDS[kind]:
        localized[field] = resolve_localized(record.get(field), lang, fallback_lang)

    for field, nested_kind in NESTED_RECORDS.get(kind, {}).items():
        nested = record.get(field)
        if isinstance(nested, Mapping):
            localized[field] = localize_record(nested_kind, nested, lang, fallback_lang)
    return localized
