"""Resolution of localized content and language codes.

``resolve_localized`` turns a LocalizedText value into the one string shown
to the user. It is a total, pure function: every input shape maps to a
string and nothing is read from or written to shared state. Choosing which
language to ask for is the job of ``LanguageService``.
"""

from typing import Any, Iterable, List, Optional

from infrastructure.i18n.models import PlainText, as_localized_text

DEFAULT_FALLBACK_LANGUAGE = "en"


def resolve_localized(
    content: Any,
    requested_lang: str,
    fallback_lang: str = DEFAULT_FALLBACK_LANGUAGE,
) -> str:
    """Resolve a localized field to a single display string.

    Precedence (first match wins, values are never merged):

    1. A plain string is returned unchanged.
    2. None resolves to "".
    3. The requested language, when present. An explicit "" counts as
       present, so a translator can deliberately blank a field.
    4. The fallback language.
    5. The first language carrying a value, in the mapping's own order.
       Callers must not rely on which language that is.
    6. "".

    Mapping entries that are not strings (None, numbers, nested values)
    count as absent.

    Args:
        content: str, mapping of language code to str, PlainText,
            Translated or None. Any other shape resolves to "".
        requested_lang: Language code asked for (usually the current one).
        fallback_lang: Language code tried when the requested one is absent.

    Returns:
        The resolved string.
    """
    try:
        text = as_localized_text(content)
    except TypeError:
        return ""

    if text is None:
        return ""
    if isinstance(text, PlainText):
        return text.value

    # Non-string values count as missing
    for language in (requested_lang, fallback_lang):
        value = text.get(language)
        if isinstance(value, str):
            return value

    for value in text.values.values():
        if isinstance(value, str):
            return value

    return ""


class LanguageNegotiator:
    """Matches requested language tags against the languages on offer.

    Used to map a saved preference such as "ar-EG" onto an offered "ar".
    """

    @staticmethod
    def matches_language(
        requested: str,
        available: str,
        strict: bool = False,
    ) -> bool:
        """Check if available language matches requested language.

        Args:
            requested: Requested language tag (e.g., "ar-EG").
            available: Available language tag (e.g., "ar").
            strict: If True, requires exact match. If False, allows language-only match.

        Returns:
            True if languages match.
        """
        if requested.lower() == available.lower():
            return True

        if strict:
            return False

        requested_lang = requested.replace("_", "-").split("-")[0].lower()
        available_lang = available.replace("_", "-").split("-")[0].lower()
        return requested_lang == available_lang

    @staticmethod
    def find_best_match(
        requested: Iterable[Optional[str]],
        available: List[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find best matching language from available options.

        Args:
            requested: Requested language tags in preference order. Empty
                entries are skipped.
            available: Available language codes.
            default: Default if no match found.

        Returns:
            Best matching code from available, or default if no match.
        """
        for req_lang in requested:
            if not req_lang:
                continue

            for avail_lang in available:
                if LanguageNegotiator.matches_language(
                    req_lang, avail_lang, strict=True
                ):
                    return avail_lang

            for avail_lang in available:
                if LanguageNegotiator.matches_language(
                    req_lang, avail_lang, strict=False
                ):
                    return avail_lang

        return default
