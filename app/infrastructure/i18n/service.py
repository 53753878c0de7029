"""Current-language state.

``LanguageService`` is the only place that changes the selected language.
It persists the choice, tracks text direction and the document attributes
that follow it, and hands the current code to the pure resolver.
"""

from typing import Any, Dict, Iterable, List, Optional

from infrastructure.clients import PortalApiClient
from infrastructure.configuration import settings
from infrastructure.i18n.models import DocumentAttributes, Language, TranslationKey
from infrastructure.i18n.resolvers import LanguageNegotiator, resolve_localized
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger
from infrastructure.persistence import PreferenceStore
from infrastructure.persistence.preferences import LANGUAGE_KEY

logger = get_module_logger()

# Used when the API cannot be reached
FALLBACK_LANGUAGES = (
    Language(code="en", name="English", native_name="English", is_rtl=False),
    Language(code="ar", name="Arabic", native_name="العربية", is_rtl=True),
)


class LanguageService:
    """Owns the process-wide language selection.

    Usage:
        service = LanguageService(store=store, translator=create_translator())
        service.load_languages(client)
        service.restore()

        service.change_language("ar")
        service.is_rtl                     # True
        service.t("nav.home")              # "الرئيسية"
        service.get_localized({"en": "Pumps", "ar": "مضخات"})  # "مضخات"
    """

    def __init__(
        self,
        store: PreferenceStore,
        translator: Optional[Translator] = None,
        default_language: Optional[str] = None,
        fallback_language: Optional[str] = None,
    ):
        self._store = store
        self._translator = translator
        self.default_language = default_language or settings.i18n.DEFAULT_LANGUAGE
        self.fallback_language = fallback_language or settings.i18n.FALLBACK_LANGUAGE
        self._languages: List[Language] = []
        self._current = self.default_language
        self._is_rtl = False
        self._document = DocumentAttributes(lang=self.default_language)
        self.loading = True

    @property
    def languages(self) -> List[Language]:
        return list(self._languages)

    @property
    def current_language(self) -> str:
        return self._current

    @property
    def is_rtl(self) -> bool:
        return self._is_rtl

    @property
    def document(self) -> DocumentAttributes:
        return self._document

    def get_language(self, code: str) -> Optional[Language]:
        return next((lang for lang in self._languages if lang.code == code), None)

    def get_current_language(self) -> Optional[Language]:
        return self.get_language(self._current)

    def load_languages(self, client: PortalApiClient) -> List[Language]:
        """Fetch the offered languages, falling back to English and Arabic.

        Args:
            client: API client used for ``GET /languages``.

        Returns:
            The languages now on offer.
        """
        result = client.get_languages()
        languages: List[Language] = []
        if result.is_success and isinstance(result.data, list):
            languages = list(self._parse_languages(result.data))
        else:
            logger.error(
                "languages_load_failed",
                status=result.status.value,
                error=result.message,
            )

        if not languages:
            languages = list(FALLBACK_LANGUAGES)
            logger.info("using_fallback_languages")

        self.set_languages(languages)
        self.loading = False
        return self.languages

    def set_languages(self, languages: Iterable[Language]) -> None:
        """Replace the offered languages, e.g. after an admin edits them.

        The saved preference is re-applied. If it is not offered, the default
        (or the first offered language) is selected without overwriting it.
        """
        self._languages = list(languages)
        if self._languages:
            self.restore()

    def restore(self) -> Optional[str]:
        """Select the saved language, or the default one.

        Returns:
            The selected language code, or None when nothing is offered.
        """
        codes = [lang.code for lang in self._languages]
        if not codes:
            return None

        saved = self._store.get(LANGUAGE_KEY)
        code = LanguageNegotiator.find_best_match([saved], codes)
        if code is not None:
            self.change_language(code)
            return code

        code = LanguageNegotiator.find_best_match(
            [self.default_language], codes, default=codes[0]
        )
        # A saved code that is not offered yet is kept for a later reload
        self.change_language(code, persist=not saved)
        return code

    def change_language(self, code: str, persist: bool = True) -> bool:
        """Switch the current language.

        Unknown codes are ignored.

        Args:
            code: Language code to select.
            persist: Save the choice as the user's preference.

        Returns:
            True if the language was switched.
        """
        language = self.get_language(code)
        if language is None:
            logger.warning("unknown_language_requested", language=code)
            return False

        self._current = language.code
        self._is_rtl = language.is_rtl
        if persist:
            self._store.set(LANGUAGE_KEY, language.code)
        self._document = self._document.for_language(language)
        logger.info("language_changed", language=language.code, dir=language.direction)
        return True

    def t(
        self,
        key: str,
        fallback: Optional[str] = None,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Look up a UI message in the current language.

        Args:
            key: Dot-separated catalog key, e.g. "nav.home".
            fallback: Returned when the key is unknown or a placeholder has no
                value (default: the key).
            variables: Values for {{placeholders}}.
        """
        default = key if fallback is None else fallback
        if self._translator is None:
            return default
        try:
            translation_key = TranslationKey.from_string(key)
        except ValueError:
            return default
        try:
            return self._translator.translate_message(
                translation_key, self._current, variables
            )
        except KeyError:
            return default
        except ValueError as e:
            logger.warning("translation_interpolation_failed", key=key, error=str(e))
            return default

    def get_localized(self, content: Any, fallback_language: Optional[str] = None) -> str:
        """Resolve a localized field in the current language."""
        return resolve_localized(
            content, self._current, fallback_language or self.fallback_language
        )

    @staticmethod
    def _parse_languages(payload: List[Any]) -> Iterable[Language]:
        for item in payload:
            if not isinstance(item, dict):
                continue
            try:
                yield Language.from_dict(item)
            except KeyError as e:
                logger.warning("invalid_language_payload", missing=str(e))
