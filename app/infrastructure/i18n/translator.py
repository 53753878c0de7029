"""UI message lookup with a fallback language and ``{{var}}`` interpolation."""

import re
from typing import Any, Dict, List, Optional

from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import TranslationCatalog, TranslationKey
from infrastructure.i18n.resolvers import DEFAULT_FALLBACK_LANGUAGE
from infrastructure.logging import get_module_logger

logger = get_module_logger()

PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class Translator:
    """Serves UI messages from loaded catalogs.

    A key missing from the requested language is looked up in the fallback
    language before giving up.

    Attributes:
        loader: Source of the catalogs.
        catalogs: Loaded catalogs by language code.
        fallback_language: Language consulted for missing keys.

    Usage:
        translator = Translator(YAMLTranslationLoader(locales_dir))
        translator.load_all()
        translator.translate_message(TranslationKey("nav", "home"), "ar")
    """

    def __init__(
        self,
        loader: TranslationLoader,
        fallback_language: str = DEFAULT_FALLBACK_LANGUAGE,
    ):
        self.loader = loader
        self.fallback_language = fallback_language
        self.catalogs: Dict[str, TranslationCatalog] = {}

    def load_all(self) -> None:
        self.catalogs = self.loader.load_all()

    def load_language(self, language: str) -> None:
        """Load one language.

        Raises:
            FileNotFoundError: If the loader has no catalog for it.
        """
        self.catalogs[language] = self.loader.load(language)

    def reload(self) -> None:
        """Drop loaded catalogs and load everything again."""
        self.catalogs.clear()
        self.load_all()
        logger.info("translations_reloaded", languages=sorted(self.catalogs))

    def get_available_languages(self) -> List[str]:
        return list(self.catalogs)

    def get_catalog(self, language: str) -> Optional[TranslationCatalog]:
        return self.catalogs.get(language)

    def has_message(self, key: TranslationKey, language: str) -> bool:
        """True if the language's own catalog has the key (no fallback)."""
        catalog = self.catalogs.get(language)
        return catalog is not None and catalog.has_message(key)

    def translate_message(
        self,
        key: TranslationKey,
        language: str,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Return the message for ``key``, interpolated with ``variables``.

        Raises:
            KeyError: If neither the language nor the fallback has the key.
            ValueError: If the message uses a variable that was not given.
        """
        for candidate in dict.fromkeys((language, self.fallback_language)):
            catalog = self.catalogs.get(candidate)
            message = catalog.get_message(key) if catalog else None
            if message:
                return self._interpolate(message, variables or {})

        logger.warning("translation_missing", key=str(key), language=language)
        raise KeyError(f"No translation for {key} in {language} or {self.fallback_language}")

    @staticmethod
    def _interpolate(message: str, variables: Dict[str, Any]) -> str:
        missing = [name for name in PLACEHOLDER.findall(message) if name not in variables]
        if missing:
            raise ValueError(f"Missing interpolation variable: {', '.join(missing)}")
        return PLACEHOLDER.sub(lambda m: str(variables[m.group(1)]), message)
