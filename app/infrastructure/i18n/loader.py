"""UI catalog loading.

Catalogs live in one directory as ``<namespace>.<language>.yml`` files::

    nav.en.yml        nav:
    nav.ar.yml          home: "Home"
    common.en.yml       about: "About"

All files for a language are merged into one ``TranslationCatalog``.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

import structlog
import yaml

from infrastructure.i18n.models import TranslationCatalog

logger = structlog.get_logger()

CATALOG_SUFFIX = ".yml"


class TranslationLoader(ABC):
    """Source of UI catalogs."""

    @abstractmethod
    def load(self, language: str) -> TranslationCatalog:
        """Return the catalog for one language.

        Raises:
            FileNotFoundError: If the language has no catalog.
            ValueError: If a catalog cannot be parsed.
        """

    @abstractmethod
    def available_languages(self) -> List[str]:
        """Language codes that have a catalog."""

    def load_all(self) -> Dict[str, TranslationCatalog]:
        """Return catalogs for every available language.

        Raises:
            ValueError: If no catalog exists at all.
        """
        languages = self.available_languages()
        if not languages:
            raise ValueError(f"No translation catalogs found by {type(self).__name__}")
        return {language: self.load(language) for language in languages}


class YAMLTranslationLoader(TranslationLoader):
    """Loads ``<namespace>.<language>.yml`` files from one directory.

    Attributes:
        translations_dir: Directory holding the YAML files.
        use_cache: Keep parsed catalogs in memory until ``clear_cache()``.
    """

    def __init__(self, translations_dir: Path, use_cache: bool = True):
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, TranslationCatalog] = {}

        if not self.translations_dir.is_dir():
            raise ValueError(f"Translations directory not found: {self.translations_dir}")

    def available_languages(self) -> List[str]:
        languages = set()
        for path in self.translations_dir.glob(f"*{CATALOG_SUFFIX}"):
            # "nav.ar.yml" -> ("nav", "ar")
            namespace, _, language = path.stem.rpartition(".")
            if namespace and language:
                languages.add(language)
        return sorted(languages)

    def load(self, language: str) -> TranslationCatalog:
        if self.use_cache and language in self.cache:
            return self.cache[language]

        paths = sorted(self.translations_dir.glob(f"*.{language}{CATALOG_SUFFIX}"))
        if not paths:
            raise FileNotFoundError(
                f"No catalog for language {language} in {self.translations_dir}"
            )

        catalog = TranslationCatalog(language=language)
        for path in paths:
            self._merge(catalog, self._read(path), path)

        logger.info(
            "translation_catalog_loaded",
            language=language,
            file_count=len(paths),
            namespaces=sorted(catalog.messages),
        )
        if self.use_cache:
            self.cache[language] = catalog
        return catalog

    def clear_cache(self) -> None:
        self.cache.clear()

    @staticmethod
    def _read(path: Path) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("translation_catalog_invalid", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e

    @staticmethod
    def _merge(catalog: TranslationCatalog, data: Any, path: Path) -> None:
        if data is None:
            return
        if not isinstance(data, dict):
            logger.warning("translation_catalog_not_a_mapping", file=str(path))
            return
        for namespace, messages in data.items():
            if not isinstance(messages, dict):
                logger.warning(
                    "translation_namespace_skipped", file=str(path), namespace=namespace
                )
                continue
            catalog.messages.setdefault(namespace, {}).update(messages)
