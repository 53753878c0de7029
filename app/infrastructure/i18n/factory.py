"""Builds the Translator from the bundled or configured catalogs."""

from pathlib import Path
from typing import Optional

import structlog

from infrastructure.configuration import settings
from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.translator import Translator

logger = structlog.get_logger()

# app/locales, next to the infrastructure package
BUNDLED_LOCALES_DIR = Path(__file__).resolve().parents[2] / "locales"


def default_locales_dir() -> Path:
    """LOCALES_DIR when configured, otherwise the bundled catalogs."""
    configured = settings.i18n.LOCALES_DIR
    return Path(configured) if configured is not None else BUNDLED_LOCALES_DIR


def create_translator(
    translations_dir: Optional[Path] = None,
    fallback_language: Optional[str] = None,
    use_cache: bool = True,
    preload: bool = True,
) -> Translator:
    """Create a Translator.

    Args:
        translations_dir: Catalog directory (default: ``default_locales_dir()``).
        fallback_language: Language for missing keys (default: FALLBACK_LANGUAGE).
        use_cache: Cache parsed catalogs in the loader.
        preload: Load every language now instead of on demand.

    Raises:
        ValueError: If the directory does not exist, or preload finds no
            catalogs.
    """
    translations_dir = translations_dir or default_locales_dir()
    translator = Translator(
        loader=YAMLTranslationLoader(translations_dir, use_cache=use_cache),
        fallback_language=fallback_language or settings.i18n.FALLBACK_LANGUAGE,
    )
    if preload:
        translator.load_all()
    logger.info(
        "translator_created",
        translations_dir=str(translations_dir),
        languages=translator.get_available_languages(),
    )
    return translator
