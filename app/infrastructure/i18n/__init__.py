"""i18n system - localized content resolution and UI catalogs.

Main components:
- models: LocalizedText (PlainText | Translated), Language, DocumentAttributes,
  TranslationKey, TranslationCatalog
- resolvers: resolve_localized (pure) and LanguageNegotiator
- loader: TranslationLoader and YAMLTranslationLoader
- translator: Translator service with message interpolation
- service: LanguageService, the owner of the current-language selection
"""

from infrastructure.i18n.loader import TranslationLoader, YAMLTranslationLoader
from infrastructure.i18n.models import (
    DocumentAttributes,
    Language,
    LocalizedText,
    PlainText,
    Translated,
    TranslationCatalog,
    TranslationKey,
    as_localized_text,
)
from infrastructure.i18n.resolvers import (
    LanguageNegotiator,
    resolve_localized,
)
from infrastructure.i18n.translator import Translator

__all__ = [
    "LocalizedText",
    "PlainText",
    "Translated",
    "as_localized_text",
    "Language",
    "DocumentAttributes",
    "TranslationKey",
    "TranslationCatalog",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
    "LanguageNegotiator",
    "resolve_localized",
]
