"""Test data factories for the i18n system."""

from pathlib import Path
from typing import Dict, Optional

import yaml

from infrastructure.i18n import Language, TranslationCatalog, TranslationKey


def make_language(
    code: str = "en", name: str = "English", native_name: Optional[str] = None, is_rtl: bool = False
) -> Language:
    return Language(code=code, name=name, native_name=native_name or name, is_rtl=is_rtl)


def make_languages() -> list:
    """English and Arabic, as served by ``GET /languages``."""
    return [
        make_language("en", "English"),
        make_language("ar", "Arabic", native_name="العربية", is_rtl=True),
    ]


def make_language_payload(code: str = "en", name: str = "English", is_rtl: bool = False) -> dict:
    return {"code": code, "name": name, "native_name": name, "is_rtl": is_rtl}


def make_translation_key(namespace: str = "nav", message_key: str = "home") -> TranslationKey:
    return TranslationKey(namespace=namespace, message_key=message_key)


def make_translation_catalog(
    language: str = "en", messages: Optional[Dict[str, Dict[str, str]]] = None
) -> TranslationCatalog:
    if messages is None:
        messages = {"nav": {"home": "Home", "about": "About"}}
    return TranslationCatalog(language=language, messages=messages)


def write_catalog(directory: Path, namespace: str, language: str, messages: dict) -> Path:
    """Write ``<namespace>.<language>.yml`` and return its path."""
    path = directory / f"{namespace}.{language}.yml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump({namespace: messages}, f, allow_unicode=True)
    return path
