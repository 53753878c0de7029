"""Feature-level fixtures for i18n tests."""

import pytest

from infrastructure.i18n import Translator, YAMLTranslationLoader
from tests.factories.i18n import write_catalog


@pytest.fixture
def translations_dir(tmp_path):
    """Directory with nav and contact catalogs for en and ar.

    ``contact.send`` exists only in English so fallback can be exercised.
    """
    write_catalog(tmp_path, "nav", "en", {"home": "Home", "about": "About"})
    write_catalog(tmp_path, "nav", "ar", {"home": "الرئيسية", "about": "حول"})
    write_catalog(
        tmp_path,
        "contact",
        "en",
        {"title": "Contact Us", "send": "Send Message", "greeting": "Hello {{name}}"},
    )
    write_catalog(
        tmp_path, "contact", "ar", {"title": "اتصل بنا", "greeting": "مرحباً {{name}}"}
    )
    return tmp_path


@pytest.fixture
def yaml_loader(translations_dir):
    return YAMLTranslationLoader(translations_dir=translations_dir)


@pytest.fixture
def translator(yaml_loader):
    translator = Translator(yaml_loader, fallback_language="en")
    translator.load_all()
    return translator
