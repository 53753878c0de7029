"""Tests for infrastructure.i18n.models module."""

import pytest

from infrastructure.i18n import (
    DocumentAttributes,
    Language,
    PlainText,
    Translated,
    TranslationKey,
    as_localized_text,
)
from tests.factories.i18n import make_language, make_translation_catalog


@pytest.mark.unit
class TestLocalizedText:
    """Tests for the PlainText | Translated union."""

    def test_string_becomes_plain_text(self):
        assert as_localized_text("Pumps") == PlainText("Pumps")

    def test_mapping_becomes_translated(self):
        text = as_localized_text({"en": "Pumps", "ar": "مضخات"})
        assert isinstance(text, Translated)
        assert text.get("ar") == "مضخات"
        assert text.get("fr") is None

    def test_none_and_tagged_values_pass_through(self):
        plain = PlainText("x")
        assert as_localized_text(None) is None
        assert as_localized_text(plain) is plain

    def test_unsupported_shape_raises_type_error(self):
        with pytest.raises(TypeError):
            as_localized_text(42)

    def test_translated_languages_skip_none(self):
        text = Translated({"fr": "X", "ar": None, "en": "A"})
        assert text.languages == ["fr", "en"]


@pytest.mark.unit
class TestLanguage:
    """Tests for Language."""

    def test_from_dict(self):
        language = Language.from_dict(
            {"code": "ar", "name": "Arabic", "native_name": "العربية", "is_rtl": True}
        )
        assert language == Language("ar", "Arabic", "العربية", True)
        assert language.direction == "rtl"

    def test_from_dict_defaults(self):
        language = Language.from_dict({"code": "en", "name": "English"})
        assert language.native_name == "English"
        assert language.is_rtl is False
        assert language.direction == "ltr"

    def test_from_dict_requires_code(self):
        with pytest.raises(KeyError):
            Language.from_dict({"name": "English"})


@pytest.mark.unit
class TestDocumentAttributes:
    """Tests for DocumentAttributes."""

    def test_for_language_sets_lang_and_dir(self):
        attrs = DocumentAttributes().for_language(
            make_language("ar", "Arabic", is_rtl=True)
        )
        assert attrs.lang == "ar"
        assert attrs.dir == "rtl"
        assert attrs.body_classes == ("lang-ar",)

    def test_for_language_replaces_previous_lang_class(self):
        attrs = DocumentAttributes(body_classes=("admin", "lang-en"))
        switched = attrs.for_language(make_language("ar", "Arabic", is_rtl=True))
        assert switched.body_classes == ("admin", "lang-ar")


@pytest.mark.unit
class TestTranslationKey:
    """Tests for TranslationKey."""

    def test_from_string(self):
        key = TranslationKey.from_string("common.additional_details")
        assert key.namespace == "common"
        assert key.message_key == "additional_details"
        assert str(key) == "common.additional_details"

    @pytest.mark.parametrize("raw", ["home", ".home", "nav."])
    def test_from_string_invalid(self, raw):
        with pytest.raises(ValueError):
            TranslationKey.from_string(raw)


@pytest.mark.unit
class TestTranslationCatalog:
    """Tests for TranslationCatalog."""

    def test_get_and_set_message(self):
        catalog = make_translation_catalog()
        key = TranslationKey("nav", "contact")
        assert catalog.get_message(key) is None
        catalog.set_message(key, "Contact")
        assert catalog.get_message(key) == "Contact"
        assert catalog.has_message(key) is True

    def test_merge_overrides(self):
        catalog = make_translation_catalog()
        catalog.merge(make_translation_catalog(messages={"nav": {"home": "Start"}}))
        assert catalog.get_namespace("nav") == {"home": "Start", "about": "About"}
