"""Tests for infrastructure.i18n.resolvers module."""

from collections import OrderedDict

import pytest

from infrastructure.i18n import (
    LanguageNegotiator,
    PlainText,
    Translated,
    resolve_localized,
)


@pytest.mark.unit
class TestResolveLocalized:
    """Tests for resolve_localized()."""

    @pytest.mark.parametrize("text", ["Pumps", "", "مضخات"])
    def test_plain_string_returned_unchanged(self, text):
        """Plain strings are returned as-is for any language pair."""
        assert resolve_localized(text, "ar", "en") == text
        assert resolve_localized(text, "fr", "de") == text

    def test_none_resolves_to_empty_string(self):
        """None resolves to an empty string."""
        assert resolve_localized(None, "ar", "en") == ""

    def test_requested_language_wins(self):
        """The requested language is used when present."""
        assert resolve_localized({"en": "A", "ar": "ب"}, "ar", "en") == "ب"

    def test_falls_back_to_fallback_language(self):
        """The fallback language is used when the requested one is missing."""
        assert resolve_localized({"en": "A"}, "ar", "en") == "A"

    def test_falls_back_to_first_available(self):
        """Any available language is used as a last resort."""
        assert resolve_localized({"fr": "X"}, "ar", "en") == "X"

    def test_first_available_follows_mapping_order(self):
        """The last-resort value is the first entry in the mapping."""
        content = OrderedDict([("fr", "X"), ("bn", "Y")])
        assert resolve_localized(content, "ar", "en") == "X"

    def test_empty_mapping_resolves_to_empty_string(self):
        """An empty mapping resolves to an empty string."""
        assert resolve_localized({}, "ar", "en") == ""

    def test_explicit_blank_wins_over_fallback(self):
        """An explicit empty string for the requested language is kept."""
        assert resolve_localized({"en": "", "ar": "ب"}, "en", "ar") == ""
        assert resolve_localized({"en": ""}, "en", "ar") == ""

    def test_none_values_count_as_absent(self):
        """A None entry does not block fallback."""
        assert resolve_localized({"ar": None, "en": "A"}, "ar", "en") == "A"
        assert resolve_localized({"ar": None, "fr": "X"}, "ar", "en") == "X"

    def test_fallback_defaults_to_english(self):
        """The fallback language defaults to en."""
        assert resolve_localized({"en": "A", "fr": "X"}, "ar") == "A"

    def test_tagged_values_are_accepted(self):
        """PlainText and Translated values resolve like their raw shapes."""
        assert resolve_localized(PlainText("Pumps"), "ar") == "Pumps"
        assert resolve_localized(Translated({"ar": "ب"}), "ar") == "ب"

    @pytest.mark.parametrize("content", [42, 3.5, ["en"], object()])
    def test_unsupported_shapes_resolve_to_empty_string(self, content):
        """Unknown shapes never raise."""
        assert resolve_localized(content, "ar", "en") == ""

    @pytest.mark.parametrize(
        "content, expected",
        [
            ({"ar": 5, "en": "A"}, "A"),
            ({"ar": {"x": "y"}, "en": "A"}, "A"),
            ({"en": ["A"], "fr": "X"}, "X"),
            ({"ar": 5, "en": 7, "fr": True, "bn": "Y"}, "Y"),
            ({"ar": 5, "en": 7}, ""),
        ],
    )
    def test_non_string_values_count_as_absent(self, content, expected):
        """Numbers, mappings and lists under any key are skipped."""
        result = resolve_localized(content, "ar", "en")
        assert isinstance(result, str)
        assert result == expected

    def test_does_not_mutate_content(self):
        """Resolving leaves the mapping untouched."""
        content = {"en": "A", "ar": "ب"}
        resolve_localized(content, "ar", "en")
        assert content == {"en": "A", "ar": "ب"}


@pytest.mark.unit
class TestLanguageNegotiator:
    """Tests for LanguageNegotiator."""

    def test_matches_language_exact(self):
        assert LanguageNegotiator.matches_language("ar", "ar") is True
        assert LanguageNegotiator.matches_language("AR", "ar") is True

    def test_matches_language_region_ignored_when_not_strict(self):
        assert LanguageNegotiator.matches_language("ar-EG", "ar") is True
        assert LanguageNegotiator.matches_language("ar_EG", "ar") is True
        assert LanguageNegotiator.matches_language("ar-EG", "ar", strict=True) is False

    def test_find_best_match_prefers_exact(self):
        result = LanguageNegotiator.find_best_match(["en-US"], ["en", "en-US"])
        assert result == "en-US"

    def test_find_best_match_language_only(self):
        assert LanguageNegotiator.find_best_match(["ar-EG"], ["en", "ar"]) == "ar"

    def test_find_best_match_skips_empty_entries(self):
        result = LanguageNegotiator.find_best_match([None, "", "ar"], ["en", "ar"])
        assert result == "ar"

    def test_find_best_match_returns_default(self):
        result = LanguageNegotiator.find_best_match(["fr"], ["en", "ar"], default="en")
        assert result == "en"
