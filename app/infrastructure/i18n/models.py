"""Translation models for i18n system.

Defines the content-side ``LocalizedText`` union, the ``Language`` record
served by the portal API, and the UI catalog structures.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union


@dataclass(frozen=True)
class PlainText:
    """A field that holds one string for every language.

    Legacy content and already-resolved values arrive in this shape.
    """

    value: str


@dataclass(frozen=True)
class Translated:
    """A field that holds one string per language code.

    Attributes:
        values: Mapping of language code (e.g. "en", "ar", "bn") to text.
            Iteration order is the order the API sent the keys in.
    """

    values: Mapping[str, Optional[str]] = field(default_factory=dict)

    def get(self, language: str) -> Optional[str]:
        """Return the text for a language, or None when absent."""
        return self.values.get(language)

    @property
    def languages(self) -> List[str]:
        """Language codes carrying a value, in insertion order."""
        return [code for code, text in self.values.items() if text is not None]


LocalizedText = Union[PlainText, Translated]


def as_localized_text(raw: Any) -> Optional[LocalizedText]:
    """Convert a raw API value into the LocalizedText union.

    Args:
        raw: A string, a mapping of language code to string, an existing
            PlainText/Translated value, or None.

    Returns:
        PlainText for strings, Translated for mappings, the value itself
        when already tagged, and None for None.

    Raises:
        TypeError: If raw is any other shape.
    """
    if raw is None or isinstance(raw, (PlainText, Translated)):
        return raw
    if isinstance(raw, str):
        return PlainText(raw)
    if isinstance(raw, Mapping):
        return Translated(dict(raw))
    raise TypeError(f"Unsupported localized value: {type(raw).__name__}")


@dataclass(frozen=True)
class Language:
    """A language offered by the portal.

    Attributes:
        code: Language code used as the key in Translated values (e.g. "ar").
        name: English name (e.g. "Arabic").
        native_name: Name in the language itself (e.g. "العربية").
        is_rtl: True for right-to-left scripts.
    """

    code: str
    name: str
    native_name: str
    is_rtl: bool = False

    @property
    def direction(self) -> str:
        """Text direction attribute value ("rtl" or "ltr")."""
        return "rtl" if self.is_rtl else "ltr"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Language":
        """Build a Language from an API payload.

        Args:
            data: Mapping with at least ``code`` and ``name``.

        Returns:
            Language instance.

        Raises:
            KeyError: If ``code`` or ``name`` is missing.
        """
        name = data["name"]
        return cls(
            code=data["code"],
            name=name,
            native_name=data.get("native_name") or name,
            is_rtl=bool(data.get("is_rtl", False)),
        )


@dataclass(frozen=True)
class DocumentAttributes:
    """Document-level attributes that follow the selected language.

    Attributes:
        lang: Value of the document ``lang`` attribute.
        dir: Value of the document ``dir`` attribute ("ltr" or "rtl").
        body_classes: CSS classes on the body, including ``lang-<code>``.
    """

    lang: str = "en"
    dir: str = "ltr"
    body_classes: tuple = ()

    def for_language(self, language: Language) -> "DocumentAttributes":
        """Return attributes switched to another language.

        Any previous ``lang-*`` body class is replaced; other classes are kept.
        """
        classes = tuple(c for c in self.body_classes if not c.startswith("lang-"))
        return DocumentAttributes(
            lang=language.code,
            dir=language.direction,
            body_classes=classes + (f"lang-{language.code}",),
        )


@dataclass(frozen=True)
class TranslationKey:
    """Represents a translation key for accessing UI catalog messages.

    Keys are hierarchical (e.g., "nav.home", "common.save").
    Frozen to ensure immutability and hashability for caching.

    Attributes:
        namespace: Top-level namespace (e.g., "nav", "contact").
        message_key: Specific message identifier (e.g., "home", "send").
    """

    namespace: str
    message_key: str

    def __str__(self) -> str:
        """Return full dot-separated key path.

        Returns:
            Full key (e.g., "nav.home").
        """
        return f"{self.namespace}.{self.message_key}"

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from dot-separated string.

        Args:
            key_string: Dot-separated key (e.g., "nav.home").

        Returns:
            TranslationKey instance.

        Raises:
            ValueError: If key_string does not contain a dot.
        """
        parts = key_string.split(".", 1)
        if len(parts) != 2 or not all(parts):
            raise ValueError(
                f"Translation key must be in format 'namespace.key': {key_string}"
            )
        return cls(namespace=parts[0], message_key=parts[1])


@dataclass
class TranslationCatalog:
    """Container for UI messages in a single language.

    Attributes:
        language: Language code this catalog is for.
        messages: Nested dict structure {namespace: {key: message_string}}.
        loaded_at: Timestamp (ISO 8601) when translations were loaded.
    """

    language: str
    messages: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def get_message(self, key: TranslationKey) -> Optional[str]:
        """Retrieve a message by key.

        Args:
            key: TranslationKey with namespace and message_key.

        Returns:
            Message string, or None if not found.
        """
        return self.get_namespace(key.namespace).get(key.message_key)

    def set_message(self, key: TranslationKey, message: str) -> None:
        """Set a message.

        Args:
            key: TranslationKey with namespace and message_key.
            message: Translated message string.
        """
        self.messages.setdefault(key.namespace, {})[key.message_key] = message

    def has_message(self, key: TranslationKey) -> bool:
        """Check if a message exists for the given key."""
        return key.message_key in self.get_namespace(key.namespace)

    def get_namespace(self, namespace: str) -> Dict[str, Any]:
        """Get all messages for a specific namespace.

        Args:
            namespace: Namespace identifier (e.g., "nav").

        Returns:
            Dictionary of all messages in namespace.
        """
        return self.messages.get(namespace, {})

    def merge(self, other: "TranslationCatalog") -> None:
        """Merge another catalog into this one.

        Later entries override earlier ones.

        Args:
            other: TranslationCatalog to merge.
        """
        for namespace, messages in other.messages.items():
            self.messages.setdefault(namespace, {}).update(messages)
