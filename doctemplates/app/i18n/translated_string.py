"""
Localized string value objects.

A ``TranslatedString`` holds one text per supported language and is
resolved explicitly against a ``Language`` at render time. There is no
ambient or global locale: callers thread the active language through
every render call.

Resolution is strict. Requesting a language for which no text was
registered raises ``MissingTranslationError`` instead of silently
falling back, so documents are never shipped with missing labels.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class Language(str, Enum):
    """Languages supported by the document templates."""

    ENGLISH = "en"
    DUTCH = "nl"


class MissingTranslationError(LookupError):
    """Raised when a TranslatedString has no text for the requested language."""


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


class TranslatedString(BaseModel):
    """
    Immutable bilingual string.

    A plain ``str`` validates into a TranslatedString carrying the same
    text for every language; raw user-supplied values (names, free-text
    capacities) therefore pass through verbatim.
    """

    model_config = ConfigDict(frozen=True)

    english: Optional[str] = None
    dutch: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def coerce_plain_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"english": data, "dutch": data}
        return data

    @model_validator(mode="after")
    def require_some_text(self) -> "TranslatedString":
        if self.english is None and self.dutch is None:
            raise ValueError("TranslatedString requires at least one language")
        return self

    @classmethod
    def universal(cls, text: str) -> "TranslatedString":
        return cls(english=text, dutch=text)

    def resolve(self, language: Language) -> str:
        value = self.english if language == Language.ENGLISH else self.dutch
        if value is None:
            raise MissingTranslationError(
                f"No {Language(language).name.lower()} text registered for "
                f"{self!r}"
            )
        return value

    def map(self, transform) -> "TranslatedString":
        """Apply ``transform`` to every registered language."""
        return TranslatedString(
            english=None if self.english is None else transform(self.english),
            dutch=None if self.dutch is None else transform(self.dutch),
        )

    def capitalized(self) -> "TranslatedString":
        return self.map(capitalize_first)

    def upper(self) -> "TranslatedString":
        return self.map(str.upper)
