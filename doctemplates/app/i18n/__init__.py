from .translated_string import Language, MissingTranslationError, TranslatedString

__all__ = [
    "Language",
    "MissingTranslationError",
    "TranslatedString",
]
