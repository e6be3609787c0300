"""
Human-readable enumerations.

Turns ``["a", "b", "c"]`` into ``["a; ", "b; and ", "c,"]`` so that the
joined result reads as a sentence fragment. Separators are localized
values and are resolved against the language supplied by the caller.

Elements that already end with the separator they would receive are
left untouched, which makes the operation idempotent.
"""

from typing import List, Optional, Sequence

from doctemplates.app.i18n import labels
from doctemplates.app.i18n.translated_string import Language, TranslatedString


def _ensure_suffix(element: str, suffix: str) -> str:
    return element if element.endswith(suffix) else element + suffix


def appending_separators(
    items: Sequence[str],
    language: Language,
    *,
    separator: TranslatedString = TranslatedString.universal(";"),
    before_last: Optional[TranslatedString] = labels.AND,
    at_end: TranslatedString = TranslatedString.universal(","),
) -> List[str]:
    if not items:
        return []

    standard = separator.resolve(language)
    last = at_end.resolve(language)

    if len(items) == 1:
        return [_ensure_suffix(items[0], last)]

    result: List[str] = []
    for index, element in enumerate(items):
        if index == len(items) - 1:
            result.append(_ensure_suffix(element, last))
        elif index == len(items) - 2:
            if before_last is not None:
                result.append(
                    _ensure_suffix(
                        element, f"{standard} {before_last.resolve(language)} "
                    )
                )
            else:
                result.append(_ensure_suffix(element, standard))
        else:
            result.append(_ensure_suffix(element, f"{standard} "))
    return result
