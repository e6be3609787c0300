"""
Ordered metadata.

Metadata rows are rendered in the exact order the caller supplied them,
so they are stored as an ordered tuple of entries rather than a hash
map. A mapping is accepted on input (its insertion order is kept) and a
list of ``{"key": ..., "value": ...}`` objects is accepted from JSON.

Keys are unique per metadata collection.
"""

from collections.abc import Mapping
from typing import Annotated, Any, Tuple

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict

from doctemplates.app.i18n.translated_string import TranslatedString


class MetadataEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: TranslatedString
    value: TranslatedString


def _entries_from_mapping(value: Any) -> Any:
    if isinstance(value, Mapping):
        return [{"key": key, "value": item} for key, item in value.items()]
    return value


def _unique_keys(entries: Tuple[MetadataEntry, ...]) -> Tuple[MetadataEntry, ...]:
    seen = set()
    for entry in entries:
        if entry.key in seen:
            raise ValueError(f"Duplicate metadata key: {entry.key!r}")
        seen.add(entry.key)
    return entries


Metadata = Annotated[
    Tuple[MetadataEntry, ...],
    BeforeValidator(_entries_from_mapping),
    AfterValidator(_unique_keys),
]


def metadata_from(*pairs: Tuple[Any, Any]) -> Tuple[MetadataEntry, ...]:
    """Build metadata from ``(key, value)`` pairs, skipping ``None`` values."""
    return _unique_keys(
        tuple(
            MetadataEntry(key=key, value=value)
            for key, value in pairs
            if value is not None
        )
    )


def _same_key(key: TranslatedString, other: TranslatedString) -> bool:
    if key == other:
        return True
    return (
        key.english is not None
        and other.english is not None
        and key.english.casefold() == other.english.casefold()
    )


def with_entry(
    entries: Tuple[MetadataEntry, ...],
    key: TranslatedString,
    value: Any,
) -> Tuple[MetadataEntry, ...]:
    """
    Return ``entries`` with ``key`` set to ``value``.

    An entry whose key has the same English text as ``key`` (ignoring
    case) is replaced in place, so a plain ``"Date"`` key and the
    bilingual date label count as the same row. Without a match the new
    entry is appended.
    """
    replacement = MetadataEntry(key=key, value=value)
    result = []
    placed = False
    for entry in entries:
        if not _same_key(entry.key, key):
            result.append(entry)
        elif not placed:
            result.append(replacement)
            placed = True
    if not placed:
        result.append(replacement)
    return tuple(result)
