"""
Display formatting for amounts and dates.

Formatting is presentation-only. Amounts are rounded to cents here and
nowhere else; all arithmetic upstream stays exact.
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from doctemplates.app.i18n.translated_string import (
    Language,
    TranslatedString,
    capitalize_first,
)

__all__ = [
    "capitalize_first",
    "format_euro",
    "format_long_date",
    "format_numeric_date",
    "format_percentage",
    "numeric_date_string",
]

CENT = Decimal("0.01")

_MONTHS = {
    Language.ENGLISH: (
        "January", "February", "March", "April", "May", "June", "July",
        "August", "September", "October", "November", "December",
    ),
    Language.DUTCH: (
        "januari", "februari", "maart", "april", "mei", "juni", "juli",
        "augustus", "september", "oktober", "november", "december",
    ),
}


def format_euro(amount: Decimal) -> str:
    """
    Format an amount as euros in the Dutch convention (``€ 1.234,56``).

    Invoices are issued in the nl_NL currency format regardless of the
    document language.
    """
    quantized = Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    grouped = f"{abs(quantized):,.2f}"
    dutch = grouped.replace(",", "\x00").replace(".", ",").replace("\x00", ".")
    sign = "-" if quantized < 0 else ""
    return f"€ {sign}{dutch}"


def format_percentage(fraction: Decimal) -> str:
    percent = (Decimal(fraction) * 100).normalize()
    # normalize() turns 100 into 1E+2
    text = format(percent, "f")
    return f"{text}%"


def format_long_date(value: date, language: Language) -> str:
    month = _MONTHS[Language(language)][value.month - 1]
    if language == Language.ENGLISH:
        return f"{month} {value.day}, {value.year}"
    return f"{value.day} {month} {value.year}"


def format_numeric_date(value: date, language: Language) -> str:
    if language == Language.ENGLISH:
        return f"{value.month}/{value.day}/{value.year}"
    return f"{value.day}-{value.month}-{value.year}"


def numeric_date_string(value: date) -> TranslatedString:
    """Numeric date rendered per language, for use as a metadata value."""
    return TranslatedString(
        english=format_numeric_date(value, Language.ENGLISH),
        dutch=format_numeric_date(value, Language.DUTCH),
    )
