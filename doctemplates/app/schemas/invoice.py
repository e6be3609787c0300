"""
Invoice model and row aggregation.

Amounts are ``Decimal`` end to end. Binary floating point is never used
for currency: a float supplied by a caller is rejected at validation
time rather than silently converted.

Aggregates are left-to-right folds over the row list starting at
``Decimal("0")``, so totals are reproducible for a given row order.
Rounding to cents happens only when an amount is formatted for display.
"""

from datetime import date
from decimal import Decimal
from typing import Annotated, Any, ClassVar, Dict, Literal, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, WithJsonSchema

from doctemplates.app.i18n import labels
from doctemplates.app.i18n.formatting import format_euro, format_long_date
from doctemplates.app.i18n.translated_string import Language, TranslatedString
from doctemplates.app.schemas.base import DocumentModel
from doctemplates.app.schemas.letter import LetterHeader, LetterRecipient, LetterSender
from doctemplates.app.schemas.metadata import Metadata


_FROZEN = ConfigDict(frozen=True, extra="forbid")

ZERO = Decimal("0")


def _reject_float(value: Any) -> Any:
    if isinstance(value, float):
        raise ValueError(
            "Currency amounts must be given as Decimal, int or str, not float"
        )
    return value


DECIMAL_PATTERN = r"^-?\d+(\.\d+)?$"

# JSON numbers with a fraction decode to float and are rejected, so the
# published schema only offers integers and decimal strings.
ExactDecimal = Annotated[
    Decimal,
    BeforeValidator(_reject_float),
    WithJsonSchema(
        {
            "anyOf": [
                {"type": "integer"},
                {"type": "string", "pattern": DECIMAL_PATTERN},
            ]
        }
    ),
]


class Percentage(BaseModel):
    """A percentage stored as its exact fraction (21% -> 0.21)."""

    model_config = _FROZEN

    fraction: ExactDecimal = Field(..., ge=0)

    @classmethod
    def of(cls, percent: Union[int, str, Decimal]) -> "Percentage":
        return cls(fraction=Decimal(percent) / Decimal(100))

    @property
    def percent(self) -> Decimal:
        return self.fraction * 100


VAT_REGULAR_DUTCH = Percentage(fraction=Decimal("0.21"))
VAT_REDUCED_DUTCH = Percentage(fraction=Decimal("0.09"))


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------


def _vat_fraction(vat: Optional[Percentage]) -> Decimal:
    return vat.fraction if vat is not None else ZERO


class GoodsRow(BaseModel):
    model_config = _FROZEN

    kind: Literal["goods"] = "goods"
    description: str
    quantity: ExactDecimal
    unit: str
    rate: ExactDecimal
    vat_rate: Optional[Percentage] = None

    @property
    def total(self) -> Decimal:
        return self.quantity * self.rate

    @property
    def total_vat(self) -> Decimal:
        return self.total * _vat_fraction(self.vat_rate)

    @property
    def amount(self) -> Decimal:
        return self.quantity

    @property
    def unit_label(self) -> TranslatedString:
        return TranslatedString.universal(self.unit)

    @property
    def unit_rate(self) -> Decimal:
        return self.rate

    @property
    def vat_fraction(self) -> Decimal:
        return _vat_fraction(self.vat_rate)


class ServiceRow(BaseModel):
    model_config = _FROZEN

    kind: Literal["service"] = "service"
    description: str
    hours: ExactDecimal
    hourly_rate: ExactDecimal
    vat: Optional[Percentage] = None

    @property
    def total(self) -> Decimal:
        return self.hours * self.hourly_rate

    @property
    def total_vat(self) -> Decimal:
        return self.total * _vat_fraction(self.vat)

    @property
    def amount(self) -> Decimal:
        return self.hours

    @property
    def unit_label(self) -> TranslatedString:
        label = labels.HOUR if self.hours <= 1 else labels.HOURS
        return label.capitalized()

    @property
    def unit_rate(self) -> Decimal:
        return self.hourly_rate

    @property
    def vat_fraction(self) -> Decimal:
        return _vat_fraction(self.vat)


InvoiceRow = Annotated[Union[GoodsRow, ServiceRow], Field(discriminator="kind")]


class InvoiceTotals(BaseModel):
    model_config = _FROZEN

    excluding_vat: Decimal
    vat: Decimal
    including_vat: Decimal


def total_excluding_vat(rows: Sequence[InvoiceRow]) -> Decimal:
    result = ZERO
    for row in rows:
        result += row.total
    return result


def total_vat(rows: Sequence[InvoiceRow]) -> Decimal:
    result = ZERO
    for row in rows:
        result += row.total_vat
    return result


def total_including_vat(rows: Sequence[InvoiceRow]) -> Decimal:
    return total_excluding_vat(rows) + total_vat(rows)


def aggregate(rows: Sequence[InvoiceRow]) -> InvoiceTotals:
    excluding = total_excluding_vat(rows)
    vat = total_vat(rows)
    return InvoiceTotals(
        excluding_vat=excluding,
        vat=vat,
        including_vat=excluding + vat,
    )


# ---------------------------------------------------------------------------
# Parties
# ---------------------------------------------------------------------------


class InvoiceSender(BaseModel):
    model_config = _FROZEN

    name: str
    address: Tuple[str, ...]
    phone: str
    email: str
    website: str
    kvk: str
    btw: str
    iban: str

    def as_letter_sender(self) -> LetterSender:
        return LetterSender.create(
            name=self.name,
            address=self.address,
            phone=self.phone,
            email=self.email,
            website=self.website,
            kvk=self.kvk,
            btw=self.btw,
            iban=self.iban,
        )


class InvoiceRecipient(BaseModel):
    model_config = _FROZEN

    id: str
    name: str
    address: Tuple[str, ...]
    metadata: Metadata = ()

    def as_letter_recipient(self) -> LetterRecipient:
        return LetterRecipient(
            name=self.name,
            address=self.address,
            metadata=self.metadata,
        )


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------


class Invoice(DocumentModel):
    template_path: ClassVar[str] = "invoice/main.html.jinja"

    sender: InvoiceSender
    client: InvoiceRecipient
    invoice_number: str = Field(..., min_length=1)
    invoice_date: date
    expiry_date: Optional[date] = None
    metadata: Metadata = ()
    rows: Tuple[InvoiceRow, ...] = ()

    @property
    def reference(self) -> str:
        return f"{self.client.id}-{self.invoice_number}"

    @property
    def totals(self) -> InvoiceTotals:
        return aggregate(self.rows)

    def payment_request(self, language: Language) -> str:
        """Opening of the payment sentence, up to the IBAN."""
        parts = [
            labels.PLEASE_TRANSFER.resolve(language),
            format_euro(total_including_vat(self.rows)),
        ]
        if self.expiry_date is not None:
            parts += [
                labels.BY.resolve(language),
                format_long_date(self.expiry_date, language),
            ]
            if language == Language.ENGLISH:
                parts[-1] += ","
        parts.append(labels.TO.resolve(language))
        return " ".join(parts)

    def render_context(self) -> Dict[str, Any]:
        return {
            "document": self,
            "header": LetterHeader(
                sender=self.sender.as_letter_sender(),
                recipient=self.client.as_letter_recipient(),
            ),
            "totals": self.totals,
        }

    def document_title(self, language: Language) -> str:
        title = labels.INVOICE.capitalized().resolve(language)
        return f"{title} {self.reference}"
