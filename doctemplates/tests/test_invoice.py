"""
Tests for invoice rows, exact aggregation and invoice HTML.
"""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from doctemplates.app.i18n.translated_string import Language
from doctemplates.app.schemas.invoice import (
    VAT_REGULAR_DUTCH,
    GoodsRow,
    Percentage,
    ServiceRow,
    aggregate,
    total_excluding_vat,
    total_including_vat,
    total_vat,
)
from doctemplates.app.services.html import render_document
from doctemplates.tests.fixtures.documents import mixed_rows, service_invoice


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------

def test_service_row_totals():
    row = ServiceRow(
        description="Consulting",
        hours=Decimal("160"),
        hourly_rate=Decimal("140.00"),
        vat=VAT_REGULAR_DUTCH,
    )

    assert row.total == Decimal("22400.00")
    assert row.total_vat == Decimal("4704.00")


def test_missing_vat_counts_as_zero():
    row = GoodsRow(description="Book", quantity=3, unit="piece", rate="12.50")

    assert row.total == Decimal("37.50")
    assert row.total_vat == Decimal("0")


def test_float_amounts_are_rejected():
    with pytest.raises(ValidationError):
        GoodsRow(description="Book", quantity=1, unit="piece", rate=12.5)


def test_percentage_of():
    assert Percentage.of(21) == VAT_REGULAR_DUTCH
    assert Percentage.of("9").fraction == Decimal("0.09")


def test_negative_quantities_are_allowed():
    row = GoodsRow(description="Credit", quantity=-1, unit="piece", rate="50")

    assert row.total == Decimal("-50")


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def test_service_invoice_totals_are_exact():
    rows = service_invoice().rows

    assert total_excluding_vat(rows) == Decimal("22400.00")
    assert total_vat(rows) == Decimal("4704.00")
    assert total_including_vat(rows) == Decimal("27104.00")


def test_mixed_rows_totals():
    totals = aggregate(mixed_rows())

    assert totals.excluding_vat == Decimal("1100")
    assert totals.vat == Decimal("231")
    assert totals.including_vat == Decimal("1331")


def test_empty_rows_total_zero():
    totals = aggregate(())

    assert totals.excluding_vat == Decimal("0")
    assert totals.vat == Decimal("0")
    assert totals.including_vat == Decimal("0")


def test_aggregation_does_not_drift():
    row = GoodsRow(
        description="Cent item",
        quantity=1,
        unit="piece",
        rate="0.10",
        vat_rate=VAT_REGULAR_DUTCH,
    )

    assert total_excluding_vat((row,) * 10) == Decimal("1.00")
    assert total_vat((row,) * 10) == Decimal("0.2100")


# ---------------------------------------------------------------------------
# Invoice document
# ---------------------------------------------------------------------------

def test_reference_joins_client_and_invoice_number():
    assert service_invoice().reference == "CLIENT-001-0001"


def test_payment_request_mentions_expiry_date():
    invoice = service_invoice(expiry_date=date(2026, 10, 31))

    assert invoice.payment_request(Language.ENGLISH) == (
        "Please transfer the total amount of € 27.104,00 by October 31, 2026, to"
    )
    assert invoice.payment_request(Language.DUTCH) == (
        "Wij verzoeken u vriendelijk het totaalbedrag van € 27.104,00 "
        "uiterlijk 31 oktober 2026 over te maken naar"
    )


def test_payment_request_without_expiry_date():
    assert service_invoice().payment_request(Language.ENGLISH) == (
        "Please transfer the total amount of € 27.104,00 to"
    )


def test_invoice_html():
    html = render_document(service_invoice(), Language.ENGLISH)

    assert "<h1>Invoice</h1>" in html
    assert "CLIENT-001" in html
    assert "€ 22.400,00" in html
    assert "€ 4.704,00" in html
    assert "€ 27.104,00" in html
    assert "€ 140,00" in html
    assert "21%" in html
    assert "Hours" in html
    assert "NLBUNG12345678" in html
    assert "referencing CLIENT-001-0001." in html


def test_invoice_html_in_dutch():
    html = render_document(
        service_invoice(expiry_date=date(2026, 10, 31)),
        Language.DUTCH,
    )

    assert "<h1>Factuur</h1>" in html
    assert "Vervaldatum" in html
    assert "31 oktober 2026" in html
    assert "Bedrag excl. BTW" in html
    assert "onder vermelding van CLIENT-001-0001." in html
