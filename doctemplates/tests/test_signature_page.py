"""
Tests for the signature page model, section building and HTML output.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from doctemplates.app.i18n import labels
from doctemplates.app.i18n.translated_string import Language
from doctemplates.app.schemas.signature_page import (
    DisplayMode,
    LegalEntity,
    NaturalPerson,
    SignatoryGroup,
    SignaturePage,
    SignatureKind,
    SignatureStyle,
    SignerBlock,
    SignerBlockStyle,
)
from doctemplates.app.services.html import render_document
from doctemplates.app.services.signer_tree import build_signature_sections
from doctemplates.tests.fixtures.signers import (
    entity_with_two_directors,
    four_level_chain,
    signed_block,
)


def _group() -> SignatoryGroup:
    return SignatoryGroup.with_role(
        "Sellers",
        labels.SELLER,
        signers=(
            NaturalPerson.create("Anna Bakker"),
            NaturalPerson.create("Kees Bakker"),
        ),
    )


# ---------------------------------------------------------------------------
# Model validation
# ---------------------------------------------------------------------------

def test_box_style_requires_label():
    with pytest.raises(ValidationError):
        SignatureStyle(kind="box")


def test_non_box_style_rejects_label():
    with pytest.raises(ValidationError):
        SignatureStyle(kind="line", label="Sign here")


def test_duplicate_metadata_keys_rejected():
    with pytest.raises(ValidationError):
        NaturalPerson(
            name="Jane Doe",
            metadata=[
                {"key": "title", "value": "mr."},
                {"key": "title", "value": "dr."},
            ],
        )


def test_signed_replaces_existing_date_and_location():
    block = SignerBlock.signed(
        NaturalPerson.create("Jane Doe"),
        date=date(2026, 10, 19),
        location="Utrecht",
        other={labels.LOCATION.capitalized(): "Amsterdam", "Witness": "Piet"},
    )

    keys = [entry.key.resolve(Language.ENGLISH) for entry in block.metadata]
    assert keys == ["Location", "Witness", "Date"]
    assert block.metadata[0].value.resolve(Language.ENGLISH) == "Utrecht"
    assert block.metadata[2].value.resolve(Language.DUTCH) == "19-10-2026"


def test_signed_replaces_plain_string_date_key():
    block = SignerBlock.signed(
        NaturalPerson.create("Jane Doe"),
        date=date(2026, 10, 19),
        location="Utrecht",
        other={"Date": "01-01-2000", "Witness": "Piet"},
    )

    keys = [entry.key.resolve(Language.ENGLISH) for entry in block.metadata]
    assert keys == ["Date", "Witness", "Location"]
    assert block.metadata[0].key == labels.DATE.capitalized()
    assert block.metadata[0].value.resolve(Language.ENGLISH) == "19-10-2026"


def test_page_validates_from_json_payload():
    page = SignaturePage.model_validate(
        {
            "signatories": [
                {
                    "kind": "signer_block",
                    "signer": {
                        "kind": "legal_entity",
                        "name": "Acme B.V.",
                        "representatives": [
                            {
                                "signer": {
                                    "kind": "natural_person",
                                    "name": "Alice Smit",
                                },
                                "capacity": {"english": "Director", "dutch": "Bestuurder"},
                            }
                        ],
                    },
                    "signature_style": {"kind": "line_with_name"},
                }
            ],
            "display_mode": "columns",
        }
    )

    block = page.signatories[0]
    assert isinstance(block.signer, LegalEntity)
    assert block.signer.representatives[0].capacity == labels.DIRECTOR
    assert page.display_mode == DisplayMode.COLUMNS


def test_with_role_appends_role_entry():
    group = _group()

    assert group.metadata[-1].key == labels.ROLE
    assert group.metadata[-1].value == labels.SELLER


def test_with_role_replaces_existing_role():
    group = SignatoryGroup.with_role(
        "Sellers",
        labels.SELLER,
        signers=(NaturalPerson.create("Anna Bakker"),),
        metadata={"role": "Buyer", "Address": "Straat 1"},
    )

    assert len(group.metadata) == 2
    assert group.metadata[0].key == labels.ROLE
    assert group.metadata[0].value == labels.SELLER


def test_with_role_takes_signature_style():
    group = SignatoryGroup.with_role(
        "Sellers",
        labels.SELLER,
        signers=(NaturalPerson.create("Anna Bakker"),),
        signature_style=SignatureStyle.none(),
    )

    assert group.signature_style.kind == SignatureKind.NONE
    assert _group().signature_style.kind == SignatureKind.LINE


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

def test_grouped_mode_keeps_group_header_and_members():
    page = SignaturePage(
        signatories=(signed_block(entity_with_two_directors()), _group()),
    )
    sections = build_signature_sections(page)

    assert len(sections.groups) == 2
    group = sections.groups[1]
    assert group.name.resolve(Language.ENGLISH) == "Sellers"
    assert [row.key.resolve(Language.ENGLISH) for row in group.metadata_rows] == ["Role"]
    assert [block.root.name for block in group.blocks] == ["Anna Bakker", "Kees Bakker"]
    assert all(block.root.metadata_rows == () for block in group.blocks)


def test_separate_mode_splits_group_members():
    page = SignaturePage(
        signatories=(_group(),),
        display_mode=DisplayMode.SEPARATE_SIGNATORIES,
    )
    sections = build_signature_sections(page)

    assert len(sections.groups) == 2
    for group in sections.groups:
        assert group.name is None
        (block,) = group.blocks
        assert block.title.resolve(Language.ENGLISH) == "Sellers"
        assert [r.key.resolve(Language.ENGLISH) for r in block.root.metadata_rows] == [
            "Role"
        ]


def test_sections_blocks_flatten_in_order():
    page = SignaturePage(
        signatories=(signed_block(four_level_chain()), _group()),
    )

    names = [block.root.name for block in build_signature_sections(page).blocks]
    assert names == ["Operating B.V.", "Anna Bakker", "Kees Bakker"]


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------

def test_html_contains_chain_in_order():
    page = SignaturePage(signatories=(signed_block(four_level_chain()),))
    html = render_document(page, Language.ENGLISH)

    positions = [
        html.index(name)
        for name in ("Operating B.V.", "Management B.V.", "Holding B.V.", "Jan Jansen")
    ]
    assert positions == sorted(positions)
    assert html.count('class="signature-area signature-line"') == 4
    assert html.count("Capacity") == 3
    assert html.count("Represented by") == 3


def test_html_in_dutch_uses_dutch_labels():
    page = SignaturePage(signatories=(signed_block(entity_with_two_directors()),))
    html = render_document(page, Language.DUTCH)

    assert "Ondertekening" in html
    assert "Hoedanigheid" in html
    assert "Bestuurder" in html
    assert "Vertegenwoordigd door" in html
    assert "19-10-2026" in html


def test_html_omits_metadata_table_for_empty_metadata():
    page = SignaturePage(
        signatories=(SignerBlock(signer=NaturalPerson(name="Solo")),),
    )
    html = render_document(page, Language.ENGLISH)

    assert 'class="metadata"' not in html
    assert "Represented by" not in html


def test_html_box_style_and_block_style():
    page = SignaturePage(
        signatories=(
            SignerBlock(
                signer=NaturalPerson(name="Solo"),
                style=SignerBlockStyle.highlighted(),
                signature_style=SignatureStyle.box("Sign here"),
            ),
        ),
    )
    html = render_document(page, Language.ENGLISH)

    assert "Sign here" in html
    assert "background-color: #f9f9f9" in html
    assert "border: 1px solid #999" in html


def test_html_columns_mode_renders_table():
    page = SignaturePage(signatories=(_group(),), display_mode=DisplayMode.COLUMNS)
    html = render_document(page, Language.ENGLISH)

    assert 'class="signature-columns"' in html
    assert "Anna Bakker" in html and "Kees Bakker" in html


def test_html_is_deterministic():
    page = SignaturePage(
        signatories=(signed_block(four_level_chain()), _group()),
        display_mode=DisplayMode.SEPARATE_SIGNATORIES,
    )

    assert render_document(page, Language.ENGLISH) == render_document(
        page, Language.ENGLISH
    )


def test_block_style_presets():
    assert SignerBlockStyle.default() == SignerBlockStyle()
    assert SignerBlockStyle.bordered().show_border is True
    assert SignerBlockStyle.highlighted().background_color == "#f9f9f9"
