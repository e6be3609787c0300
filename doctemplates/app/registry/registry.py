"""
Document template registry.

Each entry binds a public template identifier (slug) to the document
model that validates its payload. The model also names the Jinja
template it is rendered with.

Templates must be registered here to be addressable via the API.
"""

from typing import Dict, Type

from pydantic import BaseModel, ConfigDict

from doctemplates.app.schemas.agenda import Agenda
from doctemplates.app.schemas.attendance_list import AttendanceList
from doctemplates.app.schemas.base import DocumentModel
from doctemplates.app.schemas.invitation import Invitation
from doctemplates.app.schemas.invoice import Invoice
from doctemplates.app.schemas.letter import Letter
from doctemplates.app.schemas.signature_page import SignaturePage


class TemplateEntry(BaseModel):
    """Declarative description of a document template."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    slug: str
    document_class: Type[DocumentModel]
    description: str

    @property
    def template_path(self) -> str:
        return self.document_class.template_path


def _entry(slug: str, document_class: Type[DocumentModel], description: str) -> TemplateEntry:
    return TemplateEntry(
        slug=slug, document_class=document_class, description=description
    )


TEMPLATE_REGISTRY: Dict[str, TemplateEntry] = {
    entry.slug: entry
    for entry in (
        _entry(
            "agenda",
            Agenda,
            "Meeting agenda. Short variant lists the subjects; the full "
            "variant adds a subtitle and an introductory header. "
            "Important items are highlighted.",
        ),
        _entry(
            "attendance-list",
            AttendanceList,
            "Attendance list with last name, first name, role and "
            "signature columns. Blank rows are padded for handwriting.",
        ),
        _entry(
            "letter",
            Letter,
            "Business letter with recipient and sender blocks, place and "
            "date line, subject, salutation and body paragraphs.",
        ),
        _entry(
            "invoice",
            Invoice,
            "Invoice laid out as a letter: invoice header table, goods and "
            "service rows with VAT, exact totals and a payment request.",
        ),
        _entry(
            "invitation",
            Invitation,
            "Event invitation laid out as a letter with invitation number, "
            "dates, location and the invitation sentence.",
        ),
        _entry(
            "signature-page",
            SignaturePage,
            "Signature page for legal agreements. Supports natural persons "
            "and legal entities with nested representation chains, "
            "signatory groups and several signature styles.",
        ),
    )
}
