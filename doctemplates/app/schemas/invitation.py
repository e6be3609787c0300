from datetime import date
from typing import Any, ClassVar, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

from doctemplates.app.i18n import labels
from doctemplates.app.i18n.formatting import format_long_date
from doctemplates.app.i18n.translated_string import Language
from doctemplates.app.schemas.base import DocumentModel
from doctemplates.app.schemas.letter import LetterHeader, LetterRecipient, LetterSender
from doctemplates.app.schemas.metadata import Metadata


_FROZEN = ConfigDict(frozen=True, extra="forbid")


class InvitationSender(BaseModel):
    model_config = _FROZEN

    name: str
    address: Tuple[str, ...] = ()
    phone: str
    email: str
    website: str

    def as_letter_sender(self) -> LetterSender:
        return LetterSender.create(
            name=self.name,
            address=self.address,
            phone=self.phone,
            email=self.email,
            website=self.website,
        )


class InvitationRecipient(BaseModel):
    model_config = _FROZEN

    id: str
    name: str
    address: Tuple[str, ...] = ()
    metadata: Metadata = ()

    def as_letter_recipient(self) -> LetterRecipient:
        return LetterRecipient(
            name=self.name,
            address=self.address,
            metadata=self.metadata,
        )


class Invitation(DocumentModel):
    """Event invitation, laid out as a letter with an invitation header."""

    template_path: ClassVar[str] = "invitation/main.html.jinja"

    sender: InvitationSender
    recipient: InvitationRecipient
    invitation_number: str = Field(..., min_length=1)
    invitation_date: date
    event_date: date
    location: str
    metadata: Metadata = ()

    @property
    def reference(self) -> str:
        return f"{self.recipient.id}-{self.invitation_number}"

    def invitation_sentence(self, language: Language) -> str:
        return labels.INVITATION_SENTENCE.resolve(language).format(
            date=format_long_date(self.event_date, language),
            location=self.location,
        )

    def render_context(self) -> Dict[str, Any]:
        return {
            "document": self,
            "header": LetterHeader(
                sender=self.sender.as_letter_sender(),
                recipient=self.recipient.as_letter_recipient(),
                location=self.location,
                sending_date=self.invitation_date,
                subject=labels.EVENT_INVITATION,
            ),
        }

    def document_title(self, language: Language) -> str:
        title = labels.INVITATION.resolve(language)
        return f"{title} {self.reference}"
