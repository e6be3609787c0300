"""
Business letter.

A letter has a header (recipient block on the left, sender block on the
right), an optional place/date line, an optional subject line, a
salutation and a body. Invoices and invitations reuse the same header
by converting their parties into ``LetterSender``/``LetterRecipient``.
"""

from datetime import date
from typing import Any, ClassVar, Dict, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from doctemplates.app.i18n import labels
from doctemplates.app.i18n.translated_string import Language, TranslatedString
from doctemplates.app.schemas.base import DocumentModel
from doctemplates.app.schemas.metadata import Metadata, MetadataEntry, metadata_from
from doctemplates.app.utils.separators import appending_separators


_FROZEN = ConfigDict(frozen=True, extra="forbid")


class LetterSender(BaseModel):
    model_config = _FROZEN

    name: str
    address: Tuple[str, ...] = ()
    metadata: Metadata = ()

    @classmethod
    def create(
        cls,
        name: str,
        address: Sequence[str] = (),
        *,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        website: Optional[str] = None,
        kvk: Optional[str] = None,
        btw: Optional[str] = None,
        iban: Optional[str] = None,
        on_behalf_of: Optional[str] = None,
    ) -> "LetterSender":
        return cls(
            name=name,
            address=tuple(address),
            metadata=metadata_from(
                (labels.PHONE, phone),
                (labels.EMAIL, email),
                (labels.WEBSITE, website),
                (labels.KVK, kvk),
                (labels.BTW, btw),
                (labels.IBAN, iban),
                (labels.ON_BEHALF_OF_KEY, on_behalf_of),
            ),
        )


class LetterRecipient(BaseModel):
    model_config = _FROZEN

    name: str
    address: Tuple[str, ...] = ()
    metadata: Metadata = ()

    @classmethod
    def with_emails(
        cls,
        name: str,
        address: Sequence[str],
        emails: Sequence[str],
    ) -> "LetterRecipient":
        """Recipient addressed by email; the addresses read as one list."""

        def joined(language: Language) -> str:
            return "".join(
                appending_separators(
                    list(emails),
                    language,
                    separator=TranslatedString.universal(","),
                    at_end=TranslatedString.universal(""),
                )
            )

        sent_to = TranslatedString(
            english=joined(Language.ENGLISH),
            dutch=joined(Language.DUTCH),
        )
        return cls(
            name=name,
            address=tuple(address),
            metadata=(MetadataEntry(key=labels.PER_EMAIL, value=sent_to),),
        )


class LetterHeader(BaseModel):
    """Parties, place, date and subject printed above a letter body."""

    model_config = _FROZEN

    sender: LetterSender
    recipient: LetterRecipient
    location: Optional[str] = None
    sending_date: Optional[date] = None
    subject: Optional[TranslatedString] = None


class Letter(DocumentModel):
    template_path: ClassVar[str] = "letter/main.html.jinja"

    sender: LetterSender
    recipient: LetterRecipient
    location: Optional[str] = None
    sending_date: Optional[date] = None
    signature_date: Optional[date] = None
    subject: Optional[str] = None
    salutation: TranslatedString = labels.SALUTATION
    paragraphs: Tuple[str, ...] = ()

    def render_context(self) -> Dict[str, Any]:
        return {
            "document": self,
            "header": LetterHeader(
                sender=self.sender,
                recipient=self.recipient,
                location=self.location,
                sending_date=self.sending_date,
                subject=self.subject,
            ),
        }

    def document_title(self, language: Language) -> str:
        return self.subject or self.recipient.name
