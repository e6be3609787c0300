"""
Signatory model for signature pages.

A ``Signer`` is a tagged union of ``NaturalPerson`` and ``LegalEntity``.
Both variants may be represented by one or more ``Representative``
objects, each of which owns exactly one nested ``Signer``. This allows
delegation chains such as::

    Operating B.V. -> Management B.V. -> Holding B.V. -> natural person

All models are frozen and hold their children by value. A signer tree is
therefore built bottom-up and cannot contain itself: the structure is a
tree by construction and the renderer performs no cycle detection.

Block-level metadata (typically signing date and location) lives on the
``SignerBlock`` and is distinct from the per-signer metadata (title,
position, registration number) carried by every node of the tree.
"""

from __future__ import annotations

from datetime import date as Date
from enum import Enum
from typing import Annotated, Any, ClassVar, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from doctemplates.app.i18n import labels
from doctemplates.app.i18n.formatting import numeric_date_string
from doctemplates.app.i18n.translated_string import Language, TranslatedString
from doctemplates.app.schemas.base import DocumentModel
from doctemplates.app.schemas.metadata import Metadata, metadata_from, with_entry


_FROZEN = ConfigDict(frozen=True, extra="forbid")


# ---------------------------------------------------------------------------
# Signers
# ---------------------------------------------------------------------------


class NaturalPerson(BaseModel):
    model_config = _FROZEN

    kind: Literal["natural_person"] = "natural_person"
    name: str
    metadata: Metadata = ()
    representatives: Tuple[Representative, ...] = ()

    @classmethod
    def create(
        cls,
        name: str,
        *,
        title: Optional[str] = None,
        position: Optional[str] = None,
        date_of_birth: Optional[str] = None,
        representatives: Tuple[Representative, ...] = (),
    ) -> "NaturalPerson":
        return cls(
            name=name,
            metadata=metadata_from(
                (labels.TITLE, title),
                (labels.POSITION, position),
                (labels.DATE_OF_BIRTH, date_of_birth),
            ),
            representatives=representatives,
        )


class LegalEntity(BaseModel):
    model_config = _FROZEN

    kind: Literal["legal_entity"] = "legal_entity"
    name: str
    metadata: Metadata = ()
    representatives: Tuple[Representative, ...] = ()

    @classmethod
    def create(
        cls,
        name: str,
        *,
        registration_number: Optional[str] = None,
        business_address: Optional[str] = None,
        representatives: Tuple[Representative, ...] = (),
    ) -> "LegalEntity":
        return cls(
            name=name,
            metadata=metadata_from(
                (labels.REGISTRATION_NUMBER, registration_number),
                (labels.BUSINESS_ADDRESS, business_address),
            ),
            representatives=representatives,
        )


Signer = Annotated[Union[NaturalPerson, LegalEntity], Field(discriminator="kind")]


class Representative(BaseModel):
    """A signer acting on behalf of another signer, in a stated capacity."""

    model_config = _FROZEN

    signer: Signer
    capacity: TranslatedString


NaturalPerson.model_rebuild()
LegalEntity.model_rebuild()
Representative.model_rebuild()


# ---------------------------------------------------------------------------
# Presentation options
# ---------------------------------------------------------------------------


class SignatureKind(str, Enum):
    LINE = "line"
    BOX = "box"
    LINE_WITH_NAME = "line_with_name"
    NONE = "none"
    IMAGE_PLACEHOLDER = "image_placeholder"


class SignatureStyle(BaseModel):
    """
    How every signature area emitted for a block is drawn.

    The style is selected once per block and applied uniformly; it is not
    a state machine and carries no state between areas.
    """

    model_config = _FROZEN

    kind: SignatureKind = SignatureKind.LINE
    label: Optional[TranslatedString] = None

    @model_validator(mode="after")
    def label_only_for_box(self) -> "SignatureStyle":
        if self.kind == SignatureKind.BOX and self.label is None:
            raise ValueError("A box signature style requires a label")
        if self.kind != SignatureKind.BOX and self.label is not None:
            raise ValueError(f"Signature style '{self.kind.value}' takes no label")
        return self

    @classmethod
    def line(cls) -> "SignatureStyle":
        return cls(kind=SignatureKind.LINE)

    @classmethod
    def box(cls, label: Union[str, TranslatedString]) -> "SignatureStyle":
        return cls(kind=SignatureKind.BOX, label=label)

    @classmethod
    def line_with_name(cls) -> "SignatureStyle":
        return cls(kind=SignatureKind.LINE_WITH_NAME)

    @classmethod
    def none(cls) -> "SignatureStyle":
        return cls(kind=SignatureKind.NONE)

    @classmethod
    def image_placeholder(cls) -> "SignatureStyle":
        return cls(kind=SignatureKind.IMAGE_PLACEHOLDER)


class SignerBlockStyle(BaseModel):
    model_config = _FROZEN

    show_border: bool = False
    background_color: Optional[str] = None
    padding: int = Field(10, ge=0)
    metadata_column_width: int = Field(80, gt=0)

    @classmethod
    def default(cls) -> "SignerBlockStyle":
        return cls()

    @classmethod
    def bordered(cls) -> "SignerBlockStyle":
        return cls(show_border=True)

    @classmethod
    def highlighted(cls) -> "SignerBlockStyle":
        return cls(show_border=True, background_color="#f9f9f9")


# ---------------------------------------------------------------------------
# Blocks and groups
# ---------------------------------------------------------------------------


_metadata_adapter = TypeAdapter(Metadata)


class SignerBlock(BaseModel):
    """Rendering wrapper around exactly one top-level signer."""

    model_config = _FROZEN

    kind: Literal["signer_block"] = "signer_block"
    title: Optional[TranslatedString] = None
    signer: Signer
    metadata: Metadata = ()
    style: SignerBlockStyle = Field(default_factory=SignerBlockStyle)
    signature_style: SignatureStyle = Field(default_factory=SignatureStyle)

    @classmethod
    def signed(
        cls,
        signer: Signer,
        *,
        date: Date,
        location: Union[str, TranslatedString],
        title: Optional[TranslatedString] = None,
        other: Any = (),
        style: Optional[SignerBlockStyle] = None,
        signature_style: Optional[SignatureStyle] = None,
    ) -> "SignerBlock":
        """
        Block with signing date and location appended to ``other`` metadata.

        Keys in ``other`` whose English text is "date" or "location"
        (any case) are replaced in place by the signing date and location.
        """
        rows = tuple(_metadata_adapter.validate_python(other))
        rows = with_entry(rows, labels.DATE.capitalized(), numeric_date_string(date))
        rows = with_entry(rows, labels.LOCATION.capitalized(), location)

        return cls(
            title=title,
            signer=signer,
            metadata=rows,
            style=style or SignerBlockStyle(),
            signature_style=signature_style or SignatureStyle(),
        )


class SignatoryGroup(BaseModel):
    """A party to an agreement made up of one or more signers."""

    model_config = _FROZEN

    kind: Literal["signatory_group"] = "signatory_group"
    name: TranslatedString
    signers: Tuple[Signer, ...]
    metadata: Metadata = ()
    signature_style: SignatureStyle = Field(default_factory=SignatureStyle)

    @classmethod
    def with_role(
        cls,
        name: Union[str, TranslatedString],
        role: TranslatedString,
        signers: Tuple[Signer, ...],
        metadata: Any = (),
        signature_style: Optional[SignatureStyle] = None,
    ) -> "SignatoryGroup":
        """Group whose metadata carries ``role``, replacing any role row."""
        entries = with_entry(
            tuple(_metadata_adapter.validate_python(metadata)),
            labels.ROLE,
            role,
        )
        return cls(
            name=name,
            signers=signers,
            metadata=entries,
            signature_style=signature_style or SignatureStyle(),
        )


Signatory = Annotated[Union[SignerBlock, SignatoryGroup], Field(discriminator="kind")]


class DisplayMode(str, Enum):
    GROUPED_BY_SIGNATORY = "grouped_by_signatory"
    SEPARATE_SIGNATORIES = "separate_signatories"
    COLUMNS = "columns"


class SignaturePage(DocumentModel):
    template_path: ClassVar[str] = "signature_page/main.html.jinja"

    title: TranslatedString = labels.SIGNATURES
    subtitle: Optional[TranslatedString] = None
    date: Optional[Date] = None
    location: Optional[str] = None
    signatories: Tuple[Signatory, ...]
    display_mode: DisplayMode = DisplayMode.GROUPED_BY_SIGNATORY

    def render_context(self) -> Dict[str, Any]:
        from doctemplates.app.services.signer_tree import build_signature_sections

        return {
            "document": self,
            "sections": build_signature_sections(self),
        }

    def document_title(self, language: Language) -> str:
        return self.title.resolve(language)
