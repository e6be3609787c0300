from datetime import date as Date
from typing import Annotated, ClassVar, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from doctemplates.app.i18n.translated_string import Language
from doctemplates.app.schemas.base import DocumentModel


_FROZEN = ConfigDict(frozen=True, extra="forbid")


class ShortVariant(BaseModel):
    model_config = _FROZEN

    kind: Literal["short"] = "short"


class FullVariant(BaseModel):
    """Agenda with a subtitle and an introductory header above the items."""

    model_config = _FROZEN

    kind: Literal["full"] = "full"
    subtitle: str
    body_header: str


AgendaVariant = Annotated[Union[ShortVariant, FullVariant], Field(discriminator="kind")]


class AgendaItem(BaseModel):
    model_config = _FROZEN

    title: str
    important: bool = False


class Agenda(DocumentModel):
    template_path: ClassVar[str] = "agenda/main.html.jinja"

    title: str
    date: Optional[Date] = None
    variant: AgendaVariant = Field(default_factory=ShortVariant)
    items: Tuple[AgendaItem, ...] = ()

    @classmethod
    def short(cls, title: str, items, *, date=None) -> "Agenda":
        return cls(title=title, date=date, items=items)

    @classmethod
    def full(cls, title: str, items, *, subtitle: str, body_header: str, date=None) -> "Agenda":
        return cls(
            title=title,
            date=date,
            variant=FullVariant(subtitle=subtitle, body_header=body_header),
            items=items,
        )

    def document_title(self, language: Language) -> str:
        return self.title
