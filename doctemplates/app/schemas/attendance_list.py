from typing import ClassVar, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from doctemplates.app.i18n.translated_string import Language
from doctemplates.app.schemas.base import DocumentModel
from doctemplates.app.schemas.metadata import Metadata


_FROZEN = ConfigDict(frozen=True, extra="forbid")

BLANK_ROWS = 14


class Attendee(BaseModel):
    model_config = _FROZEN

    first_name: str = ""
    last_name: str = ""
    role: str = ""
    signature: Optional[str] = None

    @property
    def is_blank(self) -> bool:
        return not (self.first_name or self.last_name or self.role or self.signature)


class AttendanceList(DocumentModel):
    template_path: ClassVar[str] = "attendance_list/main.html.jinja"

    title: str
    metadata: Metadata = ()
    attendees: Tuple[Attendee, ...] = ()

    @classmethod
    def blank(
        cls,
        title: str,
        rows: int = BLANK_ROWS,
        metadata: Metadata = (),
    ) -> "AttendanceList":
        """An empty list to be filled in by hand."""
        if rows < 0:
            raise ValueError("rows must be zero or more")
        return cls(
            title=title,
            metadata=metadata,
            attendees=tuple(Attendee() for _ in range(rows)),
        )

    def document_title(self, language: Language) -> str:
        return self.title
