from typing import Any, ClassVar, Dict

from pydantic import BaseModel, ConfigDict

from doctemplates.app.i18n.translated_string import Language


class DocumentModel(BaseModel):
    """
    Base class for renderable documents.

    Documents are immutable values. Each subclass binds the Jinja template
    it is rendered with and may extend the render context with derived,
    presentation-ready values.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    template_path: ClassVar[str]

    def render_context(self) -> Dict[str, Any]:
        return {"document": self}

    def document_title(self, language: Language) -> str:
        return type(self).__name__
