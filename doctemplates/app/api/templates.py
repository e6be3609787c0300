"""
Template discovery and schema introspection endpoints.

Both routes are read-only and answer from the in-process registry.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from doctemplates.app.registry.registry import TEMPLATE_REGISTRY

router = APIRouter()


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class TemplateListItem(BaseModel):
    slug: str
    description: str


# ---------------------------------------------------------------------------
# GET /templates
# ---------------------------------------------------------------------------


@router.get(
    "",
    response_model=List[TemplateListItem],
    summary="List registered document templates",
)
def list_templates() -> List[TemplateListItem]:
    return [
        TemplateListItem(slug=entry.slug, description=entry.description)
        for entry in TEMPLATE_REGISTRY.values()
    ]


# ---------------------------------------------------------------------------
# GET /templates/schema/{slug}
# ---------------------------------------------------------------------------


@router.get(
    "/schema/{slug}",
    summary="Return the JSON schema for a document template",
)
def get_template_schema(slug: str) -> Dict[str, Any]:
    """
    Return the JSON schema of the model that validates payloads for
    ``slug``. Document models forbid extra fields, so the schema is
    closed (``additionalProperties: false``).
    """
    entry = TEMPLATE_REGISTRY.get(slug)
    if entry is None:
        raise HTTPException(
            status_code=404,
            detail=f"Template '{slug}' not found.",
        )

    schema = entry.document_class.model_json_schema()
    schema.setdefault("additionalProperties", False)
    return schema
