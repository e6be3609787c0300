"""
Document generation endpoints.

Clients supply the document payload only. Validation, hashing,
rendering and PDF export are performed by this service.

    POST /generate/{template_id}        -> application/pdf
    POST /generate/{template_id}/html   -> text/html

The content hash of the canonical payload is computed before rendering,
bound into the PDF's XMP metadata and returned in the X-Document-Hash
response header, so consumers can surface it without parsing the PDF.
"""

import io
import json
import logging
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, HTTPException, Query
from fastapi.responses import HTMLResponse, StreamingResponse
from pydantic import ValidationError

from doctemplates.app.core.config import get_settings
from doctemplates.app.i18n.translated_string import Language, MissingTranslationError
from doctemplates.app.registry.registry import TEMPLATE_REGISTRY, TemplateEntry
from doctemplates.app.schemas.base import DocumentModel
from doctemplates.app.services.html import render_document
from doctemplates.app.services.pdf import render_pdf_to_path, stamp_document_hash
from doctemplates.app.utils.hashing import compute_document_hash

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _canonicalize_payload(document: DocumentModel) -> bytes:
    return json.dumps(
        document.model_dump(mode="json"),
        sort_keys=True,
        ensure_ascii=False,
        separators=(",", ":"),
    ).encode("utf-8")


def _lookup(template_id: str) -> TemplateEntry:
    entry = TEMPLATE_REGISTRY.get(template_id)
    if entry is None:
        raise HTTPException(
            status_code=404,
            detail=f"Template '{template_id}' not found.",
        )
    return entry


def _validate(entry: TemplateEntry, payload: Dict[str, Any]) -> DocumentModel:
    try:
        return entry.document_class.model_validate(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _untranslatable(exc: MissingTranslationError, language: Language) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail=f"Payload cannot be rendered in language '{language.value}': {exc}",
    )


_LANGUAGE_QUERY = Query(
    default=None,
    description="Document language. Defaults to the configured language.",
)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@router.post(
    "/{template_id}/html",
    response_class=HTMLResponse,
    summary="Render a document template to HTML",
)
def generate_html(
    template_id: str,
    language: Optional[Language] = _LANGUAGE_QUERY,
    payload: Dict[str, Any] = Body(...),
) -> HTMLResponse:
    entry = _lookup(template_id)
    document = _validate(entry, payload)
    language = language or get_settings().default_language

    try:
        html = render_document(document, language)
    except MissingTranslationError as exc:
        raise _untranslatable(exc, language) from exc
    except Exception as exc:
        logger.exception(
            "HTML rendering failed for template='%s' language='%s'",
            template_id,
            language.value,
        )
        raise HTTPException(
            status_code=500,
            detail="HTML rendering failed. See service logs for details.",
        ) from exc

    return HTMLResponse(html)


@router.post(
    "/{template_id}",
    summary="Generate a PDF document",
)
def generate_document(
    template_id: str,
    language: Optional[Language] = _LANGUAGE_QUERY,
    payload: Dict[str, Any] = Body(...),
) -> StreamingResponse:
    """
    Generate a PDF from a registered template.

    Returns application/pdf. The X-Document-Hash response header carries
    the SHA-256 hash of the canonical payload.
    """
    entry = _lookup(template_id)
    document = _validate(entry, payload)
    settings = get_settings()
    language = language or settings.default_language

    document_hash = compute_document_hash(_canonicalize_payload(document))

    # ------------------------------------------------------------------
    # Rendering pipeline
    # ------------------------------------------------------------------
    try:
        with tempfile.TemporaryDirectory() as tmp:
            pdf_path = render_pdf_to_path(
                html=render_document(document, language),
                output_path=Path(tmp) / "document.pdf",
                create_directories=settings.create_directories,
                base_url=settings.pdf_base_url,
            )
            stamp_document_hash(pdf_path=pdf_path, content_hash=document_hash)
            artifact_bytes = pdf_path.read_bytes()

    except MissingTranslationError as exc:
        raise _untranslatable(exc, language) from exc
    except Exception as exc:
        logger.exception(
            "PDF generation failed for template='%s' language='%s'",
            template_id,
            language.value,
        )
        raise HTTPException(
            status_code=500,
            detail="PDF generation failed. See service logs for details.",
        ) from exc

    return StreamingResponse(
        io.BytesIO(artifact_bytes),
        media_type="application/pdf",
        headers={
            "Content-Disposition": (
                f'inline; filename="{template_id}-{language.value}.pdf"'
            ),
            "X-Document-Hash": document_hash,
            "X-Document-Language": language.value,
        },
    )
