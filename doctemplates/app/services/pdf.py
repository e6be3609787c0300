"""
PDF export service.

This module converts rendered HTML into a PDF file with WeasyPrint and
binds a precomputed content hash into the PDF's XMP metadata with
pikepdf. It does not interpret document content.

Output handling:
- The output file is opened in a ``with`` block, so the handle is closed
  on every exit path, including conversion failures.
- Missing parent directories are created when ``create_directories`` is
  set.
- Failures surface as ``PdfRenderError``. Nothing is retried.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Optional

import pikepdf

from doctemplates.app.core.config import get_settings
from doctemplates.app.i18n.translated_string import Language
from doctemplates.app.schemas.base import DocumentModel
from doctemplates.app.services.html import render_document

logger = logging.getLogger(__name__)

CONTENT_HASH_XMP_KEY = "{https://doctemplates.org/ns/document/1.0/}contentHash"


class PdfRenderError(RuntimeError):
    """Raised when HTML to PDF conversion or PDF post-processing fails."""


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------

def _write_pdf(html: str, target: BinaryIO, base_url: Optional[str]) -> None:
    # Imported lazily; WeasyPrint loads native libraries on import.
    from weasyprint import HTML

    HTML(string=html, base_url=base_url).write_pdf(target=target)


# ------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------

def render_pdf_to_path(
    *,
    html: str,
    output_path: Path,
    create_directories: bool = True,
    base_url: Optional[str] = None,
) -> Path:
    """
    Convert ``html`` to a PDF written at ``output_path``.

    Returns the path of the written PDF.
    """
    output_path = Path(output_path)

    try:
        if create_directories:
            output_path.parent.mkdir(parents=True, exist_ok=True)

        with output_path.open("wb") as target:
            _write_pdf(html, target, base_url)

    except Exception as exc:
        raise PdfRenderError(
            f"Failed to write PDF to {output_path}: {exc}"
        ) from exc

    logger.info("PDF written to %s", output_path)
    return output_path


def export_document(
    document: DocumentModel,
    output_path: Path,
    language: Language,
) -> Path:
    """Render ``document`` in ``language`` and write it as a PDF."""
    settings = get_settings()
    html = render_document(document, language)
    return render_pdf_to_path(
        html=html,
        output_path=output_path,
        create_directories=settings.create_directories,
        base_url=settings.pdf_base_url,
    )


def stamp_document_hash(*, pdf_path: Path, content_hash: str) -> None:
    """
    Bind ``content_hash`` into the XMP metadata of the PDF at ``pdf_path``.

    The file is rewritten in place.
    """
    try:
        with pikepdf.open(pdf_path, allow_overwriting_input=True) as pdf:
            with pdf.open_metadata() as meta:
                meta[CONTENT_HASH_XMP_KEY] = content_hash

            pdf.save(pdf_path)

    except Exception as exc:
        raise PdfRenderError(
            f"Failed to bind content hash into XMP metadata: {exc}"
        ) from exc


def read_document_hash(pdf_path: Path) -> Optional[str]:
    """Return the content hash bound into ``pdf_path``, if any."""
    with pikepdf.open(pdf_path) as pdf:
        return pdf.open_metadata().get(CONTENT_HASH_XMP_KEY)
