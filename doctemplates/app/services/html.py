"""
HTML rendering service.

This module turns a validated document model into a complete HTML
document using Jinja2. It is presentation-only: it never mutates the
document and never converts HTML to PDF (see ``services.pdf``).

RENDERING CONTRACT:

- The document supplies its own render context via
  ``DocumentModel.render_context()``.
- The engine adds bindings (active language, document title).
- Bindings MUST NOT override document context keys. A collision raises
  ``TemplateRenderError``.
- Undefined template variables are errors (``StrictUndefined``).

The active language is an explicit binding. The ``t`` and ``long_date``
filters read it from the template context; nothing is looked up from a
process-wide locale.
"""

import logging
from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    pass_context,
)

from doctemplates.app.core.config import get_settings
from doctemplates.app.i18n import labels
from doctemplates.app.i18n.formatting import (
    format_euro,
    format_long_date,
    format_numeric_date,
    format_percentage,
)
from doctemplates.app.i18n.translated_string import Language, TranslatedString
from doctemplates.app.schemas.base import DocumentModel

logger = logging.getLogger(__name__)


class TemplateRenderError(RuntimeError):
    """Raised when a document cannot be rendered to HTML."""


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------


@pass_context
def _translate(context, value: Any) -> str:
    if isinstance(value, TranslatedString):
        return value.resolve(context["language"])
    return value


@pass_context
def _long_date(context, value) -> str:
    return format_long_date(value, context["language"])


@pass_context
def _numeric_date(context, value) -> str:
    return format_numeric_date(value, context["language"])


def _euro(value: Decimal) -> str:
    return format_euro(value)


def _percentage(value: Decimal) -> str:
    return format_percentage(value)


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


@lru_cache(maxsize=None)
def build_environment(template_dir: Path) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        undefined=StrictUndefined,
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["t"] = _translate
    env.filters["long_date"] = _long_date
    env.filters["numeric_date"] = _numeric_date
    env.filters["euro"] = _euro
    env.filters["percentage"] = _percentage
    env.globals["labels"] = labels
    return env


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def render_document(
    document: DocumentModel,
    language: Language,
    *,
    template_dir: Optional[Path] = None,
) -> str:
    """
    Render ``document`` to a standalone HTML string in ``language``.

    ``MissingTranslationError`` raised while resolving labels propagates
    unchanged; Jinja errors are raised as ``TemplateRenderError``.
    """
    language = Language(language)
    env = build_environment(template_dir or get_settings().template_dir)

    render_context: Dict[str, Any] = dict(document.render_context())
    bindings = {
        "language": language,
        "document_title": document.document_title(language),
    }
    for key, value in bindings.items():
        if key in render_context:
            raise TemplateRenderError(
                f"Render context collision on key '{key}'. "
                "Bindings must not override document context."
            )
        render_context[key] = value

    logger.debug(
        "Rendering %s with template '%s' in '%s'",
        type(document).__name__,
        document.template_path,
        language.value,
    )

    try:
        template = env.get_template(document.template_path)
        return template.render(render_context)
    except TemplateError as exc:
        raise TemplateRenderError(
            f"Failed to render template '{document.template_path}': {exc}"
        ) from exc
