"""
Tests for the HTML rendering contract.
"""

from typing import ClassVar

import pytest

from doctemplates.app.i18n.translated_string import (
    Language,
    MissingTranslationError,
    TranslatedString,
)
from doctemplates.app.schemas.base import DocumentModel
from doctemplates.app.services.html import TemplateRenderError, render_document
from doctemplates.tests.fixtures.documents import simple_letter


class _Probe(DocumentModel):
    template_path: ClassVar[str] = "sample.html.jinja"

    value: TranslatedString = TranslatedString(english="only english")


class _Colliding(_Probe):
    def render_context(self):
        return {"document": self, "language": "xx"}


@pytest.fixture
def template_dir(tmp_path):
    (tmp_path / "sample.html.jinja").write_text(
        "{{ document.value | t }}|{{ language.value }}", encoding="utf-8"
    )
    return tmp_path


def test_binding_collision_raises(template_dir):
    with pytest.raises(TemplateRenderError, match="collision on key 'language'"):
        render_document(_Colliding(), Language.ENGLISH, template_dir=template_dir)


def test_language_is_bound_explicitly(template_dir):
    html = render_document(_Probe(), Language.ENGLISH, template_dir=template_dir)

    assert html == "only english|en"


def test_missing_translation_propagates(template_dir):
    with pytest.raises(MissingTranslationError):
        render_document(_Probe(), Language.DUTCH, template_dir=template_dir)


def test_undefined_variable_is_an_error(tmp_path):
    (tmp_path / "sample.html.jinja").write_text("{{ nowhere }}", encoding="utf-8")

    with pytest.raises(TemplateRenderError):
        render_document(_Probe(), Language.ENGLISH, template_dir=tmp_path)


def test_missing_template_is_an_error(tmp_path):
    with pytest.raises(TemplateRenderError):
        render_document(_Probe(), Language.ENGLISH, template_dir=tmp_path)


def test_documents_are_wrapped_in_a4_page():
    html = render_document(simple_letter(), "nl")

    assert html.startswith("<!DOCTYPE html>")
    assert '<html lang="nl">' in html
    assert "size: A4;" in html
    assert "<title>Important Information Enclosed</title>" in html
