import pytest
from pydantic import ValidationError

from doctemplates.app.core.config import PACKAGED_TEMPLATE_DIR, Settings, get_settings
from doctemplates.app.i18n.translated_string import Language


def test_defaults_point_at_packaged_templates():
    settings = Settings()

    assert settings.template_dir == PACKAGED_TEMPLATE_DIR.resolve()
    assert settings.default_language == Language.ENGLISH
    assert settings.create_directories is True
    assert (settings.template_dir / "base.html.jinja").is_file()


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("DOCTEMPLATES_TEMPLATE_DIR", str(tmp_path))
    monkeypatch.setenv("DOCTEMPLATES_DEFAULT_LANGUAGE", "nl")

    settings = Settings()

    assert settings.template_dir == tmp_path.resolve()
    assert settings.default_language == Language.DUTCH


def test_missing_template_dir_fails_fast(monkeypatch, tmp_path):
    monkeypatch.setenv("DOCTEMPLATES_TEMPLATE_DIR", str(tmp_path / "missing"))

    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
