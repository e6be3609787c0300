"""
Centralized configuration for the document template service.

Settings are read from the environment (prefix ``DOCTEMPLATES_``) and
validated once at startup. A misconfigured template directory fails
fast instead of surfacing on the first render.
"""

from functools import lru_cache
from pathlib import Path
from typing import Annotated, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from doctemplates.app.i18n.translated_string import Language


PACKAGED_TEMPLATE_DIR = Path(__file__).resolve().parents[2] / "templates"


# -------------------------------------------------------------------------
# Settings Model
# -------------------------------------------------------------------------

class Settings(BaseSettings):
    """Application settings parsed from the environment."""

    # ---------------------------------------------------------------------
    # Rendering
    # ---------------------------------------------------------------------

    template_dir: Annotated[
        Path,
        Field(
            default=PACKAGED_TEMPLATE_DIR,
            validate_default=True,
            description="Directory holding the Jinja HTML templates",
        ),
    ]

    default_language: Annotated[
        Language,
        Field(
            default=Language.ENGLISH,
            description="Language used when a request does not name one",
        ),
    ]

    # ---------------------------------------------------------------------
    # PDF export
    # ---------------------------------------------------------------------

    create_directories: Annotated[
        bool,
        Field(
            default=True,
            description="Create missing parent directories of PDF outputs",
        ),
    ]

    pdf_base_url: Annotated[
        Optional[str],
        Field(
            default=None,
            description=(
                "Base URL WeasyPrint resolves relative links (images, "
                "stylesheets) against"
            ),
        ),
    ]

    model_config = SettingsConfigDict(
        env_prefix="DOCTEMPLATES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    @field_validator("template_dir")
    @classmethod
    def template_dir_exists(cls, value: Path) -> Path:
        resolved = value.resolve()
        if not resolved.is_dir():
            raise ValueError(f"Template directory does not exist: {resolved}")
        return resolved


# -------------------------------------------------------------------------
# Settings Dependency Provider
# -------------------------------------------------------------------------

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Dependency injection provider for application settings."""
    return Settings()
