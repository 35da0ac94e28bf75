"""boots configuration.

Typed configuration for a scaffolding run.  Settings use a Pydantic v2 model
so they are validated at construction time and can be built from environment
variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Config(BaseModel):
    """Global boots configuration.

    Instances are created once by the CLI entry point and passed to the
    template store factory and the generator.
    """

    output_dir: Path = Field(
        default=Path("."), description="Directory the project folder is created in"
    )
    template_dir: Path | None = Field(
        default=None, description="Read templates from this directory instead of the bundled set"
    )
    template_url: str | None = Field(
        default=None, description="Download a zip archive of templates from this URL"
    )
    git_timeout: float = Field(
        default=2.0, gt=0, description="Timeout in seconds for the git identity lookup"
    )
    download_timeout: float = Field(
        default=30.0, ge=1, description="Timeout in seconds for template archive downloads"
    )
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @model_validator(mode="after")
    def _single_template_backend(self) -> Config:
        if self.template_dir is not None and self.template_url:
            raise ValueError("template_dir and template_url are mutually exclusive")
        return self

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def template_source(self) -> str:
        """Human-readable description of the active template backend."""
        if self.template_url:
            return self.template_url
        if self.template_dir is not None:
            return str(self.template_dir)
        return "bundled"

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> Config:
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            BOOTS_OUTPUT_DIR, BOOTS_TEMPLATE_DIR, BOOTS_TEMPLATE_URL,
            BOOTS_GIT_TIMEOUT, BOOTS_DOWNLOAD_TIMEOUT, BOOTS_LOG_LEVEL.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("BOOTS_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["BOOTS_OUTPUT_DIR"])
        if os.environ.get("BOOTS_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["BOOTS_TEMPLATE_DIR"])
        if os.environ.get("BOOTS_TEMPLATE_URL"):
            kwargs["template_url"] = os.environ["BOOTS_TEMPLATE_URL"]
        if os.environ.get("BOOTS_GIT_TIMEOUT"):
            kwargs["git_timeout"] = float(os.environ["BOOTS_GIT_TIMEOUT"])
        if os.environ.get("BOOTS_DOWNLOAD_TIMEOUT"):
            kwargs["download_timeout"] = float(os.environ["BOOTS_DOWNLOAD_TIMEOUT"])
        if os.environ.get("BOOTS_LOG_LEVEL"):
            kwargs["log_level"] = os.environ["BOOTS_LOG_LEVEL"]
        return cls(**kwargs)

    def with_templates(self, location: str | None) -> Config:
        """Return a copy whose template backend is *location*.

        ``http://`` and ``https://`` locations are treated as archive URLs,
        anything else as a directory.  ``None`` keeps the current backend.
        """
        if location is None:
            return self
        if location.startswith(("http://", "https://")):
            return self.model_copy(update={"template_url": location, "template_dir": None})
        return self.model_copy(update={"template_dir": Path(location), "template_url": None})
