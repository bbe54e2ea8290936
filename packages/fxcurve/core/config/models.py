"""Configuration models for fxcurve."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from fxcurve.core.curves.models import GeneratorParams


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit one JSON object per log record")
    filename: str | None = Field(default=None, description="Log file (None = stderr)")


class RenderConfig(BaseModel):
    """Console rendering configuration."""

    values_per_row: int = Field(default=16, ge=1, le=160)
    max_plot_columns: int = Field(default=80, ge=1, le=160)


class AppConfig(BaseModel):
    """Application-level configuration for the command line tool.

    Curve functions never read this; the CLI uses it to seed generator
    parameters the user did not pass and to configure logging and output.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    logging: LoggingConfig = LoggingConfig()
    generator: GeneratorParams = GeneratorParams()
    render: RenderConfig = RenderConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("fxcurve.yaml")
