"""Configuration management for fxcurve."""

from fxcurve.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from fxcurve.core.config.models import AppConfig, LoggingConfig, RenderConfig

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "RenderConfig",
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
]
