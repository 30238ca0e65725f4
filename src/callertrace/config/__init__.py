"""Configuration loading and validation."""

from .loader import load_config
from .schema import (
    CaptureConfig,
    FileLoggingConfig,
    FormatConfig,
    LoggingConfig,
    StackLoggingConfig,
    TraceConfig,
)

__all__ = [
    # Loader
    "load_config",
    # Root config
    "TraceConfig",
    # Sections
    "CaptureConfig",
    "FormatConfig",
    "LoggingConfig",
    "FileLoggingConfig",
    "StackLoggingConfig",
]
