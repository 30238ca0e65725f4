"""Pydantic models for configuration schema."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.capture import MAX_DEPTH
from ..core.formatter import VERBS


class CaptureConfig(BaseModel):
    """Stack capture configuration."""

    max_depth: int = Field(MAX_DEPTH, ge=1, le=256, description="Frames recorded per capture")
    default_skip: int = Field(0, ge=0)


class FormatConfig(BaseModel):
    """Rendering configuration."""

    verb: str = "v"
    long: bool = False

    @field_validator("verb")
    @classmethod
    def validate_verb(cls, v: str) -> str:
        """Validate the verb is one the formatter renders."""
        if v not in VERBS:
            raise ValueError(f"Unknown verb: {v!r}. Expected one of: {', '.join(VERBS)}")
        return v

    @property
    def spec(self) -> str:
        """The format spec string, e.g. ``+P``."""
        return ("+" if self.long else "") + self.verb


class StackLoggingConfig(BaseModel):
    """Stack trace injection into log events."""

    enabled: bool = False
    key: str = Field("stack", min_length=1)
    levels: list[str] = []
    skip: int = Field(0, ge=0)

    @field_validator("levels")
    @classmethod
    def validate_levels(cls, v: list[str]) -> list[str]:
        """Normalize method names to lower case."""
        return [level.lower() for level in v]


class FileLoggingConfig(BaseModel):
    """File logging configuration."""

    enabled: bool = False
    path: Path = Path("callertrace.log")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "console"
    file: FileLoggingConfig = FileLoggingConfig()
    stack: StackLoggingConfig = StackLoggingConfig()


class TraceConfig(BaseSettings):
    """Root configuration for callertrace."""

    capture: CaptureConfig = CaptureConfig()
    format: FormatConfig = FormatConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix="CALLERTRACE_",
        env_nested_delimiter="__",
    )
