"""Structured logging configuration with call stack injection.

This module provides logging configuration for callertrace and its users:
- Configurable log levels and output formats (JSON/console)
- A structlog processor that adds the call site's stack trace to events
- Context injection for correlation
- File and console output support
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, MutableMapping
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import structlog
from structlog.typing import WrappedLogger

from callertrace.core.capture import MAX_DEPTH, capture
from callertrace.models.stacktrace import StackTrace

if TYPE_CHECKING:
    from callertrace.config.schema import TraceConfig


class LogFormat(StrEnum):
    """Log output format options."""

    JSON = "json"
    CONSOLE = "console"


class LogLevel(StrEnum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# Modules whose frames sit between a logging call and the processor chain
DEFAULT_IGNORED_MODULES: tuple[str, ...] = ("structlog", "logging", __name__)


class StackTraceProcessor:
    """Structlog processor adding the call site's stack trace to events.

    Frames belonging to structlog, the stdlib logging machinery and this
    module are dropped first, so the rendered stack starts at the code that
    issued the log call.

    Example:
        processor = StackTraceProcessor(verb="n", levels=["error"])
        configure_logging(stack_processor=processor)

        log.error("payment_failed")  # event gains stack="[charge main <module>]"
    """

    def __init__(
        self,
        verb: str = "v",
        key: str = "stack",
        skip: int = 0,
        levels: Iterable[str] | None = None,
        long: bool = False,
        max_depth: int = MAX_DEPTH,
        additional_ignores: Iterable[str] = (),
    ) -> None:
        """Initialize the processor.

        Args:
            verb: Format verb used to render the stack
            key: Event dict key receiving the rendered stack
            skip: Extra call site frames to drop, e.g. for logging helpers
            levels: Method names to act on (all when None or empty)
            long: Render with the ``+`` flag
            max_depth: Frames captured before filtering
            additional_ignores: More module names whose frames are dropped
        """
        self.spec = ("+" if long else "") + verb
        self.key = key
        self.skip = skip
        self.levels = frozenset(level.lower() for level in levels) if levels else None
        self.max_depth = max_depth
        self._ignored = tuple(
            name.replace(".", "/") for name in (*DEFAULT_IGNORED_MODULES, *additional_ignores)
        )

    def _is_ignored(self, pkg_path: str) -> bool:
        return any(
            pkg_path == ignored or pkg_path.startswith(ignored + "/") for ignored in self._ignored
        )

    def call_site_stack(self) -> StackTrace:
        """Capture the stack above the logging machinery."""
        stack = capture(0, max_depth=self.max_depth)
        idx = 0
        while idx < len(stack) and self._is_ignored(stack[idx].pkg_path):
            idx += 1
        return stack[idx + self.skip :]

    def __call__(
        self,
        logger: WrappedLogger,
        method_name: str,
        event_dict: MutableMapping[str, Any],
    ) -> MutableMapping[str, Any]:
        if self.levels is not None and method_name not in self.levels:
            return event_dict

        event_dict[self.key] = format(self.call_site_stack(), self.spec)
        return event_dict


def stack_processor_from_config(config: TraceConfig) -> StackTraceProcessor | None:
    """Build the stack processor described by a loaded configuration.

    Args:
        config: Loaded configuration

    Returns:
        Configured processor, or None if stack logging is disabled
    """
    stack = config.logging.stack
    if not stack.enabled:
        return None
    return StackTraceProcessor(
        verb=config.format.verb,
        key=stack.key,
        skip=stack.skip,
        levels=stack.levels,
        long=config.format.long,
        max_depth=config.capture.max_depth,
    )


def add_context_processor(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Add contextual information to all log entries.

    Adds standard fields for correlation and debugging:
    - service: Always "callertrace"
    - version: Current package version (if available)

    Args:
        logger: Logger instance (unused)
        method_name: Log method name (unused)
        event_dict: Event dictionary to process

    Returns:
        Event dictionary with added context
    """
    event_dict["service"] = "callertrace"

    try:
        from callertrace._version import __version__

        event_dict["version"] = __version__
    except (ImportError, RuntimeError):
        pass

    return event_dict


def configure_logging(
    level: LogLevel | str = LogLevel.INFO,
    log_format: LogFormat | str = LogFormat.CONSOLE,
    file_path: Path | str | None = None,
    file_enabled: bool = False,
    stack_processor: StackTraceProcessor | None = None,
) -> None:
    """Configure structured logging.

    This function sets up structlog with:
    - Appropriate processors for the output format
    - Context injection
    - Optional call stack injection
    - Optional file output

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format (json or console)
        file_path: Path to log file (if file logging enabled)
        file_enabled: Whether to enable file logging
        stack_processor: Processor adding the call stack to events

    Example:
        # For development (colored console output)
        configure_logging(level="DEBUG", log_format="console")

        # Errors carry the stack of the failing call site
        configure_logging(stack_processor=StackTraceProcessor(levels=["error"]))
    """
    if isinstance(level, str):
        level = LogLevel(level.upper())
    if isinstance(log_format, str):
        log_format = LogFormat(log_format.lower())

    numeric_level = getattr(logging, level.value)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        add_context_processor,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if stack_processor is not None:
        shared_processors.append(stack_processor)

    shared_processors += [
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == LogFormat.JSON:
        shared_processors.append(structlog.processors.JSONRenderer())
    else:
        shared_processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True, exception_formatter=structlog.dev.plain_traceback
            )
        )

    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    handlers.append(console_handler)

    if file_enabled and file_path:
        try:
            file_path = Path(file_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(file_path)
            file_handler.setLevel(numeric_level)
            handlers.append(file_handler)
        except OSError as e:
            # Continue with console only
            console_logger = logging.getLogger("callertrace.logging")
            console_logger.warning(f"Could not create log file {file_path}: {e}")

    logging.basicConfig(
        format="%(message)s",
        level=numeric_level,
        handlers=handlers,
        force=True,
    )


def configure_logging_from_config(config: TraceConfig) -> None:
    """Configure logging from a loaded configuration.

    Args:
        config: Loaded configuration
    """
    configure_logging(
        level=config.logging.level,
        log_format=config.logging.format,
        file_path=config.logging.file.path if config.logging.file.enabled else None,
        file_enabled=config.logging.file.enabled,
        stack_processor=stack_processor_from_config(config),
    )


def get_logger(name: str | None = None) -> WrappedLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (defaults to caller's module)

    Returns:
        Configured structlog logger
    """
    return cast(WrappedLogger, structlog.get_logger(name))


def bind_context(**kwargs: Any) -> None:
    """Bind contextual variables for all subsequent log calls.

    Args:
        **kwargs: Key-value pairs to bind
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove contextual variables.

    Args:
        *keys: Keys to unbind
    """
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all bound contextual variables."""
    structlog.contextvars.clear_contextvars()


class LogEventNames:
    """Standard log event names for consistency."""

    # CLI lifecycle
    CLI_STARTING = "cli_starting"
    CLI_FINISHED = "cli_finished"

    # Configuration
    CONFIG_LOADING = "config_loading"
    CONFIG_LOADED = "config_loaded"
    CONFIG_NOT_FOUND = "config_not_found"
    CONFIG_INVALID = "config_invalid"

    # Stack capture
    STACK_CAPTURED = "stack_captured"
    SYMBOLS_PARSED = "symbols_parsed"
