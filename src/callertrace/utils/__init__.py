"""Utility functions and helpers.

- logging: Structured logging with call stack injection
"""

from callertrace.utils.logging import (
    LogFormat,
    LogLevel,
    StackTraceProcessor,
    bind_context,
    clear_context,
    configure_logging,
    configure_logging_from_config,
    get_logger,
    stack_processor_from_config,
    unbind_context,
)

__all__ = [
    "LogFormat",
    "LogLevel",
    "StackTraceProcessor",
    "bind_context",
    "clear_context",
    "configure_logging",
    "configure_logging_from_config",
    "get_logger",
    "stack_processor_from_config",
    "unbind_context",
]
