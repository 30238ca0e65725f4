"""Entry point for the callertrace command line.

This module provides a small diagnostic CLI:
- With symbols: prints the function name, package path and package name
  parsed from each qualified symbol
- Without symbols: prints the stack captured at the CLI call site
"""

import argparse
import sys
from pathlib import Path

import structlog
from pydantic import ValidationError

from callertrace._version import __version__
from callertrace.config.schema import TraceConfig
from callertrace.core.capture import capture
from callertrace.core.formatter import VERBS
from callertrace.models.frame import Frame, RawFrame
from callertrace.utils.logging import LogEventNames

log = structlog.get_logger()


def setup_logging(debug: bool = False, log_format: str = "console") -> None:
    """Configure structured logging from CLI options.

    Args:
        debug: Enable debug logging if True
        log_format: Output format ("json" or "console")
    """
    from callertrace.utils.logging import LogFormat, LogLevel, configure_logging

    level = LogLevel.DEBUG if debug else LogLevel.WARNING
    configure_logging(level=level, log_format=LogFormat(log_format.lower()))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv)

    Returns:
        Parsed argument namespace
    """
    parser = argparse.ArgumentParser(
        prog="callertrace",
        description="Parse qualified symbols or print the current call stack",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--log-format",
        choices=["json", "console"],
        default="console",
        help="Log output format (default: console)",
    )

    parser.add_argument(
        "--verb",
        choices=VERBS,
        default=None,
        help="Format verb for the stack (default: from config, else v)",
    )

    parser.add_argument(
        "--long",
        action="store_true",
        help="Render the long form (the + flag)",
    )

    parser.add_argument(
        "--skip",
        type=int,
        default=None,
        help="Frames to skip above the CLI call site",
    )

    parser.add_argument(
        "symbols",
        nargs="*",
        help="Qualified symbols such as example.com/sample/a.F.G.func1",
    )

    return parser.parse_args(argv)


def describe_symbol(symbol: str) -> str:
    """Render the parts of a qualified symbol as a tab-separated line.

    Args:
        symbol: Qualified symbol

    Returns:
        ``func_name<TAB>pkg_path<TAB>pkg_name``
    """
    frame = Frame(RawFrame(function=symbol, file=""))
    return "\t".join((frame.func_name, frame.pkg_path, frame.pkg_name))


def run(args: argparse.Namespace) -> int:
    """Run the CLI with parsed arguments.

    Args:
        args: Parsed argument namespace

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    log.debug(LogEventNames.CLI_STARTING, version=__version__)

    try:
        if args.config is not None:
            from callertrace.config.loader import load_config

            log.debug(LogEventNames.CONFIG_LOADING, path=str(args.config))
            config = load_config(args.config)
            log.debug(LogEventNames.CONFIG_LOADED)
        else:
            config = TraceConfig()
    except FileNotFoundError as e:
        log.error(LogEventNames.CONFIG_NOT_FOUND, path=str(args.config), error=str(e))
        return 1
    except (ValueError, ValidationError) as e:
        log.error(LogEventNames.CONFIG_INVALID, error=str(e))
        return 1

    if args.symbols:
        for symbol in args.symbols:
            print(describe_symbol(symbol))
        log.debug(LogEventNames.SYMBOLS_PARSED, count=len(args.symbols))
    else:
        verb = args.verb or config.format.verb
        long = args.long or config.format.long
        skip = args.skip if args.skip is not None else config.capture.default_skip

        stack = capture(skip, max_depth=config.capture.max_depth)
        print(format(stack, ("+" if long else "") + verb))
        log.debug(LogEventNames.STACK_CAPTURED, frames=len(stack))

    log.debug(LogEventNames.CLI_FINISHED)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    setup_logging(debug=args.debug, log_format=args.log_format)

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
