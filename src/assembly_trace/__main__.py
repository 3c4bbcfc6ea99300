"""Command line entry point.

Reads a rendered stack trace from a file or stdin and prints the assembly
label for it, using the same rules as live capture:

    $ python -m assembly_trace --prefix flowkit.core. trace.txt
    Stage.map ⇢ at my.app.Handler.run(handler.py:10)
"""

import argparse
import sys
from pathlib import Path

import structlog
from pydantic import ValidationError

from assembly_trace._version import __version__

log = structlog.get_logger()


def setup_logging(debug: bool = False, log_format: str = "console") -> None:
    """Configure structured logging for the command line.

    Args:
        debug: Enable debug logging if True
        log_format: Output format ("json" or "console")
    """
    from assembly_trace.utils.logging import LogFormat, LogLevel, configure_logging

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
        prog="assembly-trace",
        description="Extract the assembly site from a rendered stack trace",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "source",
        nargs="?",
        type=Path,
        help="File holding the stack trace (default: stdin)",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file",
    )

    parser.add_argument(
        "-p",
        "--prefix",
        default=None,
        help="Internal namespace prefix, overriding configuration",
    )

    parser.add_argument(
        "--tail",
        action="store_true",
        help="Treat the last two lines as operator and user frame without classifying",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--format",
        choices=["json", "console"],
        default="console",
        help="Log output format (default: console)",
    )

    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    """Render the label for the requested source.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    from assembly_trace.config.loader import get_settings, load_config
    from assembly_trace.config.schema import TraceSettings
    from assembly_trace.core.classifier import FrameClassifier
    from assembly_trace.core.extractor import extract_operator_assembly_information
    from assembly_trace.models.assembly import AssemblyInformation

    try:
        settings = load_config(args.config) if args.config else get_settings()
        if args.prefix is not None:
            settings = TraceSettings.model_validate(
                settings.model_dump() | {"internal_prefix": args.prefix}
            )
    except FileNotFoundError as e:
        log.error("configuration_file_not_found", path=str(args.config), error=str(e))
        return 1
    except (ValueError, ValidationError) as e:
        log.error("configuration_invalid", error=str(e))
        return 1

    if args.config and not args.debug:
        # Reconfigure logging from config file settings
        from assembly_trace.utils.logging import configure_logging

        configure_logging(
            level=settings.logging.level,
            log_format=settings.logging.format,
            file_path=settings.logging.file.path if settings.logging.file.enabled else None,
            file_enabled=settings.logging.file.enabled,
        )

    if args.source is None:
        text = sys.stdin.read()
    else:
        try:
            text = args.source.read_text(encoding="utf-8")
        except OSError as e:
            log.error("source_unreadable", path=str(args.source), error=str(e))
            return 1

    if args.tail:
        label = AssemblyInformation.from_stack_trace_tail(text, settings.internal_prefix).operator
    else:
        classifier = FrameClassifier(settings.internal_prefix)
        label = extract_operator_assembly_information(text, classifier)

    log.debug("assembly_label_extracted", label=label, tail=args.tail)
    print(label)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(debug=args.debug, log_format=args.format)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
