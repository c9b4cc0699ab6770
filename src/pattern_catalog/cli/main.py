"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Output formatting and exit statuses
"""
import argparse
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

from pattern_catalog import VERSION
from pattern_catalog.application.runner import ALL_PATTERNS, DemoRunner
from pattern_catalog.bootstrap import Application, create_application
from pattern_catalog.cli.formatters import format_output, format_run_text
from pattern_catalog.domain.exceptions import ValidationError
from pattern_catalog.domain.models import PatternCategory, normalize_pattern_name
from pattern_catalog.infrastructure.error import ErrorMiddleware, ErrorResponse
from pattern_catalog.infrastructure.logging.logger import get_logger

OUTPUT_FORMATS = ["text", "json", "yaml", "table"]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

CommandResult = Tuple[Dict[str, Any], int]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pattern-catalog",
        description="Pattern Catalog - runnable demonstrations of classic design patterns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                              # List all patterns
  %(prog)s list --category creational        # List creational patterns
  %(prog)s show observer                     # Show one pattern
  %(prog)s run singleton                     # Run one demo
  %(prog)s run all                           # Run every demo
  %(prog)s --format table run all            # Summarize runs as a table
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Set logging level")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Output format")
    parser.add_argument("--output", help="Output file (default: stdout)")
    parser.add_argument("--quiet", action="store_true", help="Suppress error messages on stderr")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # list
    list_parser = subparsers.add_parser("list", help="List registered patterns")
    list_parser.add_argument(
        "--category",
        choices=[category.value for category in PatternCategory],
        help="Only list patterns in this category",
    )

    # show
    show_parser = subparsers.add_parser("show", help="Show one pattern")
    show_parser.add_argument("pattern", help="Pattern name")

    # run
    run_parser = subparsers.add_parser("run", help="Run pattern demos")
    run_parser.add_argument("patterns", nargs="+", help=f"Pattern names, or '{ALL_PATTERNS}'")
    run_parser.add_argument(
        "--show-output",
        action="store_true",
        help=f"Print demo output lines for '{ALL_PATTERNS}' as well as the summary",
    )
    run_parser.add_argument("--fail-fast", action="store_true", help="Stop after the first failed demo")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def handle_list(args: argparse.Namespace, app: Application) -> CommandResult:
    category = PatternCategory(args.category) if args.category else None
    descriptors = app.registry.list_descriptors(category)
    return {"patterns": [descriptor.to_dict() for descriptor in descriptors]}, EXIT_SUCCESS


def handle_show(args: argparse.Namespace, app: Application) -> CommandResult:
    descriptor = app.registry.get(args.pattern)
    return {"pattern": descriptor.to_dict()}, EXIT_SUCCESS


def handle_run(args: argparse.Namespace, app: Application) -> CommandResult:
    runner = app.runner
    if args.fail_fast:
        runner = DemoRunner(
            app.registry,
            config=app.config.runner.model_copy(update={"fail_fast": True}),
            event_publisher=app.event_publisher,
        )
    report = runner.run(args.patterns)
    return report.to_dict(), EXIT_SUCCESS if report.succeeded else EXIT_FAILURE


COMMAND_HANDLERS: Dict[str, Callable[[argparse.Namespace, Application], CommandResult]] = {
    "list": handle_list,
    "show": handle_show,
    "run": handle_run,
}


def execute_command(args: argparse.Namespace, app: Application) -> CommandResult:
    """Execute the appropriate command handler."""
    handler = COMMAND_HANDLERS.get(args.command)
    if handler is None:
        raise ValueError(f"Unknown command: {args.command}")
    return handler(args, app)


def render_result(args: argparse.Namespace, data: Dict[str, Any], output_format: str, width: int) -> str:
    """Render a command's data in the requested format."""
    if args.command == "run" and output_format == "text":
        run_all = any(normalize_pattern_name(name) == ALL_PATTERNS for name in args.patterns)
        if run_all:
            return format_run_text(data, show_output=args.show_output, summary=True)
        return format_run_text(data)
    return format_output(data, output_format, width)


def emit(text: str, args: argparse.Namespace) -> None:
    """Write output to ``--output`` or stdout."""
    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(text + "\n")
        except OSError as e:
            raise ValidationError(
                f"Cannot write output file '{args.output}': {e.strerror or e}",
                details={"path": args.output},
            ) from e
    else:
        print(text)


def report_error(
    error: ErrorResponse, args: argparse.Namespace, output_format: str, emit_output: bool = True
) -> int:
    """Print an error response and return its exit status."""
    if emit_output and output_format in ("json", "yaml"):
        try:
            emit(format_output(error.to_dict(), output_format), args)
        except ValidationError as e:
            print(f"Error: {e}", file=sys.stderr)
    if not args.quiet:
        print(f"Error: {error.message}", file=sys.stderr)
        available = error.details.get("available")
        if available:
            print(f"Available patterns: {', '.join(available)}", file=sys.stderr)
    return error.exit_code


def run_cli(argv: Optional[List[str]] = None, app: Optional[Application] = None) -> int:
    """Run the CLI and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = get_logger(__name__)
    output_format = args.format or "text"

    if not args.command:
        parser.print_help(sys.stderr)
        return EXIT_FAILURE

    middleware = ErrorMiddleware()

    def prepare() -> Application:
        application = app or create_application(args.config)
        application.initialize(log_level=args.log_level, verbose=args.verbose)
        return application

    application = middleware.wrap_handler(prepare)()
    if isinstance(application, ErrorResponse):
        return report_error(application, args, output_format)

    output_format = args.format or application.config.output.format.value
    logger.debug(f"Executing command: {args.command}")

    result = middleware.wrap_handler(execute_command)(args, application)
    if isinstance(result, ErrorResponse):
        return report_error(result, args, output_format)

    data, exit_code = result
    text = render_result(args, data, output_format, application.config.output.width)
    written = middleware.wrap_handler(emit)(text, args)
    if isinstance(written, ErrorResponse):
        return report_error(written, args, output_format, emit_output=False)
    if args.output and not args.quiet:
        print(f"Output written to {args.output}", file=sys.stderr)
    return exit_code


def main() -> None:
    """Main CLI entry point."""
    try:
        sys.exit(run_cli())
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(EXIT_INTERRUPTED)


if __name__ == "__main__":
    main()
