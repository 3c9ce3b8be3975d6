# -*- coding: utf-8 -*-
"""Location: ./configalchemy/cli.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

Command line interface for ConfigAlchemy.

Usage examples:
    # Convert a file and print the result
    configalchemy convert config.yaml --from yaml --to toml

    # Read from stdin and write to a file
    cat settings.json | configalchemy convert --from json --to lua -o settings.lua

    # Run the HTTP service
    configalchemy serve --host 0.0.0.0 --port 8787

``convert`` goes through the same validation gate and pipeline as
``POST /convert``, so size limits and error codes are identical.

Examples:
    >>> parser = create_parser()
    >>> args = parser.parse_args(["convert", "in.json", "--from", "json", "--to", "yaml"])
    >>> args.source, args.target, args.input_file
    ('json', 'yaml', 'in.json')
"""

# Standard
import argparse
from pathlib import Path
import sys
from typing import List, Optional

# Third-Party
import uvicorn

# First-Party
from configalchemy import __version__
from configalchemy.config import settings
from configalchemy.exceptions import ConversionError
from configalchemy.formats import FORMATS
from configalchemy.services.conversion_service import ConversionService
from configalchemy.services.logging_service import LoggingService

logging_service = LoggingService()
logger = logging_service.get_logger(__name__)


class CLIError(Exception):
    """Base class for CLI-related errors."""


def _read_input(input_file: str) -> str:
    """Read the content to convert.

    Args:
        input_file: Path, or ``-`` for stdin.

    Returns:
        str: File content.

    Raises:
        CLIError: If the file cannot be read.
    """
    if input_file == "-":
        return sys.stdin.read()
    try:
        return Path(input_file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CLIError(f"Cannot read {input_file}: {e}") from e


def convert_command(args: argparse.Namespace) -> int:
    """Execute the convert command.

    Args:
        args: Parsed command line arguments

    Returns:
        int: Process exit code.
    """
    try:
        content = _read_input(args.input_file)
    except CLIError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    service = ConversionService()
    try:
        outcome = service.convert_payload({"from": args.source, "to": args.target, "content": content})
    except ConversionError as e:
        print(f"Error [{e.code}]: {e.message}", file=sys.stderr)
        if e.hint:
            print(f"Hint: {e.hint}", file=sys.stderr)
        return 1

    result = outcome.result if outcome.result.endswith("\n") else outcome.result + "\n"
    if args.output:
        try:
            Path(args.output).write_text(result, encoding="utf-8")
        except OSError as e:
            print(f"Error: Cannot write {args.output}: {e}", file=sys.stderr)
            return 1
        if args.verbose:
            print(f"Wrote {outcome.output_size} bytes of {args.target} to {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(result)
    return 0


def serve_command(args: argparse.Namespace) -> int:
    """Execute the serve command.

    Args:
        args: Parsed command line arguments

    Returns:
        int: Process exit code.
    """
    host = args.host or settings.host
    port = args.port or settings.port
    logger.info(f"Serving {settings.app_name} on {host}:{port}")
    uvicorn.run(
        "configalchemy.main:app",
        host=host,
        port=port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(prog="configalchemy", description="Convert configuration text between JSON, YAML, TOML and Lua")
    parser.add_argument("--version", "-V", action="version", version=f"configalchemy {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    convert_parser = subparsers.add_parser("convert", help="Convert a file or stdin")
    convert_parser.add_argument("input_file", nargs="?", default="-", help="Input file (default: stdin)")
    convert_parser.add_argument("--from", "-f", dest="source", required=True, choices=list(FORMATS), help="Format of the input")
    convert_parser.add_argument("--to", "-t", dest="target", required=True, choices=list(FORMATS), help="Format to produce")
    convert_parser.add_argument("--output", "--out", "-o", help="Output file path (default: stdout)")
    convert_parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    convert_parser.set_defaults(func=convert_command)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP service")
    serve_parser.add_argument("--host", help=f"Bind address (default: {settings.host})")
    serve_parser.add_argument("--port", type=int, help=f"Port (default: {settings.port})")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    serve_parser.set_defaults(func=serve_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Arguments, defaulting to ``sys.argv[1:]``.

    Returns:
        int: Process exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    logging_service.configure(level="DEBUG" if getattr(args, "verbose", False) else "WARNING", log_format="text")
    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
