"""Command-line interface for SVGCmd."""

import argparse
import logging
import sys
from pathlib import Path

from lxml import etree

from . import __version__
from .config import OUTPUT_FORMATS, Config
from .parser import PathCommandParser
from .report import CommandReport
from .svg import parse_svg


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Parse SVG path data into drawing commands."
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--data", "-d", help="Path data string (the d attribute)"
    )
    source.add_argument(
        "--input", "-i", type=Path, help="Input SVG file path"
    )
    parser.add_argument(
        "--output", "-o", type=Path, help="Output report file path (default: stdout)"
    )
    parser.add_argument(
        "--config", "-c", type=Path, help="Configuration YAML file path"
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=OUTPUT_FORMATS,
        help="Report format (default: from config, text)",
    )
    parser.add_argument(
        "--numeric", action="store_true", help="Convert coordinates to numbers"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser.parse_args(args)


def main(argv=None):
    """Main entry point for the CLI."""
    args = parse_args(argv)

    # Validate config file if provided
    if args.config and not args.config.exists():
        print(f"Error: Config file '{args.config}' does not exist.", file=sys.stderr)
        return 1

    config = Config()
    if args.config and not config.load_config(args.config):
        print(f"Error: Could not load config file '{args.config}'.", file=sys.stderr)
        return 1

    if args.numeric:
        config.set("output.numeric", True)

    level = "DEBUG" if args.verbose else config.get("logging.level", "WARNING")
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format=config.get("logging.format"),
    )

    if not config.validate():
        print("Error: Invalid configuration.", file=sys.stderr)
        return 1

    report = CommandReport(config)

    if args.data is not None:
        parser = PathCommandParser.from_config(config)
        report.add_path("data", parser.parse(args.data))
    else:
        # Validate input file
        if not args.input.exists():
            print(f"Error: Input file '{args.input}' does not exist.", file=sys.stderr)
            return 1

        try:
            doc = parse_svg(args.input, config)
        except (OSError, etree.XMLSyntaxError) as e:
            print(f"Error: Could not read '{args.input}': {e}", file=sys.stderr)
            return 1

        for path in doc.get_paths():
            report.add_path(path.label, path.commands)

    if args.output:
        try:
            args.output.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            print(f"Error: Could not create '{args.output.parent}': {e}", file=sys.stderr)
            return 1

        if not report.save_to_file(args.output, args.format):
            print(f"Error: Could not write '{args.output}'.", file=sys.stderr)
            return 1
    else:
        print(report.get_output(args.format))

    return 0


if __name__ == "__main__":
    sys.exit(main())
