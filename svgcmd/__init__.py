"""SVGCmd: parse SVG path data into drawing commands."""

__version__ = "0.1.0"

from .parser import (
    COMMAND_TOKENS,
    CommandRecord,
    InvalidInputError,
    PathCommandParser,
    parse_svg_path,
)

__all__ = [
    "COMMAND_TOKENS",
    "CommandRecord",
    "InvalidInputError",
    "PathCommandParser",
    "parse_svg_path",
]
