"""SVG path command parser for SVGCmd.

This module turns the ``d`` attribute of an SVG path element into an ordered
list of drawing commands. Coordinates are kept as the raw text that appeared
in the path string; nothing is converted to numbers here.
"""

import logging
from typing import Any, Iterable, List, NamedTuple, Optional

# Set up logging
logger = logging.getLogger(__name__)

# Command letters that start a new drawing command
COMMAND_TOKENS = frozenset("MLIHVCSQTA")


class InvalidInputError(TypeError):
    """Raised when the parser is given something other than a string."""


class CommandRecord(NamedTuple):
    """A single drawing command with its raw X and Y text."""

    command: Optional[str]
    x: str
    y: str

    def to_dict(self) -> dict:
        """Return the record as a plain dictionary."""
        return {"command": self.command, "x": self.x, "y": self.y}


def check_command_tokens(command_tokens: Iterable[str]) -> frozenset:
    """Validate a set of command tokens.

    Args:
        command_tokens: Command letters to recognize

    Returns:
        Frozenset of the tokens

    Raises:
        ValueError: If a token is not a single non-comma character
    """
    if command_tokens is COMMAND_TOKENS:
        return COMMAND_TOKENS

    tokens = frozenset(command_tokens)
    for token in tokens:
        if not isinstance(token, str) or len(token) != 1 or token == ",":
            raise ValueError(f"Invalid command token: {token!r}")
    return tokens


def parse_svg_path(path_data: str, command_tokens: Iterable[str] = COMMAND_TOKENS) -> List[CommandRecord]:
    """Parse SVG path data into a list of command records.

    A command token switches to X accumulation. A comma closes the X part
    (switching to Y) or, after a Y part, emits the pair and switches back to
    X so several pairs can follow one command. Every other character is
    appended verbatim to whichever part is being accumulated.

    Args:
        path_data: SVG path data string
        command_tokens: Characters treated as command tokens

    Returns:
        List of CommandRecord objects in input order

    Raises:
        InvalidInputError: If path_data is not a string
        ValueError: If command_tokens holds an invalid token
    """
    if not isinstance(path_data, str):
        raise InvalidInputError(
            f"Path data must be a string, got {type(path_data).__name__}"
        )

    tokens = check_command_tokens(command_tokens)
    commands = []
    command = None
    in_x = False
    in_y = False
    x = ""
    y = ""

    for char in path_data:
        if char in tokens:
            if in_x or in_y:
                commands.append(CommandRecord(command, x, y))
                x = ""
                y = ""

            command = char
            in_x = True
            in_y = False
        elif char == ",":
            if in_y:
                commands.append(CommandRecord(command, x, y))
                x = ""
                y = ""

            in_x = not in_x
            in_y = not in_y
        elif in_x:
            x += char
        elif in_y:
            y += char

    # Flush a trailing pair that no token or comma closed
    if in_y:
        commands.append(CommandRecord(command, x, y))

    logger.debug(f"Parsed {len(commands)} commands from {len(path_data)} characters")
    return commands


class PathCommandParser:
    """Parser with a configurable set of command tokens."""

    def __init__(self, command_tokens: Optional[Iterable[str]] = None):
        """Initialize the parser.

        Args:
            command_tokens: Command letters to recognize (optional)

        Raises:
            ValueError: If a token is not a single non-comma character
        """
        if command_tokens is None:
            self.command_tokens = COMMAND_TOKENS
            return

        self.command_tokens = check_command_tokens(command_tokens)

    @classmethod
    def from_config(cls, config: Any) -> "PathCommandParser":
        """Create a parser from a Config object.

        Args:
            config: Config object (optional)

        Returns:
            PathCommandParser instance
        """
        if config is None:
            return cls()
        return cls(config.get("parser.command_tokens"))

    def parse(self, path_data: str) -> List[CommandRecord]:
        """Parse SVG path data.

        Args:
            path_data: SVG path data string

        Returns:
            List of CommandRecord objects
        """
        return parse_svg_path(path_data, self.command_tokens)
