"""Report generation module for SVGCmd.

This module collects parsed paths and renders them as text, JSON or YAML.
"""

import json
import logging
import math
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

import yaml

from .config import OUTPUT_FORMATS, Config
from .coords import to_number
from .parser import CommandRecord

# Set up logging
logger = logging.getLogger(__name__)


class CommandReport:
    """Report of parsed path commands."""

    def __init__(self, config: Optional[Config] = None):
        """Initialize report.

        Args:
            config: Config object (optional)
        """
        self.config = config or Config()
        self.entries: List[Tuple[str, List[CommandRecord]]] = []

    def add_path(self, label: str, commands: Sequence[CommandRecord]) -> None:
        """Add a parsed path to the report.

        Args:
            label: Path label (id or source description)
            commands: Parsed command records
        """
        self.entries.append((label, list(commands)))

    def _record_dict(self, record: CommandRecord) -> Dict:
        """Convert a record for structured output."""
        data = record.to_dict()
        if self.config.get("output.numeric", False):
            precision = self.config.get("output.precision", 3)
            for key in ("x", "y"):
                value = to_number(data[key])
                # JSON and YAML have no portable NaN or infinity
                data[key] = round(value, precision) if math.isfinite(value) else None
        return data

    def _format_value(self, text: str) -> str:
        """Format a coordinate for text output."""
        if not self.config.get("output.numeric", False):
            return text.strip()
        value = to_number(text)
        if math.isnan(value):
            return "nan"
        precision = self.config.get("output.precision", 3)
        return f"{value:.{precision}f}"

    def _as_text(self) -> str:
        lines = []
        for label, commands in self.entries:
            lines.append(f"# {label}")
            for record in commands:
                lines.append(
                    f"{record.command or ''} {self._format_value(record.x)} {self._format_value(record.y)}"
                )
        return "\n".join(lines)

    def _as_data(self) -> List[Dict]:
        return [
            {"path": label, "commands": [self._record_dict(record) for record in commands]}
            for label, commands in self.entries
        ]

    def get_output(self, fmt: Optional[str] = None) -> str:
        """Get the report as a string.

        Args:
            fmt: Output format ("text", "json" or "yaml"); defaults to config

        Returns:
            Rendered report
        """
        fmt = fmt or self.config.get("output.format", "text")
        if fmt not in OUTPUT_FORMATS:
            logger.warning(f"Unknown output format: {fmt}, defaulting to text")
            fmt = "text"

        if fmt == "json":
            return json.dumps(self._as_data(), indent=2)
        if fmt == "yaml":
            return yaml.safe_dump(self._as_data(), default_flow_style=False, sort_keys=False).rstrip("\n")
        return self._as_text()

    def save_to_file(self, file_path: Union[str, Path], fmt: Optional[str] = None) -> bool:
        """Save report to file.

        Args:
            file_path: Path to output file
            fmt: Output format (optional)

        Returns:
            True if file was saved successfully, False otherwise
        """
        try:
            with open(file_path, "w") as f:
                f.write(self.get_output(fmt) + "\n")

            logger.info(f"Report saved to {file_path}")
            return True

        except OSError as e:
            logger.error(f"Error saving report to {file_path}: {e}")
            return False

    def clear(self) -> None:
        """Clear report entries."""
        self.entries = []
