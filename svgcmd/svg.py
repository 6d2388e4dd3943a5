"""SVG extraction module for SVGCmd.

This module reads SVG documents, collects their path elements and parses the
``d`` attribute of each into command records.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import numpy as np
from lxml import etree

from .config import Config
from .coords import commands_to_array
from .parser import CommandRecord, PathCommandParser

# Set up logging
logger = logging.getLogger(__name__)

# SVG namespace
SVG_NS = "{http://www.w3.org/2000/svg}"


class SVGDocument:
    """Class for handling SVG document parsing and path extraction."""

    def __init__(self, file_path: Optional[Union[str, Path]] = None, config: Optional[Config] = None):
        """Initialize SVG document from file.

        Args:
            file_path: Path to SVG file (optional, see from_string)
            config: Config object (optional)
        """
        self.file_path = Path(file_path) if file_path is not None else None
        self.config = config or Config()
        self.parser = PathCommandParser.from_config(self.config)
        self.tree = None
        self.root = None
        self.paths = []

        if self.file_path is not None:
            self._parse()

    @classmethod
    def from_string(cls, text: Union[str, bytes], config: Optional[Config] = None) -> "SVGDocument":
        """Create a document from SVG markup.

        Args:
            text: SVG markup
            config: Config object (optional)

        Returns:
            SVGDocument object
        """
        doc = cls(config=config)
        if isinstance(text, str):
            text = text.encode("utf-8")

        try:
            doc.root = etree.fromstring(text)
        except etree.XMLSyntaxError as e:
            logger.error(f"Error parsing SVG markup: {e}")
            raise

        doc.tree = doc.root.getroottree()
        doc._extract_paths()
        return doc

    def _parse(self):
        """Parse the SVG file and extract its paths."""
        try:
            self.tree = etree.parse(str(self.file_path))
            self.root = self.tree.getroot()
            self._extract_paths()

        except (OSError, etree.XMLSyntaxError) as e:
            logger.error(f"Error parsing SVG file {self.file_path}: {e}")
            raise

    def _is_path(self, element) -> bool:
        """Check whether an element is a path element."""
        if not isinstance(element.tag, str):
            # Comments and processing instructions
            return False
        if element.tag == f"{SVG_NS}path":
            return True
        return element.tag == "path" and self.config.get("svg.include_unnamespaced", True)

    def _extract_paths(self):
        """Extract all path elements from the SVG document."""
        for element in self.root.iter():
            if self._is_path(element):
                self.paths.append(SVGPath(element, self.parser))

        logger.info(f"Extracted {len(self.paths)} paths from SVG")

    def get_paths(self) -> List["SVGPath"]:
        """Get all paths from the document.

        Returns:
            List of SVGPath objects
        """
        return self.paths


class SVGPath:
    """Class representing an SVG path element with its parsed commands."""

    def __init__(self, path_element, parser: Optional[PathCommandParser] = None):
        """Initialize from an SVG path element.

        Args:
            path_element: lxml Element for the path
            parser: Parser to use (optional)
        """
        self.element = path_element
        self.path_id = path_element.get("id")
        self.path_data = path_element.get("d", "")
        self.commands: List[CommandRecord] = (parser or PathCommandParser()).parse(self.path_data)
        logger.debug(f"Path {self.label}: {len(self.commands)} commands")

    @property
    def label(self) -> str:
        """Identifier used in reports."""
        return self.path_id or f"line {self.element.sourceline}"

    def points(self) -> np.ndarray:
        """Get the numeric (x, y) points of the path commands.

        Returns:
            Float array of shape (n, 2)
        """
        return commands_to_array(self.commands)


def parse_svg(file_path: Union[str, Path], config: Optional[Config] = None) -> SVGDocument:
    """Parse an SVG file and return the document object.

    Args:
        file_path: Path to SVG file
        config: Config object (optional)

    Returns:
        SVGDocument object
    """
    return SVGDocument(file_path, config)
