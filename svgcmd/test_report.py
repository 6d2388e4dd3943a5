#!/usr/bin/env python3
"""Test script for the report module.

This script tests report rendering and saving.
"""

import json
import logging
import sys
import tempfile
from pathlib import Path

import yaml

from svgcmd.config import Config
from svgcmd.parser import parse_svg_path
from svgcmd.report import CommandReport

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("test_report")


def _report(config=None):
    report = CommandReport(config)
    report.add_path("line", parse_svg_path("M 6 , 396.5 L98,370.20"))
    report.add_path("empty", parse_svg_path(""))
    return report


def test_text_output():
    """Test the default text report."""
    output = _report().get_output()
    logger.info(f"Text output:\n{output}")

    assert output.split("\n") == [
        "# line",
        "M 6 396.5",
        "L 98 370.20",
        "# empty",
    ]


def test_numeric_text_output():
    """Test numeric formatting of text output."""
    config = Config()
    config.set("output.numeric", True)
    config.set("output.precision", 1)

    report = _report(config)
    report.add_path("bad", parse_svg_path("M1,x"))
    lines = report.get_output("text").split("\n")
    assert lines[1] == "M 6.0 396.5"
    assert lines[2] == "L 98.0 370.2"
    assert lines[-1] == "M 1.0 nan"


def test_json_output():
    """Test JSON output keeps raw text."""
    data = json.loads(_report().get_output("json"))
    assert data[0]["path"] == "line"
    assert data[0]["commands"][0] == {"command": "M", "x": " 6 ", "y": " 396.5 "}
    assert data[1] == {"path": "empty", "commands": []}


def test_yaml_numeric_output():
    """Test YAML output with numeric coordinates."""
    config = Config()
    config.set("output.format", "yaml")
    config.set("output.numeric", True)

    report = CommandReport(config)
    report.add_path("p", parse_svg_path("M10,20.5L3,"))
    data = yaml.safe_load(report.get_output())
    assert data == [
        {
            "path": "p",
            "commands": [
                {"command": "M", "x": 10.0, "y": 20.5},
                {"command": "L", "x": 3.0, "y": None},
            ],
        }
    ]


def test_non_finite_numeric_output():
    """Test that infinite coordinates become null in structured output."""
    config = Config()
    config.set("output.numeric", True)

    report = CommandReport(config)
    report.add_path("p", parse_svg_path("M1e999,inf"))

    def reject_constant(name):
        raise ValueError(name)

    data = json.loads(report.get_output("json"), parse_constant=reject_constant)
    assert data[0]["commands"] == [{"command": "M", "x": None, "y": None}]

    data = yaml.safe_load(report.get_output("yaml"))
    assert data[0]["commands"] == [{"command": "M", "x": None, "y": None}]


def test_text_output_without_command():
    """Test a record emitted before any command token."""
    report = CommandReport()
    report.add_path("lead", parse_svg_path(",5M1,2"))
    lines = report.get_output("text").split("\n")
    assert lines == ["# lead", " 5 ", "M 1 2"]
    assert "None" not in report.get_output("text")


def test_unknown_format_falls_back_to_text():
    """Test that an unknown format renders text."""
    report = _report()
    assert report.get_output("xml") == report.get_output("text")


def test_save_and_clear():
    """Test saving the report and clearing it."""
    report = _report()

    with tempfile.TemporaryDirectory() as temp_dir:
        out_path = Path(temp_dir) / "report.txt"
        assert report.save_to_file(out_path)
        assert out_path.read_text() == report.get_output() + "\n"

        assert not report.save_to_file(Path(temp_dir) / "missing" / "report.txt")

    report.clear()
    assert report.entries == []
    assert report.get_output() == ""


def main():
    """Main function."""
    tests = [
        test_text_output,
        test_numeric_text_output,
        test_json_output,
        test_yaml_numeric_output,
        test_non_finite_numeric_output,
        test_text_output_without_command,
        test_unknown_format_falls_back_to_text,
        test_save_and_clear,
    ]

    success_count = 0
    failure_count = 0

    for test in tests:
        try:
            test()
            success_count += 1
        except AssertionError as e:
            logger.error(f"{test.__name__} failed: {e}")
            failure_count += 1

    logger.info(f"Test results: {success_count} succeeded, {failure_count} failed")
    return 1 if failure_count else 0


if __name__ == "__main__":
    sys.exit(main())
