"""
CLI argument parsing. Flags override options read from the project manifest.
"""

import argparse
from pathlib import Path
from typing import Optional


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="html-test-reporter",
        description="Render a test run result JSON file as a static HTML report.",
    )
    parser.add_argument(
        "results",
        type=Path,
        metavar="RESULTS",
        help="Test results JSON (e.g. from jest --json --outputFile=RESULTS)",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output_path",
        type=Path,
        default=None,
        help="Report destination (default: outputPath option, $TEST_REPORT_PATH, "
             "or ./test-report.html)",
    )
    parser.add_argument(
        "--project-dir",
        type=Path,
        default=None,
        metavar="DIR",
        help="Directory holding pyproject.toml/package.json with reporter options (default: cwd)",
    )

    # Per-run overrides of manifest options
    parser.add_argument(
        "--title",
        dest="page_title",
        type=str,
        default=None,
        help="Page title and heading (default: 'Test suite')",
    )
    parser.add_argument(
        "--style-override",
        dest="style_override_path",
        type=str,
        default=None,
        metavar="PATH",
        help="Custom stylesheet to inline instead of the built-in one",
    )
    parser.add_argument(
        "--category",
        dest="enable_test_report_category",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Add positive (P_) / negative (N_) case columns to the suite index",
    )
    parser.add_argument(
        "--failure-messages",
        dest="include_failure_msg",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show failure messages under failing case titles",
    )

    return parser.parse_args(argv)
