"""Exception hierarchy for html-test-reporter.

Every error raised while producing a report derives from :class:`ReporterError`
so the orchestrator can turn any of them into a single log line.
"""

from pathlib import Path
from typing import Optional, Union


class ReporterError(Exception):
    """Base exception for all report generation errors."""


class InputError(ReporterError, ValueError):
    """Test result data is missing or cannot be parsed."""


class StylesheetNotFoundError(ReporterError, FileNotFoundError):
    """The configured styleOverridePath could not be read."""

    def __init__(self, path: Union[str, Path]):
        self.path = str(path)
        super().__init__(f"Could not find the specified styleOverridePath: '{self.path}'")

    def __str__(self) -> str:
        return self.args[0]


class WriteError(ReporterError, OSError):
    """Creating the report directory or writing the report file failed."""

    def __init__(self, path: Union[str, Path], cause: Optional[BaseException] = None):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Something went wrong when creating the file: {cause}")

    def __str__(self) -> str:
        return self.args[0]
