"""Test runner hook: build the HTML report once a run completes."""

from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .config import ReporterConfig, get_output_filepath, load_config
from .pipeline import create_report
from .schema import RunResult


class HtmlReporter:
    """
    Reporter object for a test runner's end-of-run hook.

    Configuration is read once, at construction; the destination is resolved
    from it (outputPath, then $TEST_REPORT_PATH, then ./test-report.html).
    """

    def __init__(
        self,
        config: Optional[ReporterConfig] = None,
        project_dir: Optional[Path] = None,
    ):
        self.config = config if config is not None else load_config(project_dir)
        self.output_path = get_output_filepath(self.config, cwd=project_dir)

    def on_run_complete(self, results: Union[RunResult, Mapping[str, Any], None]) -> None:
        create_report(results, self.output_path, self.config)
