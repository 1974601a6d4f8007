"""
Pipeline orchestrator: stylesheet -> render -> serialize -> write -> log.

create_report() is the single catch point; every failure ends as one error line.
"""

import json
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from ._util import debug, log_message
from .config import ReporterConfig
from .errors import InputError, WriteError
from .renderers import render, to_html
from .schema import RunResult
from .stylesheet import get_stylesheet


def load_results(path: Path) -> RunResult:
    """Load and deserialize a test run result file (runner ``--json`` output)."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise InputError(f"Cannot read test results {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise InputError(f"Test results {path} are not valid JSON: {exc}") from exc
    try:
        return RunResult.model_validate(data)
    except ValidationError as exc:
        raise InputError(f"Test data missing or malformed in {path}: {exc}") from exc


def write_report(path: Union[str, Path], content: str) -> None:
    """Write content to path, creating parent directories and overwriting any existing file."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise WriteError(path, exc) from exc
    debug("write", f"wrote {len(content)} chars to {path}")


def create_report(
    run_result: Union[RunResult, Mapping[str, Any], None],
    destination: Union[str, Path],
    config: Optional[ReporterConfig] = None,
) -> None:
    """Generate the HTML report for run_result at destination.  Never raises."""
    config = config if config is not None else ReporterConfig()
    try:
        stylesheet = get_stylesheet(config)
        document = render(run_result, stylesheet, config)
        write_report(destination, to_html(document))
    except Exception as exc:
        debug("pipeline", f"report generation failed: {exc!r}")
        log_message("error", str(exc))
        return
    log_message("success", f"Report generated ({destination})")
