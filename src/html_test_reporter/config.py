"""
Reporter configuration.

Options are read once from the project manifest (pyproject.toml
``[tool.html-test-reporter]`` or a package.json section) into an immutable
ReporterConfig that is passed explicitly to every component.
"""

import json
import os
import tomllib
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel

from ._util import debug, log_message, safe_read

TOOL_NAME = "html-test-reporter"
# Section name used by the JavaScript reporter this tool replaces.
LEGACY_PACKAGE_JSON_KEY = "html-jest-reporter"
OUTPUT_PATH_ENV = "TEST_REPORT_PATH"
DEFAULT_OUTPUT_FILENAME = "test-report.html"
DEFAULT_PAGE_TITLE = "Test suite"


class ReporterConfig(BaseModel):
    """Immutable reporter options (camelCase manifest keys or snake_case names)."""

    output_path: Optional[str] = None
    page_title: Optional[str] = None
    style_override_path: Optional[str] = None
    enable_test_report_category: bool = False
    include_failure_msg: bool = False

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
        "frozen": True,
    }

    @property
    def title(self) -> str:
        return self.page_title or DEFAULT_PAGE_TITLE


def _section_from_pyproject(path: Path) -> Optional[dict]:
    text = safe_read(path, "config")
    if not text:
        return None
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        debug("config", f"ignoring {path}: {exc}")
        return None
    section = data.get("tool", {}).get(TOOL_NAME)
    return section if isinstance(section, dict) else None


def _section_from_package_json(path: Path) -> Optional[dict]:
    text = safe_read(path, "config")
    if not text:
        return None
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        debug("config", f"ignoring {path}: {exc}")
        return None
    if not isinstance(data, dict):
        return None
    for key in (TOOL_NAME, LEGACY_PACKAGE_JSON_KEY):
        section = data.get(key)
        if isinstance(section, dict):
            return section
    return None


def _anchor_paths(config: ReporterConfig, project_dir: Path) -> ReporterConfig:
    updates = {}
    for name in ("output_path", "style_override_path"):
        value = getattr(config, name)
        if value and not Path(value).is_absolute():
            updates[name] = str(project_dir / value)
    return config.model_copy(update=updates) if updates else config


def load_config(project_dir: Optional[Path] = None) -> ReporterConfig:
    """
    Load reporter options from the project manifest in project_dir (default: cwd).

    pyproject.toml wins over package.json.  A missing or unreadable manifest
    yields the defaults, as does a section with values of the wrong type.
    Relative paths in the manifest are taken relative to project_dir.
    """
    project_dir = Path(project_dir) if project_dir is not None else Path.cwd()
    for name, reader in (
        ("pyproject.toml", _section_from_pyproject),
        ("package.json", _section_from_package_json),
    ):
        path = project_dir / name
        if not path.is_file():
            continue
        section = reader(path)
        if section is None:
            continue
        try:
            config = ReporterConfig.model_validate(section)
        except ValidationError as exc:
            log_message("error", f"Ignoring invalid [{TOOL_NAME}] options in {path}: {exc}")
            return ReporterConfig()
        debug("config", f"using [{TOOL_NAME}] options from {path}")
        return _anchor_paths(config, project_dir)
    debug("config", f"no reporter options found in {project_dir}; using defaults")
    return ReporterConfig()


def get_output_filepath(
    config: ReporterConfig,
    environ: Optional[Mapping[str, str]] = None,
    cwd: Optional[Path] = None,
) -> Path:
    """Report destination: config outputPath, then $TEST_REPORT_PATH, then ./test-report.html."""
    environ = os.environ if environ is None else environ
    if config.output_path:
        return Path(config.output_path)
    if environ.get(OUTPUT_PATH_ENV):
        return Path(environ[OUTPUT_PATH_ENV])
    return (Path(cwd) if cwd is not None else Path.cwd()) / DEFAULT_OUTPUT_FILENAME
