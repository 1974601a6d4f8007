"""
Test result and report document schema.

Input models mirror the JSON a Jest-style runner emits (camelCase keys are
accepted alongside snake_case names).  The output model is the immutable
document value that renderers build and the serializer turns into HTML.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

_RUNNER_MODEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "extra": "ignore",
}


# --- Test run results (produced by the test runner) ---


class CaseStatus(str, Enum):
    """Well-known case statuses.  Runners may report others (e.g. "todo")."""

    PASSED = "passed"
    FAILED = "failed"
    PENDING = "pending"


class PerfStats(BaseModel):
    """Suite timing window, epoch milliseconds."""

    start: float = 0
    end: float = 0

    model_config = _RUNNER_MODEL_CONFIG


class CaseResult(BaseModel):
    """One test case outcome."""

    title: str
    ancestor_titles: List[str] = Field(default_factory=list)
    status: str = ""
    duration: Optional[float] = None  # ms
    failure_messages: Optional[List[str]] = None  # may contain ANSI color codes

    model_config = _RUNNER_MODEL_CONFIG


class SuiteResult(BaseModel):
    """One test file outcome.

    Accepts both the reporter shape (testFilePath, perfStats, testResults)
    and the ``--json`` file shape (name, startTime/endTime, assertionResults).
    """

    test_file_path: str = ""
    perf_stats: PerfStats = Field(default_factory=PerfStats)
    num_failing_tests: int = 0
    test_results: Optional[List[CaseResult]] = None

    model_config = _RUNNER_MODEL_CONFIG

    @model_validator(mode="before")
    @classmethod
    def _from_json_file_shape(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "assertionResults" not in data:
            return data
        data = dict(data)
        cases = data.pop("assertionResults")
        data.setdefault("testResults", cases)
        data.setdefault("testFilePath", data.get("name", ""))
        data.setdefault("perfStats", {
            "start": data.get("startTime") or 0,
            "end": data.get("endTime") or 0,
        })
        if "numFailingTests" not in data and isinstance(cases, list):
            data["numFailingTests"] = sum(
                1 for c in cases if isinstance(c, dict) and c.get("status") == CaseStatus.FAILED.value
            )
        return data


class RunResult(BaseModel):
    """Aggregate test run outcome, as handed to a reporter when the run completes."""

    start_time: float = 0  # epoch ms
    num_total_test_suites: int = 0
    num_passed_test_suites: int = 0
    num_failed_test_suites: int = 0
    num_total_tests: int = 0
    num_passed_tests: int = 0
    num_failed_tests: int = 0
    num_pending_tests: int = 0
    test_results: List[SuiteResult] = Field(default_factory=list)

    model_config = _RUNNER_MODEL_CONFIG


# --- Report document (produced by renderers) ---


class Cell(BaseModel):
    text: str
    css_class: str = "suite"

    model_config = {"frozen": True}


class IndexRow(BaseModel):
    css_class: str
    cells: List[Cell] = Field(default_factory=list)

    model_config = {"frozen": True}


class IndexTable(BaseModel):
    """Suite overview table: one header row plus one row per non-empty suite."""

    header: List[Cell] = Field(default_factory=list)
    rows: List[IndexRow] = Field(default_factory=list)

    model_config = {"frozen": True}


class CaseRow(BaseModel):
    status: str
    ancestry: str
    title: str
    failure_messages: List[str] = Field(default_factory=list)  # already stripped
    result: str

    model_config = {"frozen": True}


class DetailSection(BaseModel):
    info: str
    rows: List[CaseRow] = Field(default_factory=list)

    model_config = {"frozen": True}


class SummaryLine(BaseModel):
    id: str
    text: str

    model_config = {"frozen": True}


class ReportDocument(BaseModel):
    """
    Finished report.  Built once by DocumentBuilder and never mutated;
    serialized to text by renderers.to_html().
    """

    title: str
    stylesheet: str = ""
    lines: List[SummaryLine] = Field(default_factory=list)
    index: Optional[IndexTable] = None
    sections: List[DetailSection] = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "forbid"}
