"""HTML report renderer.

Turns a RunResult into a ReportDocument: summary lines, a suite index table
and one detail table per suite.  No HTML strings live in this file; markup
is produced from the document by templates/report.html.j2.
"""

import re
from datetime import datetime, timezone
from enum import Enum
from typing import Any, FrozenSet, List, Mapping, Optional, Union

from ..config import ReporterConfig
from ..errors import InputError
from ..schema import CaseResult, CaseRow, CaseStatus, Cell, ReportDocument, RunResult, SuiteResult
from .document import DocumentBuilder, create_document

ANCESTRY_SEPARATOR = " > "
POSITIVE_PREFIX = "P_"
NEGATIVE_PREFIX = "N_"

# CSI and OSC escape sequences (colors, cursor movement, hyperlinks).
_ANSI_RE = re.compile(
    r"[\x1b\x9b][\[\]()#;?]*"
    r"(?:(?:(?:(?:;[-a-zA-Z\d/#&.:=?%@~_]+)*|[a-zA-Z\d]+(?:;[-a-zA-Z\d/#&.:=?%@~_]*)*)?\x07)"
    r"|(?:(?:\d{1,4}(?:;\d{0,4})*)?[\dA-PR-TZcf-ntqry=><~]))"
)


class Category(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    UNCATEGORIZED = "uncategorized"


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------

def classify(title: str) -> FrozenSet[Category]:
    """Categories a case title belongs to, by P_/N_ naming convention.

    The two prefixes are checked independently, so the result is a set.
    """
    found = set()
    if title.startswith(POSITIVE_PREFIX):
        found.add(Category.POSITIVE)
    if title.startswith(NEGATIVE_PREFIX):
        found.add(Category.NEGATIVE)
    return frozenset(found or {Category.UNCATEGORIZED})


def strip_ansi(text: str) -> str:
    """Remove terminal escape sequences, keeping all other text verbatim."""
    return _ANSI_RE.sub("", text)


def _seconds(ms: Optional[float]) -> str:
    """Milliseconds as seconds: 1500 -> '1.5', 2000 -> '2'."""
    value = (ms or 0) / 1000
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _format_start(start_ms: float) -> str:
    return datetime.fromtimestamp(start_ms / 1000, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")


def _ancestry(case: CaseResult) -> str:
    return ANCESTRY_SEPARATOR.join(case.ancestor_titles)


def _visible_suites(run: RunResult) -> List[SuiteResult]:
    """Suites with at least one case; empty suites never produce output."""
    return [s for s in run.test_results if s.test_results]


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

def _add_summary(doc: DocumentBuilder, run: RunResult) -> None:
    doc.add_line("timestamp", f"Start: {_format_start(run.start_time)}")
    doc.add_line(
        "suiteSummary",
        f"{run.num_total_test_suites} TestSuites / "
        f"{run.num_passed_test_suites} TestSuites Passed / "
        f"{run.num_failed_test_suites} TestSuites Failed",
    )
    doc.add_line(
        "summary",
        f"{run.num_total_tests} tests / "
        f"{run.num_passed_tests} passed / "
        f"{run.num_failed_tests} failed / "
        f"{run.num_pending_tests} pending",
    )


def _index_header(with_categories: bool) -> List[Cell]:
    names = ["Name", "TC Count"]
    if with_categories:
        names += ["Positive TC Count", "Negative TC Count"]
    names += ["Passed", "Failed"]
    return [Cell(text="S.No", css_class="suiteFirst")] + [Cell(text=n) for n in names]


def _index_cells(seq: int, suite: SuiteResult, with_categories: bool) -> List[Cell]:
    cases = suite.test_results or []
    pos_total = pos_passed = neg_total = neg_passed = 0
    for case in cases:
        categories = classify(case.title)
        passed = case.status == CaseStatus.PASSED
        if Category.POSITIVE in categories:
            pos_total += 1
            pos_passed += passed
        if Category.NEGATIVE in categories:
            neg_total += 1
            neg_passed += passed

    # The label comes from the first case only, even when later cases sit
    # under different describe blocks.
    values: List[Any] = [_ancestry(cases[0]), len(cases)]
    if with_categories:
        values += [
            pos_total,
            neg_total,
            f"P = {pos_passed} N = {neg_passed}",
            f"P = {pos_total - pos_passed} N = {neg_total - neg_passed}",
        ]
    else:
        # Uncategorized cases are counted as failed here.
        passed_total = pos_passed + neg_passed
        values += [passed_total, len(cases) - passed_total]
    return [Cell(text=str(seq), css_class="suiteFirst")] + [Cell(text=str(v)) for v in values]


def _case_row(case: CaseResult, include_failure_msg: bool) -> CaseRow:
    messages: List[str] = []
    if include_failure_msg and case.failure_messages:
        messages = [strip_ansi(m) for m in case.failure_messages]
    if case.status == CaseStatus.PASSED:
        result = f"{case.status} in {_seconds(case.duration)}s"
    else:
        result = case.status
    return CaseRow(
        status=case.status,
        ancestry=_ancestry(case),
        title=case.title,
        failure_messages=messages,
        result=result,
    )


# ---------------------------------------------------------------------------
# Public render entry point
# ---------------------------------------------------------------------------

def render(
    run_result: Union[RunResult, Mapping[str, Any], None],
    stylesheet: str,
    config: ReporterConfig,
) -> ReportDocument:
    """Build the report document for run_result.  Raises InputError when it is missing."""
    if run_result is None:
        raise InputError("Test data missing or malformed")
    if not isinstance(run_result, RunResult):
        run_result = RunResult.model_validate(run_result)

    doc = create_document(config.page_title, stylesheet)
    _add_summary(doc, run_result)

    suites = _visible_suites(run_result)
    with_categories = config.enable_test_report_category
    doc.set_index(_index_header(with_categories))
    for seq, suite in enumerate(suites, start=1):
        row_class = "failedTestRow" if suite.num_failing_tests else "passedTestRow"
        doc.add_index_row(row_class, _index_cells(seq, suite, with_categories))

    for suite in suites:
        elapsed = suite.perf_stats.end - suite.perf_stats.start
        doc.add_section(
            f"{suite.test_file_path} ({_seconds(elapsed)}s)",
            [_case_row(case, config.include_failure_msg) for case in suite.test_results],
        )

    return doc.build()
