"""Tests for the command line entry point."""

from pathlib import Path

from html_test_reporter.__main__ import main
from html_test_reporter.cli import parse_args

FIXTURES = Path(__file__).parent / "fixtures"
RESULTS_FILE = FIXTURES / "jest-results.json"


def test_parse_args_defaults():
    args = parse_args([str(RESULTS_FILE)])
    assert args.results == RESULTS_FILE
    assert args.output_path is None
    assert args.page_title is None
    assert args.enable_test_report_category is None
    assert args.include_failure_msg is None


def test_main_writes_report(tmp_path, capsys):
    dest = tmp_path / "out" / "report.html"
    assert main([str(RESULTS_FILE), "-o", str(dest), "--project-dir", str(tmp_path)]) == 0
    assert dest.exists()
    assert "Report generated" in capsys.readouterr().out


def test_main_flags_override_manifest(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        '[tool.html-test-reporter]\npageTitle = "Manifest"\n'
    )
    dest = tmp_path / "report.html"
    rc = main([
        str(RESULTS_FILE), "-o", str(dest), "--project-dir", str(tmp_path),
        "--title", "Flag", "--category", "--failure-messages",
    ])
    assert rc == 0
    html = dest.read_text()
    assert "<title>Flag</title>" in html
    assert "Positive TC Count" in html
    assert "Expected true" in html


def test_main_uses_manifest_output_path(tmp_path):
    dest = tmp_path / "from-manifest.html"
    (tmp_path / "pyproject.toml").write_text(
        f'[tool.html-test-reporter]\noutputPath = "{dest.as_posix()}"\n'
    )
    assert main([str(RESULTS_FILE), "--project-dir", str(tmp_path)]) == 0
    assert dest.exists()


def test_main_missing_results_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.json"), "--project-dir", str(tmp_path)]) == 1
    assert "Error:" in capsys.readouterr().err


def test_main_report_failure_does_not_change_exit_status(tmp_path, capsys):
    dest = tmp_path / "report.html"
    rc = main([
        str(RESULTS_FILE), "-o", str(dest), "--project-dir", str(tmp_path),
        "--style-override", str(tmp_path / "missing.css"),
    ])
    assert rc == 0
    assert not dest.exists()
    assert "styleOverridePath" in capsys.readouterr().err


def test_main_project_dir_from_other_cwd(tmp_path, monkeypatch, capsys):
    project = tmp_path / "proj"
    project.mkdir()
    (project / "report.css").write_text("body > h1 { color: teal; }\n")
    (project / "pyproject.toml").write_text(
        '[tool.html-test-reporter]\n'
        'outputPath = "out/r.html"\n'
        'styleOverridePath = "report.css"\n'
    )
    monkeypatch.chdir(tmp_path)
    assert main([str(RESULTS_FILE), "--project-dir", "proj"]) == 0
    html = (project / "out" / "r.html").read_text()
    assert "body > h1 { color: teal; }" in html
    assert "Report generated" in capsys.readouterr().out


def test_main_invalid_manifest_value_falls_back(tmp_path):
    (tmp_path / "package.json").write_text('{"html-jest-reporter": {"pageTitle": 2024}}')
    dest = tmp_path / "report.html"
    assert main([str(RESULTS_FILE), "-o", str(dest), "--project-dir", str(tmp_path)]) == 0
    assert "<title>Test suite</title>" in dest.read_text()


def test_main_flags_can_disable_manifest_options(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        '[tool.html-test-reporter]\nenableTestReportCategory = true\nincludeFailureMsg = true\n'
    )
    dest = tmp_path / "report.html"
    rc = main([
        str(RESULTS_FILE), "-o", str(dest), "--project-dir", str(tmp_path),
        "--no-category", "--no-failure-messages",
    ])
    assert rc == 0
    html = dest.read_text()
    assert "Positive TC Count" not in html
    assert "failureMessages" not in html


def test_parse_args_negated_flags():
    args = parse_args([str(RESULTS_FILE), "--no-category", "--failure-messages"])
    assert args.enable_test_report_category is False
    assert args.include_failure_msg is True
