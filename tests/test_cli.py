"""Tests for the command-line interface."""

import json
import threading

import pytest
from click.testing import CliRunner

from chell.cli import build_command, default_main, run_suites
from chell.config import ReportTarget, RunConfig
from chell.core.assertions import assertions
from chell.core.suite import skip, suite, test


@assertions
def adds(t):
    t.expect(1 + 1 == 2)


@assertions
def broken(t):
    t.expect(1 + 1 == 3, "math is broken")


@assertions
def records_seed(t):
    t.note("seed", str(t.options.seed))


def crashes(options):
    raise RuntimeError("boom")


PASSING = suite("math", test("add", adds), test("skip", skip))
FAILING = suite("bad", test("broken", broken))


def invoke(suites, *args):
    runner = CliRunner()
    return runner.invoke(build_command(suites), ["--color", "never", *args])


class TestRunCommand:
    """Tests for the run command."""

    def test_all_passing(self):
        """Test that a clean run exits successfully with a PASS summary."""
        result = invoke([PASSING])

        assert result.exit_code == 0
        assert result.output.endswith("PASS: 2 tests run, 1 test passed, 1 test skipped\n")

    def test_failure_exits_non_zero(self):
        """Test that a failed test fails the process."""
        result = invoke([PASSING, FAILING])

        assert result.exit_code == 1
        assert "FAILED: bad.broken" in result.output
        assert "math is broken" in result.output
        assert result.output.endswith(
            "FAIL: 3 tests run, 1 test passed, 1 test skipped, 1 test failed\n"
        )

    def test_abort_exits_non_zero(self):
        """Test that an aborted test fails the process."""
        result = invoke([suite("s", test("crash", crashes))])

        assert result.exit_code == 1
        assert "Test aborted due to exception: RuntimeError('boom')" in result.output

    def test_quiet_hides_passing_tests(self):
        """Test that passing tests are not listed without --verbose."""
        result = invoke([PASSING])
        assert "PASSED" not in result.output

    def test_filter_by_test_name(self):
        """Test selecting a single test."""
        result = invoke([PASSING, FAILING], "math.add")

        assert result.exit_code == 0
        assert result.output.endswith("PASS: 1 test run, 1 test passed\n")

    def test_filter_by_suite_name(self):
        """Test selecting a whole suite."""
        result = invoke([PASSING, FAILING], "bad")

        assert result.exit_code == 1
        assert result.output.endswith("FAIL: 1 test run, 0 tests passed, 1 test failed\n")

    def test_filter_matching_nothing(self):
        """Test that selecting nothing is a successful empty run."""
        result = invoke([PASSING], "nothing.here")

        assert result.exit_code == 0
        assert result.output.endswith("PASS: 0 tests run, 0 tests passed\n")

    def test_verbose(self, tmp_path):
        """Test the extra output of verbose mode."""
        path = tmp_path / "out.json"

        result = invoke([PASSING], "-v", "--seed", "5", "--json-report", str(path))

        assert "Using seed 5" in result.output
        assert "PASSED: math.add" in result.output
        assert "SKIPPED: math.skip" in result.output
        assert f"Writing JSON report to {str(path)!r}" in result.output

    def test_writes_all_reports(self, tmp_path):
        """Test that every requested report file is written."""
        json_path = tmp_path / "report.json"
        xml_path = tmp_path / "report.xml"
        text_path = tmp_path / "report.txt"

        result = invoke(
            [PASSING, FAILING],
            "--json-report",
            str(json_path),
            "--xml-report",
            str(xml_path),
            "--text-report",
            str(text_path),
        )

        assert result.exit_code == 1
        runs = json.loads(json_path.read_text(encoding="utf-8"))["test-runs"]
        assert [run["test"] for run in runs] == ["math.add", "math.skip", "bad.broken"]
        assert xml_path.read_text(encoding="utf-8").endswith("</report>")
        assert text_path.read_text(encoding="utf-8").endswith(
            "FAIL: 3 tests run, 1 test passed, 1 test skipped, 1 test failed"
        )

    def test_seed_reaches_tests(self, tmp_path):
        """Test that --seed is passed to every test."""
        path = tmp_path / "report.json"

        invoke([suite("s", test("seed", records_seed))], "--seed", "1234", "--json-report", str(path))

        runs = json.loads(path.read_text(encoding="utf-8"))["test-runs"]
        assert runs[0]["notes"] == [{"key": "seed", "value": "1234"}]

    def test_timeout_aborts_slow_test(self):
        """Test that --timeout aborts tests that run too long."""
        release = threading.Event()

        def slow(options):
            release.wait(10)
            return adds(options)

        try:
            result = invoke([suite("s", test("slow", slow))], "--timeout", "50")
        finally:
            release.set()

        assert result.exit_code == 1
        assert "Test timed out" in result.output

    def test_huge_timeout_ignored(self):
        """Test that a timeout too large to honour warns and still runs the tests."""
        result = invoke([PASSING], "--timeout", "1" + "0" * 400)

        assert result.exit_code == 0
        assert "Ignoring --timeout because it is too large." in result.output
        assert "PASS: 2 tests run, 1 test passed, 1 test skipped" in result.output

    def test_invalid_option_value(self):
        """Test that malformed options print usage and run nothing."""
        result = invoke([PASSING], "--timeout", "soon")

        assert result.exit_code == 2
        assert "Usage:" in result.output
        assert "tests run" not in result.output

    def test_missing_config_file(self):
        """Test that a missing config file is an error."""
        result = invoke([PASSING], "--config", "/nonexistent/chell.json")

        assert result.exit_code == 1
        assert "Configuration file not found" in result.output

    def test_config_file(self, tmp_path):
        """Test that options can come from a config file."""
        report = tmp_path / "from-config.xml"
        config = tmp_path / "chell.json"
        config.write_text(json.dumps({"reports": [{"path": str(report), "format": "xml"}]}))

        result = invoke([PASSING], "--config", str(config))

        assert result.exit_code == 0
        assert report.exists()

    def test_report_write_failure(self, tmp_path):
        """Test that an unwritable report destination is fatal."""
        path = tmp_path / "missing" / "report.json"

        result = invoke([PASSING], "--json-report", str(path))

        assert result.exit_code == 1
        assert "Could not write JSON report" in result.output
        assert "tests run" not in result.output


class TestRunSuites:
    """Tests for run_suites."""

    def test_returns_exit_status(self, capsys):
        """Test the exit status for passing and failing runs."""
        assert run_suites([PASSING], RunConfig(color="never")) == 0
        assert run_suites([FAILING], RunConfig(color="never")) == 1

    def test_writes_configured_report(self, tmp_path, capsys):
        """Test that configured reports are written."""
        path = tmp_path / "out.txt"
        config = RunConfig(color="never", reports=[ReportTarget(path=str(path), format="text")])

        run_suites([PASSING], config)

        assert path.read_text(encoding="utf-8").endswith("1 test skipped")


class TestDefaultMain:
    """Tests for default_main."""

    def test_exits_with_status(self, capsys):
        """Test that default_main exits the process with the run outcome."""
        with pytest.raises(SystemExit) as exc_info:
            default_main([PASSING], ["--color", "never"])

        assert exc_info.value.code == 0
        assert "PASS: 2 tests run" in capsys.readouterr().out

    def test_exits_non_zero_on_failure(self, capsys):
        """Test that failures give a non-zero exit."""
        with pytest.raises(SystemExit) as exc_info:
            default_main([FAILING], ["--color", "never"])

        assert exc_info.value.code == 1
