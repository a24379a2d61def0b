"""Chell - a small test framework with text, JSON and XML reports.

Tests are grouped into named suites, run one at a time, and their
outcomes (passed, skipped, failed or aborted) are written to the
console and to any number of report files.
"""

__version__ = "0.1.0"

from chell.cli import default_main
from chell.core import (
    Assertions,
    Failure,
    Location,
    TestAborted,
    TestFailed,
    TestOptions,
    TestPassed,
    TestResult,
    TestSkipped,
    assertions,
    from_function,
    skip,
    skip_if,
    skip_when,
    suite,
    test,
)

__all__ = [
    "Assertions",
    "Failure",
    "Location",
    "TestAborted",
    "TestFailed",
    "TestOptions",
    "TestPassed",
    "TestResult",
    "TestSkipped",
    "assertions",
    "default_main",
    "from_function",
    "skip",
    "skip_if",
    "skip_when",
    "suite",
    "test",
]
