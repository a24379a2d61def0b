"""Core test model, suite trees and execution."""

from chell.core.assertions import Assertions, FatalAssertion, assertions, from_function
from chell.core.models import (
    Failure,
    Location,
    ResultKind,
    TestAborted,
    TestFailed,
    TestOptions,
    TestPassed,
    TestResult,
    TestSkipped,
)
from chell.core.runner import TestRunner, run_test
from chell.core.selection import matches_filter, select_tests
from chell.core.suite import Suite, SuiteTest, flatten, flatten_all, skip, skip_if, skip_when, suite, test

__all__ = [
    "Assertions",
    "FatalAssertion",
    "Failure",
    "Location",
    "ResultKind",
    "Suite",
    "SuiteTest",
    "TestAborted",
    "TestFailed",
    "TestOptions",
    "TestPassed",
    "TestResult",
    "TestRunner",
    "TestSkipped",
    "assertions",
    "flatten",
    "flatten_all",
    "from_function",
    "matches_filter",
    "run_test",
    "select_tests",
    "skip",
    "skip_if",
    "skip_when",
    "suite",
    "test",
]
