"""Test execution."""

import threading
from typing import Optional, Protocol, Sequence

from chell.core.models import Note, TestAborted, TestOptions, TestResult
from chell.core.suite import TestBody
from chell.console import warn


class Output(Protocol):
    """Receives progress notifications while tests run."""

    def start(self, name: str) -> None: ...

    def result(self, name: str, result: TestResult) -> None: ...


def aborted_by_exception(exc: BaseException, notes: Sequence[Note] = ()) -> TestAborted:
    """Describe an unexpected exception as an aborted result."""
    return TestAborted(notes=list(notes), message=f"Test aborted due to exception: {exc!r}")


def effective_timeout(timeout_ms: Optional[int]) -> Optional[int]:
    """Return the timeout to use, or None if it cannot be honoured.

    Timeouts longer than the interpreter's maximum wait are ignored with a
    warning instead of failing the run.
    """
    if timeout_ms is None:
        return None
    if _exceeds_wait_bound(timeout_ms):
        warn("Ignoring --timeout because it is too large.")
        return None
    return timeout_ms


def _exceeds_wait_bound(timeout_ms: int) -> bool:
    return timeout_ms > threading.TIMEOUT_MAX * 1000


def run_test(body: TestBody, options: TestOptions) -> TestResult:
    """Run one test body, always producing exactly one result.

    Exceptions never escape: they are converted to TestAborted.
    """
    if options.timeout is None or _exceeds_wait_bound(options.timeout):
        return _run_body(body, options)

    outcome: list[TestResult] = []
    worker = threading.Thread(
        target=lambda: outcome.append(_run_body(body, options)),
        name="chell-test",
        daemon=True,
    )
    worker.start()
    worker.join(options.timeout / 1000)
    if worker.is_alive() or not outcome:
        # The worker cannot be killed; it is left to finish on its own.
        return TestAborted(message="Test timed out")
    return outcome[0]


def _run_body(body: TestBody, options: TestOptions) -> TestResult:
    try:
        result = body(options)
    except KeyboardInterrupt:
        raise
    except BaseException as e:
        return aborted_by_exception(e)
    if not isinstance(result, TestResult):
        return TestAborted(message=f"Test returned {result!r} instead of a test result")
    return result


class TestRunner:
    """Runs selected tests one at a time, in order."""

    __test__ = False

    def __init__(self, options: TestOptions, output: Optional[Output] = None):
        """Initialize the test runner.

        Args:
            options: Seed and timeout passed to every test
            output: Optional progress receiver, e.g. the console
        """
        self.options = options
        self.output = output

    def run(self, tests: Sequence[tuple[str, TestBody]]) -> list[tuple[str, TestResult]]:
        """Run each test and collect its result.

        Returns:
            (qualified name, result) pairs in the order the tests ran
        """
        results = []
        for name, body in tests:
            if self.output is not None:
                self.output.start(name)
            result = run_test(body, self.options)
            if self.output is not None:
                self.output.result(name, result)
            results.append((name, result))
        return results
