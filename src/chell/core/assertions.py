"""Collecting assertion failures within a single test.

An ``Assertions`` context is passed to the test function. Non-fatal
checks (``expect``) record a failure and let the test continue; fatal
checks (``assert_``, ``fail``) record a failure and stop the test.

    @assertions
    def test_addition(t):
        t.expect(1 + 1 == 2, "one plus one")
        t.assert_(2 + 2 == 4)
        t.note("checked", "addition")

When no location is given, the caller's file and line are recorded.
"""

import functools
import inspect
from typing import Callable, NoReturn, Optional

from chell.core.models import (
    Failure,
    Location,
    Note,
    TestFailed,
    TestOptions,
    TestPassed,
    TestResult,
)
from chell.core.runner import aborted_by_exception
from chell.core.suite import TestBody


class FatalAssertion(Exception):
    """Raised to stop the current test after a fatal assertion failed."""

    pass


class Assertions:
    """Failures and notes recorded so far by one test."""

    def __init__(self, options: Optional[TestOptions] = None):
        self.options = options or TestOptions()
        self.failures: list[Failure] = []
        self.notes: list[Note] = []

    def expect(
        self,
        condition: bool,
        message: str = "boolean assertion failed",
        location: Optional[Location] = None,
    ) -> bool:
        """Record a failure if ``condition`` is false, and keep going."""
        if not condition:
            self.failures.append(Failure(message, location or _caller_location()))
        return bool(condition)

    def assert_(
        self,
        condition: bool,
        message: str = "boolean assertion failed",
        location: Optional[Location] = None,
    ) -> None:
        """Record a failure and stop the test if ``condition`` is false."""
        if not condition:
            self.failures.append(Failure(message, location or _caller_location()))
            raise FatalAssertion(message)

    def fail(self, message: str, location: Optional[Location] = None) -> NoReturn:
        """Fail the test immediately."""
        self.failures.append(Failure(message, location or _caller_location()))
        raise FatalAssertion(message)

    def note(self, key: str, value: str) -> None:
        """Attach a key/value note to the test's result."""
        self.notes.append((key, value))

    def trace(self, message: str) -> None:
        """Print a debugging message."""
        print(message)

    def result(self) -> TestResult:
        if self.failures:
            return TestFailed(notes=list(self.notes), failures=list(self.failures))
        return TestPassed(notes=list(self.notes))


def _caller_location() -> Optional[Location]:
    frame = inspect.currentframe()
    # Skip this helper and the Assertions method that called it.
    caller = frame.f_back.f_back if frame is not None and frame.f_back is not None else None
    if caller is None:
        return None
    return Location.from_frame(caller)


def assertions(fn: Callable[[Assertions], object]) -> TestBody:
    """Turn a function taking an ``Assertions`` context into a test body."""

    @functools.wraps(fn)
    def body(options: TestOptions) -> TestResult:
        ctx = Assertions(options)
        try:
            fn(ctx)
        except FatalAssertion:
            pass
        except KeyboardInterrupt:
            raise
        except BaseException as e:
            return aborted_by_exception(e, notes=ctx.notes)
        return ctx.result()

    return body


def from_function(fn: Callable[[], object]) -> TestBody:
    """Wrap a plain function that signals failure with ``AssertionError``.

    This lets ``assert``-style test functions run unchanged: returning
    normally passes, an ``AssertionError`` fails with its message and the
    line in the test's module that raised it, and anything else aborts.
    """

    @functools.wraps(fn)
    def body(options: TestOptions) -> TestResult:
        try:
            fn()
        except AssertionError as e:
            message = str(e) or "assertion failed"
            location = _raise_location(e, getattr(fn, "__module__", None))
            return TestFailed(failures=[Failure(message, location)])
        except KeyboardInterrupt:
            raise
        except BaseException as e:
            return aborted_by_exception(e)
        return TestPassed()

    return body


def _raise_location(exc: BaseException, module: Optional[str]) -> Optional[Location]:
    """Locate the deepest traceback frame that belongs to ``module``.

    Falls back to the deepest frame overall when none of them do.
    """
    deepest = in_module = None
    tb = exc.__traceback__
    while tb is not None:
        deepest = tb
        if tb.tb_frame.f_globals.get("__name__") == module:
            in_module = tb
        tb = tb.tb_next
    tb = in_module or deepest
    if tb is None:
        return None
    frame = tb.tb_frame
    return Location(
        module=frame.f_globals.get("__name__", ""),
        file=frame.f_code.co_filename,
        line=tb.tb_lineno,
    )
