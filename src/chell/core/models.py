"""Data models for test outcomes and the per-run test context."""

from dataclasses import dataclass, field
from enum import Enum
from types import FrameType
from typing import Optional

Note = tuple[str, str]


class ResultKind(str, Enum):
    """Outcome of a single test run."""

    PASSED = "passed"
    SKIPPED = "skipped"
    FAILED = "failed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class Location:
    """Where in the source an assertion failed."""

    module: str
    file: str
    line: Optional[int] = None

    @classmethod
    def from_frame(cls, frame: FrameType) -> "Location":
        """Create from a Python stack frame."""
        return cls(
            module=frame.f_globals.get("__name__", ""),
            file=frame.f_code.co_filename,
            line=frame.f_lineno,
        )


@dataclass(frozen=True)
class Failure:
    """A single recorded assertion failure."""

    message: str
    location: Optional[Location] = None


@dataclass(frozen=True)
class TestResult:
    """Base class for the outcome variants.

    Reporters and statistics recognise exactly the four subclasses below,
    by their ``kind``. Any other subclass is ignored by both.
    """

    __test__ = False

    kind: Optional[ResultKind] = field(default=None, init=False)


@dataclass(frozen=True)
class TestPassed(TestResult):
    """The test completed without recording any failure."""

    notes: list[Note] = field(default_factory=list)
    kind: ResultKind = field(default=ResultKind.PASSED, init=False)


@dataclass(frozen=True)
class TestSkipped(TestResult):
    """The test body was never run."""

    kind: ResultKind = field(default=ResultKind.SKIPPED, init=False)


@dataclass(frozen=True)
class TestFailed(TestResult):
    """The test recorded one or more assertion failures."""

    notes: list[Note] = field(default_factory=list)
    failures: list[Failure] = field(default_factory=list)
    kind: ResultKind = field(default=ResultKind.FAILED, init=False)


@dataclass(frozen=True)
class TestAborted(TestResult):
    """The test hit an unexpected error and could not finish."""

    notes: list[Note] = field(default_factory=list)
    message: str = ""
    kind: ResultKind = field(default=ResultKind.ABORTED, init=False)


@dataclass(frozen=True)
class TestOptions:
    """Per-run context handed to every test body.

    ``timeout`` is in milliseconds; ``None`` disables it.
    """

    __test__ = False

    seed: int = 0
    timeout: Optional[int] = None
