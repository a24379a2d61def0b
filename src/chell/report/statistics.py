"""Result counts and the summary line shared by every report."""

from dataclasses import dataclass
from typing import Iterable

from chell.core.models import ResultKind, TestResult


@dataclass(frozen=True)
class ResultStatistics:
    """How many tests ended in each outcome."""

    passed: int = 0
    skipped: int = 0
    failed: int = 0
    aborted: int = 0

    @property
    def total(self) -> int:
        return self.passed + self.skipped + self.failed + self.aborted

    @property
    def succeeded(self) -> bool:
        """True when no test failed or aborted."""
        return self.failed == 0 and self.aborted == 0

    @classmethod
    def from_results(cls, results: Iterable[tuple[str, TestResult]]) -> "ResultStatistics":
        """Count results by kind; results of unknown kinds are not counted."""
        counts = {kind: 0 for kind in ResultKind}
        for _, result in results:
            if result.kind in counts:
                counts[result.kind] += 1
        return cls(
            passed=counts[ResultKind.PASSED],
            skipped=counts[ResultKind.SKIPPED],
            failed=counts[ResultKind.FAILED],
            aborted=counts[ResultKind.ABORTED],
        )

    def format(self) -> str:
        return format_result_statistics(self)


def format_result_statistics(stats: ResultStatistics) -> str:
    """Render the one-line summary, e.g. ``PASS: 2 tests run, 2 tests passed``."""

    def count(n: int, what: str) -> str:
        return f"1 test {what}" if n == 1 else f"{n} tests {what}"

    parts = [count(stats.total, "run"), count(stats.passed, "passed")]
    if stats.skipped > 0:
        parts.append(count(stats.skipped, "skipped"))
    if stats.failed > 0:
        parts.append(count(stats.failed, "failed"))
    if stats.aborted > 0:
        parts.append(count(stats.aborted, "aborted"))

    prefix = "PASS: " if stats.succeeded else "FAIL: "
    return prefix + ", ".join(parts)
