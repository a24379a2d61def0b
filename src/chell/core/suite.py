"""Suite trees and test name resolution."""

from dataclasses import dataclass, field
from typing import Callable, Iterable

from chell.core.models import TestOptions, TestResult, TestSkipped

TestBody = Callable[[TestOptions], TestResult]


@dataclass(frozen=True)
class SuiteNode:
    """A named node in a suite tree."""

    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Suite and test names cannot be empty")


@dataclass(frozen=True)
class Suite(SuiteNode):
    """An internal node grouping other suites and tests."""

    children: tuple[SuiteNode, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SuiteTest(SuiteNode):
    """A leaf node holding a runnable test body."""

    __test__ = False

    body: TestBody

    def __post_init__(self) -> None:
        super().__post_init__()
        if not callable(self.body):
            raise TypeError(f"Test {self.name!r} has no runnable body")


def suite(name: str, *children: SuiteNode) -> Suite:
    """Group tests and sub-suites under a common name."""
    return Suite(name=name, children=tuple(children))


def test(name: str, body: TestBody) -> SuiteTest:
    """Give a test body a name so it can be placed in a suite."""
    return SuiteTest(name=name, body=body)


test.__test__ = False  # type: ignore[attr-defined]


def flatten(root: SuiteNode) -> list[tuple[str, TestBody]]:
    """Return every test in the tree with its fully-qualified name.

    Traversal is depth-first and left-to-right. Each name is the
    dot-joined chain of ancestor names ending with the test's own name.
    """
    tests: list[tuple[str, TestBody]] = []

    def walk(node: SuiteNode, prefix: str) -> None:
        name = f"{prefix}.{node.name}" if prefix else node.name
        if isinstance(node, SuiteTest):
            tests.append((name, node.body))
        elif isinstance(node, Suite):
            for child in node.children:
                walk(child, name)

    walk(root, "")
    return tests


def flatten_all(suites: Iterable[SuiteNode]) -> list[tuple[str, TestBody]]:
    """Flatten several suites, keeping their order and any duplicate names."""
    tests: list[tuple[str, TestBody]] = []
    for root in suites:
        tests.extend(flatten(root))
    return tests


def skip(options: TestOptions) -> TestResult:
    """A test which is always skipped."""
    return TestSkipped()


def skip_if(predicate: Callable[[], bool], body: TestBody) -> TestBody:
    """Skip ``body`` whenever ``predicate`` returns true at run time."""

    def skippable(options: TestOptions) -> TestResult:
        if predicate():
            return TestSkipped()
        return body(options)

    return skippable


def skip_when(condition: bool, body: TestBody) -> TestBody:
    """Skip ``body`` if ``condition`` was already true when the tree was built."""
    return skip if condition else body
