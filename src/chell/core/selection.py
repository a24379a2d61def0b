"""Selecting which tests to run from command-line name filters."""

from typing import Sequence, TypeVar

T = TypeVar("T")


def matches_filter(filters: Sequence[str], name: str) -> bool:
    """Check whether a qualified test name is selected by any filter.

    A filter selects a test with exactly its name, or every test in the
    suite it names (``"a.b"`` selects ``"a.b.c"`` but not ``"a.bc"``).
    """
    return any(name == f or name.startswith(f + ".") for f in filters)


def select_tests(tests: Sequence[tuple[str, T]], filters: Sequence[str]) -> list[tuple[str, T]]:
    """Keep the tests matching any filter, in their original order."""
    if not filters:
        return list(tests)
    return [(name, t) for name, t in tests if matches_filter(filters, name)]
