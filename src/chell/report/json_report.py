"""Parsable JSON report.

The document is assembled by hand rather than with ``json.dumps`` so
that its layout and string escaping stay byte-for-byte stable:

    {"test-runs": [
      {"test": "a.b", "result": "passed", "notes": []}
    , {"test": "a.c", "result": "skipped"}]}
"""

from typing import Callable, Iterable, TypeVar

from chell.core.models import Failure, Note, ResultKind, TestResult
from chell.report.base import Reporter, Results

T = TypeVar("T")


def escape_json(text: str) -> str:
    """Escape quotes, backslashes and control characters.

    Control characters become ``\\uXXXX`` with uppercase hex digits; every
    other character is written unchanged.
    """
    chars = []
    for c in text:
        if c == '"':
            chars.append('\\"')
        elif c == "\\":
            chars.append("\\\\")
        elif ord(c) <= 0x1F:
            chars.append(f"\\u{ord(c):04X}")
        else:
            chars.append(c)
    return "".join(chars)


class _JsonWriter:
    """Accumulates document fragments."""

    def __init__(self):
        self.parts: list[str] = []

    def write(self, text: str) -> None:
        self.parts.append(text)

    def string(self, text: str) -> None:
        self.write('"' + escape_json(text) + '"')

    def elements(self, items: Iterable[T], write_item: Callable[[T], None]) -> None:
        """Write array elements, each on its own line, comma-first."""
        first = True
        for item in items:
            self.write("\n  " if first else "\n, ")
            first = False
            write_item(item)

    def getvalue(self) -> str:
        return "".join(self.parts)


class JsonReporter(Reporter):
    """A ``{"test-runs": [...]}`` object with one element per test."""

    name = "JSON"

    def render(self, results: Results) -> str:
        writer = _JsonWriter()
        writer.write('{"test-runs": [')
        writer.elements(
            [(name, result) for name, result in results if isinstance(result.kind, ResultKind)],
            lambda item: self._write_result(writer, *item),
        )
        writer.write("]}")
        return writer.getvalue()

    def _write_result(self, writer: _JsonWriter, name: str, result: TestResult) -> None:
        writer.write('{"test": ')
        writer.string(name)
        writer.write(', "result": ')
        writer.string(result.kind.value)

        if result.kind == ResultKind.FAILED:
            writer.write(', "failures": [')
            writer.elements(result.failures, lambda f: self._write_failure(writer, f))
            writer.write("]")
        elif result.kind == ResultKind.ABORTED:
            writer.write(', "abortion": {"message": ')
            writer.string(result.message)
            writer.write("}")

        if result.kind != ResultKind.SKIPPED:
            writer.write(', "notes": [')
            writer.elements(result.notes, lambda note: self._write_note(writer, note))
            writer.write("]")
        writer.write("}")

    def _write_failure(self, writer: _JsonWriter, failure: Failure) -> None:
        writer.write('{"message": ')
        writer.string(failure.message)
        location = failure.location
        if location is not None:
            writer.write(', "location": {"module": ')
            writer.string(location.module)
            writer.write(', "file": ')
            writer.string(location.file)
            if location.line is not None:
                writer.write(f', "line": {location.line}')
            writer.write("}")
        writer.write("}")

    def _write_note(self, writer: _JsonWriter, note: Note) -> None:
        key, value = note
        writer.write('{"key": ')
        writer.string(key)
        writer.write(', "value": ')
        writer.string(value)
        writer.write("}")
