"""Live console output while tests are running."""

from rich.console import Console
from rich.text import Text

from chell.core.models import Location, ResultKind, TestResult

STATUS_STYLES = {
    ResultKind.PASSED: ("PASSED", "bold green"),
    ResultKind.SKIPPED: ("SKIPPED", "bold yellow"),
    ResultKind.FAILED: ("FAILED", "bold red"),
    ResultKind.ABORTED: ("ABORTED", "bold red"),
}


class ConsoleOutput:
    """Prints each result as it arrives, in the text report layout.

    Passed and skipped tests are only shown in verbose mode.
    """

    def __init__(self, console: Console, verbose: bool = False):
        self.console = console
        self.verbose = verbose

    def start(self, name: str) -> None:
        if self.verbose:
            self.console.print(Text(f"Running: {name}", style="dim"))

    def result(self, name: str, result: TestResult) -> None:
        if result.kind not in STATUS_STYLES:
            return
        if result.kind in (ResultKind.PASSED, ResultKind.SKIPPED) and not self.verbose:
            return

        label, style = STATUS_STYLES[result.kind]
        lines = [Text("=" * 70), Text.assemble((label, style), f": {name}")]
        for key, value in getattr(result, "notes", []):
            lines.append(Text(f"{key}={value}"))

        if result.kind == ResultKind.FAILED:
            lines.append(Text("-" * 70))
            for failure in result.failures:
                if failure.location is not None:
                    lines.append(Text(format_location(failure.location), style="cyan"))
                lines.append(Text(failure.message))
                lines.append(Text(""))
        elif result.kind == ResultKind.ABORTED:
            lines.append(Text("-" * 70))
            lines.append(Text(result.message))
            lines.append(Text(""))

        for line in lines:
            self.console.print(line)


def format_location(location: Location) -> str:
    """Render a location as ``file:line``, or just ``file`` without a line."""
    if location.line is None:
        return location.file
    return f"{location.file}:{location.line}"
