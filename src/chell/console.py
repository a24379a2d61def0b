"""Rich consoles for results, warnings and errors."""

from typing import IO, Literal, Optional

from rich.console import Console
from rich.markup import escape

ColorMode = Literal["always", "auto", "never"]


def make_console(color: ColorMode = "auto", file: Optional[IO[str]] = None) -> Console:
    """Create the console used for results and the final summary."""
    if color == "always":
        return Console(file=file, force_terminal=True, soft_wrap=True)
    if color == "never":
        return Console(file=file, color_system=None, soft_wrap=True)
    return Console(file=file, soft_wrap=True)


def stderr_console() -> Console:
    """Console for warnings and errors."""
    return Console(stderr=True, soft_wrap=True)


def warn(message: str) -> None:
    stderr_console().print(f"[yellow]Warning:[/yellow] {escape(message)}")


def error(message: str) -> None:
    stderr_console().print(f"[red]Error:[/red] {escape(message)}")
