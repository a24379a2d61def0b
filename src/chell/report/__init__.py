"""Report rendering in text, JSON and XML formats."""

from pathlib import Path

from chell.report.base import Reporter, Results
from chell.report.json_report import JsonReporter
from chell.report.statistics import ResultStatistics, format_result_statistics
from chell.report.text_report import TextReporter
from chell.report.xml_report import XmlReporter

REPORTERS: dict[str, type[Reporter]] = {
    "text": TextReporter,
    "json": JsonReporter,
    "xml": XmlReporter,
}


def get_reporter(format: str) -> Reporter:
    """Create the reporter for a format name (text, json or xml)."""
    try:
        return REPORTERS[format]()
    except KeyError:
        raise ValueError(f"Unknown report format: {format!r}") from None


def write_report(path: Path | str, reporter: Reporter, results: Results) -> Path:
    """Render a report and write it to ``path``, replacing any existing file.

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(path)
    document = reporter.render(results)
    with open(path, "wb") as f:
        f.write(document.encode("utf-8"))
    return path


__all__ = [
    "JsonReporter",
    "Reporter",
    "ResultStatistics",
    "TextReporter",
    "XmlReporter",
    "format_result_statistics",
    "get_reporter",
    "write_report",
]
