"""Base reporter interface and template rendering."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader

from chell.core.models import TestResult
from chell.output import format_location
from chell.report.statistics import ResultStatistics

Results = Sequence[tuple[str, TestResult]]


class Reporter(ABC):
    """Abstract base class for report formats."""

    # Format name shown to users, e.g. "JSON"
    name: str = ""

    @abstractmethod
    def render(self, results: Results) -> str:
        """Render a complete report document.

        Args:
            results: (qualified test name, result) pairs in run order

        Returns:
            The document text. The same input always gives the same text.
        """
        pass


class TemplateReporter(Reporter):
    """A reporter whose document comes from a Jinja2 template."""

    template_name: str = ""

    def __init__(self):
        template_dir = Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["location"] = format_location

    def render(self, results: Results) -> str:
        results = list(results)
        template = self.env.get_template(self.template_name)
        return template.render(
            results=results,
            summary=ResultStatistics.from_results(results).format(),
        )
