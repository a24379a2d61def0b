"""Human-readable plain text report."""

from chell.report.base import TemplateReporter


class TextReporter(TemplateReporter):
    """One block per test, followed by the summary line."""

    name = "text"
    template_name = "text.txt"
