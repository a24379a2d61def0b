"""Parsable XML report."""

from chell.report.base import TemplateReporter

XML_NAMESPACE = "urn:john-millikin:chell:report:1"

_XML_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
}


def escape_xml(text: str) -> str:
    """Replace the five XML special characters with their entities."""
    return "".join(_XML_ENTITIES.get(c, c) for c in text)


class XmlReporter(TemplateReporter):
    """One ``<test-run>`` element per test inside a ``<report>`` root."""

    name = "XML"
    template_name = "report.xml"

    def __init__(self):
        super().__init__()
        self.env.filters["xml_escape"] = escape_xml
