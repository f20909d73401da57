"""Report generation for filtered activities."""

from daily_report.report.formatters import DateFormatter, DefaultDateFormatter
from daily_report.report.generators import (
    ConfigurableReportGenerator,
    MarkdownReportGenerator,
    ReportGenerator,
    TemplateReportGenerator,
    supports_configuration,
)
from daily_report.report.templates import (
    HtmlTemplate,
    MarkdownTemplate,
    ReportTemplate,
    TextTemplate,
)

__all__ = [
    "DateFormatter",
    "DefaultDateFormatter",
    "ConfigurableReportGenerator",
    "MarkdownReportGenerator",
    "ReportGenerator",
    "TemplateReportGenerator",
    "supports_configuration",
    "HtmlTemplate",
    "MarkdownTemplate",
    "ReportTemplate",
    "TextTemplate",
]
