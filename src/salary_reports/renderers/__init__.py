"""Bundled report renderers."""

from .base import ReportRenderer, validate_records
from .markdown import MarkdownSalaryReport
from .pdf import PdfSalaryReport
from .plain_text import PlainTextSalaryReport

__all__ = [
    "MarkdownSalaryReport",
    "PdfSalaryReport",
    "PlainTextSalaryReport",
    "ReportRenderer",
    "validate_records",
]
