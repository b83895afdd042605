from __future__ import annotations

from io import BytesIO
from typing import Sequence

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from ..core.errors import RenderError
from ..core.types import RenderedReport, SalaryRecord
from .base import format_amount, total_salary, validate_records

MARGIN = 20 * mm
LINE_HEIGHT = 6 * mm
FONT = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
# Built-in Type 1 fonts are drawn with WinAnsiEncoding.
FONT_ENCODING = "cp1252"


class PdfSalaryReport:
    """以 reportlab 繪製 PDF 薪資報表。

    The canvas runs in invariant mode so identical records always yield
    byte-identical documents. Text is drawn with the built-in Helvetica
    fonts; ids, names, title or currency outside WinAnsiEncoding raise
    ``RenderError`` instead of being replaced with placeholder glyphs.
    """

    format = "pdf"
    media_type = "application/pdf"

    def __init__(
        self,
        title: str = "Employee Salaries",
        currency: str = "USD",
        compress: bool = True,
    ) -> None:
        self._title = title
        self._currency = currency
        self._compress = compress

    def render(self, records: Sequence[SalaryRecord]) -> RenderedReport:
        rows = validate_records(records)
        self._ensure_encodable(rows)
        buffer = BytesIO()
        page_width, page_height = A4
        pdf = canvas.Canvas(
            buffer,
            pagesize=A4,
            invariant=1,
            pageCompression=1 if self._compress else 0,
        )
        pdf.setTitle(self._title)

        columns = (MARGIN, MARGIN + 30 * mm, page_width - MARGIN)
        y = self._draw_header(pdf, page_height, columns)
        for row in rows:
            if y < MARGIN + LINE_HEIGHT:
                pdf.showPage()
                y = self._draw_header(pdf, page_height, columns)
            pdf.setFont(FONT, 10)
            pdf.drawString(columns[0], y, row.employee_id)
            pdf.drawString(columns[1], y, row.name)
            pdf.drawRightString(columns[2], y, format_amount(row.salary, self._currency))
            y -= LINE_HEIGHT

        if y < MARGIN + 2 * LINE_HEIGHT:
            pdf.showPage()
            y = page_height - MARGIN
        if not rows:
            pdf.setFont(FONT, 10)
            pdf.drawString(columns[0], y, "(no employees)")
            y -= LINE_HEIGHT
        pdf.setFont(FONT_BOLD, 11)
        pdf.drawString(columns[0], y - LINE_HEIGHT, f"Total ({len(rows)} employees)")
        pdf.drawRightString(
            columns[2], y - LINE_HEIGHT, format_amount(total_salary(rows), self._currency)
        )
        pdf.showPage()
        pdf.save()
        return RenderedReport(format=self.format, media_type=self.media_type, content=buffer.getvalue())

    def _draw_header(self, pdf: canvas.Canvas, page_height: float, columns: tuple) -> float:
        y = page_height - MARGIN
        pdf.setFont(FONT_BOLD, 16)
        pdf.drawString(columns[0], y, self._title)
        y -= 2 * LINE_HEIGHT
        pdf.setFont(FONT_BOLD, 10)
        pdf.drawString(columns[0], y, "ID")
        pdf.drawString(columns[1], y, "Name")
        pdf.drawRightString(columns[2], y, "Salary")
        return y - LINE_HEIGHT

    def _ensure_encodable(self, rows: Sequence[SalaryRecord]) -> None:
        for label, value in (("標題", self._title), ("幣別", self._currency)):
            if not _encodable(value):
                raise RenderError(f"PDF {label}含有內建字型無法顯示的字元：{value!r}")
        for index, row in enumerate(rows, start=1):
            if not (_encodable(row.employee_id) and _encodable(row.name)):
                raise RenderError(
                    f"第 {index} 筆紀錄（employee_id={row.employee_id!r}）含有 PDF 內建字型無法顯示的字元"
                )


def _encodable(value: str) -> bool:
    try:
        value.encode(FONT_ENCODING)
    except UnicodeEncodeError:
        return False
    return True
