"""Convert in-memory rows to downloadable spreadsheet and document files.

Rows are plain dicts; their keys become the column headers.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Optional, Sequence

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import LongTable, Paragraph, SimpleDocTemplate, Spacer, TableStyle

from ..common.datetime_utils import format_display_date
from ..core.enums import AttendanceStatus
from ..students.model import Student
from ..attendance.model import AttendanceRecord

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
PDF_MIMETYPE = "application/pdf"

NOT_AVAILABLE = "N/A"
PAGE_MARGIN = 10 * mm


@dataclass(frozen=True)
class ExportFile:
    content: bytes
    filename: str
    mimetype: str


def export_to_excel(rows: Sequence[dict], filename: str, *, columns: Optional[Sequence[str]] = None) -> ExportFile:
    df = pd.DataFrame(list(rows), columns=list(columns) if columns else None)

    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Sheet1")
    return ExportFile(content=out.getvalue(), filename=f"{filename}.xlsx", mimetype=XLSX_MIMETYPE)


def export_to_pdf(
    rows: Sequence[dict],
    filename: str,
    *,
    title: str,
    columns: Optional[Sequence[str]] = None,
) -> ExportFile:
    """Lay the rows out as a table over as many A4 pages as needed.

    The header row repeats at the top of every page.
    """

    headers = list(columns) if columns else (list(rows[0].keys()) if rows else [])
    styles = getSampleStyleSheet()
    cell_style = styles["BodyText"]
    cell_style.fontSize = 8
    cell_style.leading = 10

    story = [Paragraph(title, styles["Title"]), Spacer(1, 4 * mm)]
    if not rows or not headers:
        story.append(Paragraph("No records.", styles["Normal"]))
    else:
        data = [[Paragraph(f"<b>{h}</b>", cell_style) for h in headers]]
        for row in rows:
            data.append([Paragraph(_cell_text(row.get(h)), cell_style) for h in headers])

        table = LongTable(data, repeatRows=1)
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#f97316")),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                    ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#f3f4f6")]),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ]
            )
        )
        story.append(table)

    out = io.BytesIO()
    doc = SimpleDocTemplate(
        out,
        pagesize=A4,
        leftMargin=PAGE_MARGIN,
        rightMargin=PAGE_MARGIN,
        topMargin=PAGE_MARGIN,
        bottomMargin=PAGE_MARGIN,
        title=title,
    )
    doc.build(story)
    return ExportFile(content=out.getvalue(), filename=f"{filename}.pdf", mimetype=PDF_MIMETYPE)


def _cell_text(value) -> str:
    if value is None:
        return ""
    # Paragraph parses a small markup language
    return str(value).replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


ATTENDANCE_COLUMNS = ("Student Name", "Registration No", "Date", "Status", "Department")
STUDENT_COLUMNS = (
    "Registration No",
    "Name",
    "Department",
    "Year",
    "Semester",
    "Blood Group",
    "Phone",
    "Email",
    "Address",
)


def format_attendance_for_export(attendance: Sequence[AttendanceRecord], students: Sequence[Student]) -> list[dict]:
    student_map = {s.id: s for s in students}

    out: list[dict] = []
    for record in attendance:
        student = student_map.get(record.student_id)
        status = record.status.label if isinstance(record.status, AttendanceStatus) else str(record.status).capitalize()
        out.append(
            {
                "Student Name": student.name if student else NOT_AVAILABLE,
                "Registration No": student.reg_no if student else NOT_AVAILABLE,
                "Date": format_display_date(record.date),
                "Status": status,
                "Department": student.department.code if student and student.department else NOT_AVAILABLE,
            }
        )
    return out


def format_students_for_export(students: Sequence[Student]) -> list[dict]:
    return [
        {
            "Registration No": s.reg_no,
            "Name": s.name,
            "Department": s.department.code if s.department else NOT_AVAILABLE,
            "Year": s.year.label if s.year else NOT_AVAILABLE,
            "Semester": s.semester.number if s.semester else NOT_AVAILABLE,
            "Blood Group": s.blood_group or "",
            "Phone": s.phone or "",
            "Email": s.email or "",
            "Address": s.address or "",
        }
        for s in students
    ]
