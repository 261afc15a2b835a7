"""
Export strategies for roster data.

This module implements the Strategy Pattern for exporting rosters to various
formats. Each exporter encapsulates a specific output format.
"""

import csv
from abc import ABC, abstractmethod
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from .analytics import summarize_hours
from .models import Roster, Shift, StaffHours, StaffMember

UNASSIGNED = "Unassigned"

COLUMNS = ["Date", "Weekday", "Shift", "Assigned", "Hours"]


class ExportStrategy(ABC):
    """Abstract base class for roster export strategies.

    Subclasses implement specific export formats (CSV, Excel, etc.).
    Common helper methods for data transformation are provided here.
    """

    def __init__(self, roster: Roster):
        """Initialize the export strategy.

        Args:
            roster: The roster to export
        """
        self.roster = roster

    @abstractmethod
    def export(self, filepath: str | Path) -> None:
        """Export roster to the specified file.

        Args:
            filepath: Path to the output file
        """
        pass

    def _shift_row(self, shift: Shift) -> list:
        """One row per shift: date, weekday, label, assignee, hours."""
        return [
            shift.date.isoformat(),
            shift.weekday,
            shift.label,
            shift.assignee.value if shift.assignee else UNASSIGNED,
            shift.hours,
        ]

    def _staff_hours(self) -> list[StaffHours]:
        return summarize_hours(self.roster.shifts)


class RosterCSVExporter(ExportStrategy):
    """Exports roster as CSV.

    Output format: Date, Weekday, Shift, Assigned, Hours
    One row per shift, unassigned shifts marked "Unassigned".
    """

    def export(self, filepath: str | Path) -> None:
        """Export roster to CSV file.

        Args:
            filepath: Path to the output CSV file
        """
        with open(filepath, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(COLUMNS)
            for shift in self.roster.shifts:
                writer.writerow(self._shift_row(shift))

        print(f"\n✓ Roster exported to {filepath}")


class RosterExcelExporter(ExportStrategy):
    """Exports roster as an Excel workbook.

    Output format:
    - Frozen header row: Date, Weekday, Shift, Assigned, Hours
    - One row per shift, assigned cell filled with the staff colour
    - Weekend weekday cells shaded
    - "Staff Hours Summary" block three rows below the last shift
    """

    SHEET_TITLE = "Roster"

    # (fill, font colour) per staff member
    STAFF_COLORS = {
        StaffMember.JOFLIX: ("FFFB923C", "FFFFFFFF"),
        StaffMember.PENINAH: ("FFF9A8D4", "FF831843"),
        StaffMember.ASHLEY: ("FF60A5FA", "FFFFFFFF"),
        StaffMember.LOCUM: ("FF9CA3AF", "FFFFFFFF"),
    }
    WEEKEND_FILLS = {"Sat": "FFE0E7FF", "Sun": "FFEDE9FE"}
    HEADER_FILL = "FFE5E7EB"
    STRIPE_FILL = "FFF9FAFB"
    COLUMN_WIDTHS = [15, 10, 12, 15, 8]

    ASSIGNED_COLUMN = 4

    def export(self, filepath: str | Path) -> None:
        """Export roster to an .xlsx file.

        Args:
            filepath: Path to the output workbook
        """
        wb = self.build_workbook()
        wb.save(filepath)

        print(f"\n✓ Roster exported to {filepath} (Excel format)")

    def build_workbook(self) -> Workbook:
        wb = Workbook()
        ws = wb.active
        ws.title = self.SHEET_TITLE
        ws.freeze_panes = "A2"

        self._write_header(ws)

        for index, shift in enumerate(self.roster.shifts):
            self._write_shift_row(ws, index + 2, shift, striped=index % 2 == 1)

        self._write_summary(ws, self.summary_start_row)
        return wb

    @property
    def summary_start_row(self) -> int:
        """Row of the summary title, leaving two blank rows after the table."""
        return len(self.roster.shifts) + 4

    def _write_header(self, ws) -> None:
        header_fill = self._fill(self.HEADER_FILL)
        for col, (title, width) in enumerate(zip(COLUMNS, self.COLUMN_WIDTHS), start=1):
            cell = ws.cell(row=1, column=col, value=title)
            cell.font = Font(bold=True, size=11)
            cell.fill = header_fill
            cell.alignment = Alignment(horizontal="center", vertical="center")
            cell.border = self._border()
            ws.column_dimensions[cell.column_letter].width = width
        ws.row_dimensions[1].height = 24

    def _write_shift_row(self, ws, row: int, shift: Shift, striped: bool) -> None:
        for col, value in enumerate(self._shift_row(shift), start=1):
            cell = ws.cell(row=row, column=col, value=value)
            cell.alignment = Alignment(vertical="center")
            cell.border = self._border()
            if striped:
                cell.fill = self._fill(self.STRIPE_FILL)

        if shift.weekday in self.WEEKEND_FILLS:
            ws.cell(row=row, column=2).fill = self._fill(self.WEEKEND_FILLS[shift.weekday])

        if shift.assignee is not None:
            fill, font_color = self.STAFF_COLORS[shift.assignee]
            assigned = ws.cell(row=row, column=self.ASSIGNED_COLUMN)
            assigned.fill = self._fill(fill)
            assigned.font = Font(color=font_color, bold=True)

        hours = ws.cell(row=row, column=5)
        hours.alignment = Alignment(horizontal="right", vertical="center")
        hours.number_format = "0"
        ws.row_dimensions[row].height = 22

    def _write_summary(self, ws, start_row: int) -> None:
        title = ws.cell(row=start_row, column=1, value="Staff Hours Summary")
        title.font = Font(bold=True, size=12)

        for offset, entry in enumerate(self._staff_hours(), start=1):
            fill, font_color = self.STAFF_COLORS[entry.staff]
            name = ws.cell(row=start_row + offset, column=1, value=entry.staff.value)
            name.fill = self._fill(fill)
            name.font = Font(color=font_color, bold=True)
            ws.cell(row=start_row + offset, column=2, value=f"{entry.total_hours} hours")

    @staticmethod
    def _fill(argb: str) -> PatternFill:
        return PatternFill(fill_type="solid", fgColor=argb)

    @staticmethod
    def _border() -> Border:
        side = Side(style="thin", color="FFE5E7EB")
        return Border(top=side, left=side, bottom=side, right=side)
