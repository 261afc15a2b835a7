"""
Reporting and output formatting for rosters.
"""

import pandas as pd
from typing import List

from .analytics import (
    coverage_gaps,
    fairness_metrics,
    summarize_hours,
    weekday_coverage,
)
from .differ import count_changes
from .models import Roster, ShiftComparison


def _staff_name(staff) -> str:
    return staff.value if staff is not None else "-"


class RosterReporter:
    """Formats and displays a roster."""

    def __init__(self, roster: Roster):
        self.roster = roster

    def print_report(self, quiet: bool) -> None:
        """Print complete roster report."""
        self._print_header()
        self._print_daily_roster()
        self._print_staff_hours()

        if not quiet:
            self._print_fairness()
            self._print_weekday_coverage()
            self._print_coverage_gaps()

    def shifts_dataframe(self) -> pd.DataFrame:
        """One row per shift, in roster order."""
        return pd.DataFrame(
            [
                {
                    "Date": shift.date,
                    "Weekday": shift.weekday,
                    "Shift": shift.label,
                    "Assigned": _staff_name(shift.assignee),
                    "Hours": shift.hours,
                    "Eligible": ", ".join(s.value for s in shift.eligible),
                }
                for shift in self.roster.shifts
            ],
            columns=["Date", "Weekday", "Shift", "Assigned", "Hours", "Eligible"],
        )

    def hours_dataframe(self) -> pd.DataFrame:
        """Total hours and shift count per staff member, indexed by name."""
        data = [
            {
                "Staff": entry.staff.value,
                "Total Hours": entry.total_hours,
                "Shifts": entry.shift_count,
            }
            for entry in summarize_hours(self.roster.shifts)
        ]
        return pd.DataFrame(data).set_index("Staff")

    def _print_title(self, title: str) -> None:
        print("=" * 80)
        print(title)
        print("=" * 80)

    def _print_header(self) -> None:
        """Print report header."""
        self._print_title(f"ROSTER: {self.roster.name}")

        print(f"\nPlanning Period: {self.roster.start_date} to {self.roster.end_date}")
        print(f"Weeks: {self.roster.weeks}")
        print(f"Total Shifts: {len(self.roster.shifts)}")
        print()

    def _print_daily_roster(self) -> None:
        """Print shift-by-shift roster."""
        self._print_title("DAILY ROSTER")

        for shift in self.roster.shifts:
            lock = " (locked)" if shift.is_locked else ""
            print(
                f"{shift.date.strftime('%Y-%m-%d')} {shift.weekday} "
                f"{shift.label:10s} {_staff_name(shift.assignee):10s}{lock}"
            )
        print()

    def _print_staff_hours(self) -> None:
        """Print staff hours summary table."""
        self._print_title("STAFF HOURS")

        print(self.hours_dataframe().to_string())
        print()

    def _print_fairness(self) -> None:
        self._print_title("FAIRNESS")

        metrics = fairness_metrics(summarize_hours(self.roster.shifts))
        print(f"  Average hours:      {metrics.avg_hours:.1f}")
        print(f"  Standard deviation: {metrics.standard_deviation:.1f}")
        print(f"  Range:              {metrics.min_hours} to {metrics.max_hours} hours")
        print(f"  Fairness score:     {metrics.fairness_score}/100")
        print()

    def _print_weekday_coverage(self) -> None:
        self._print_title("WEEKDAY COVERAGE")

        data = [
            {
                "Weekday": entry.weekday,
                "Shifts": entry.total,
                "Assigned": entry.assigned,
                "Coverage %": entry.coverage,
            }
            for entry in weekday_coverage(self.roster.shifts)
        ]
        print(pd.DataFrame(data).set_index("Weekday").to_string())
        print()

    def _print_coverage_gaps(self) -> None:
        """Print shifts with nobody assigned."""
        self._print_title("COVERAGE GAPS")

        gaps = coverage_gaps(self.roster.shifts)
        if not gaps:
            print("\n✓ Every shift is assigned")
            print()
            return

        for shift in gaps:
            print(f"  {shift.date.strftime('%Y-%m-%d (%a)')} {shift.label}")
        print()


class ComparisonReporter:
    """Formats a slot-by-slot comparison of two rosters."""

    def __init__(
        self,
        comparisons: List[ShiftComparison],
        label_a: str = "A",
        label_b: str = "B",
    ):
        self.comparisons = comparisons
        self.label_a = label_a
        self.label_b = label_b

    def comparison_dataframe(self, changed_only: bool = False) -> pd.DataFrame:
        rows = [
            {
                "Date": c.date,
                "Weekday": c.weekday,
                "Shift": c.category.value,
                self.label_a: _staff_name(c.assignee_a),
                self.label_b: _staff_name(c.assignee_b),
                "Changed": "*" if c.changed else "",
            }
            for c in self.comparisons
            if c.changed or not changed_only
        ]
        return pd.DataFrame(
            rows,
            columns=["Date", "Weekday", "Shift", self.label_a, self.label_b, "Changed"],
        )

    def print_report(self, quiet: bool) -> None:
        print("=" * 80)
        print(f"COMPARISON: {self.label_a} vs {self.label_b}")
        print("=" * 80)

        changes = count_changes(self.comparisons)
        suffix = "" if changes == 1 else "s"
        print(f"\n{changes} difference{suffix} across {len(self.comparisons)} slots\n")

        df = self.comparison_dataframe(changed_only=quiet)
        if not df.empty:
            print(df.to_string(index=False))
            print()
