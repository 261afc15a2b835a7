"""
Hours aggregation and fairness statistics over a sequence of shifts.
"""

import math
import statistics
from dataclasses import dataclass
from typing import Dict, Iterable, List

from .models import Shift, StaffHours, StaffMember, Weekday


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return math.floor(value + 0.5)


@dataclass
class FairnessMetrics:
    """Spread of total hours across staff."""

    standard_deviation: float
    max_hours: int
    min_hours: int
    avg_hours: float
    fairness_score: int


@dataclass
class WeekdayCoverage:
    """How many of a weekday's shifts have an assignee."""

    weekday: str
    total: int
    assigned: int

    @property
    def coverage(self) -> int:
        """Assigned share in whole percent."""
        if self.total == 0:
            return 0
        return round_half_up(self.assigned / self.total * 100)


def summarize_hours(shifts: Iterable[Shift]) -> List[StaffHours]:
    """
    Total hours and shift count per staff member.

    Every staff member appears, in canonical order, even with zero hours.
    Unassigned shifts are ignored.
    """
    totals: Dict[StaffMember, StaffHours] = {
        staff: StaffHours(staff=staff) for staff in StaffMember
    }

    for shift in shifts:
        if shift.assignee is None:
            continue
        entry = totals[shift.assignee]
        entry.total_hours += shift.hours
        entry.shift_count += 1

    return list(totals.values())


def coverage_gaps(shifts: Iterable[Shift]) -> List[Shift]:
    """Shifts that have nobody assigned."""
    return [shift for shift in shifts if shift.assignee is None]


def fairness_metrics(hours: List[StaffHours]) -> FairnessMetrics:
    """
    Compute the spread of hours between staff members.

    The fairness score is 100 minus the coefficient of variation as a
    percentage, clamped to 0..100. An all-zero roster scores 100.
    """
    if not hours:
        return FairnessMetrics(0.0, 0, 0, 0.0, 100)

    totals = [entry.total_hours for entry in hours]
    avg = statistics.fmean(totals)
    std_dev = statistics.pstdev(totals)

    if avg > 0:
        score = max(0.0, min(100.0, 100 - (std_dev / avg) * 100))
    else:
        score = 100.0

    return FairnessMetrics(
        standard_deviation=round(std_dev, 1),
        max_hours=max(totals),
        min_hours=min(totals),
        avg_hours=round(avg, 1),
        fairness_score=round_half_up(score),
    )


def weekday_coverage(shifts: Iterable[Shift]) -> List[WeekdayCoverage]:
    """Assigned versus total shifts for each weekday, Monday first."""
    coverage = {day.label: WeekdayCoverage(day.label, 0, 0) for day in Weekday}

    for shift in shifts:
        entry = coverage[shift.weekday]
        entry.total += 1
        if shift.assignee is not None:
            entry.assigned += 1

    return list(coverage.values())
