"""
Eligibility, default assignment and duration rules for each shift slot.

The rules are a fixed lookup over (weekday, shift category) and, for the
rotating weekend and Friday slots, the zero-based week index within the roster.
"""

from datetime import date
from typing import List

from .models import ShiftCategory, StaffMember, Weekday

ALL_STAFF: List[StaffMember] = list(StaffMember)

# Joflix never works Saturday night or Sunday
WEEKEND_STAFF: List[StaffMember] = [
    StaffMember.ASHLEY,
    StaffMember.PENINAH,
    StaffMember.LOCUM,
]

# From this week index on, Saturday night and Friday go to the locum
LOCUM_CUTOVER_WEEK = 3

WEEKDAY_HOURS = 24
WEEKEND_HOURS = 12


def eligible_staff(day: date, category: ShiftCategory) -> List[StaffMember]:
    """Return the staff permitted to work the given slot, in canonical order."""
    weekday = Weekday.of(day)

    if weekday == Weekday.SAT and category == ShiftCategory.DAY:
        return [StaffMember.JOFLIX]
    if weekday == Weekday.SAT:
        return list(WEEKEND_STAFF)
    if weekday == Weekday.SUN:
        return list(WEEKEND_STAFF)
    return list(ALL_STAFF)


def _alternate(
    week_index: int, even: StaffMember, odd: StaffMember
) -> StaffMember:
    return even if week_index % 2 == 0 else odd


def default_assignee(
    day: date, category: ShiftCategory, week_index: int
) -> StaffMember | None:
    """
    Return the staff member assigned to a slot by default.

    Args:
        day: Calendar date of the shift
        category: Shift category
        week_index: Zero-based week within the roster

    Returns:
        The default assignee, or None if the rules leave the slot open
    """
    weekday = Weekday.of(day)

    if weekday == Weekday.SAT:
        if category == ShiftCategory.DAY:
            return StaffMember.JOFLIX
        if category == ShiftCategory.NIGHT:
            if week_index >= LOCUM_CUTOVER_WEEK:
                return StaffMember.LOCUM
            return _alternate(week_index, StaffMember.ASHLEY, StaffMember.PENINAH)
        return None

    if weekday == Weekday.SUN:
        if category == ShiftCategory.DAY:
            return _alternate(week_index, StaffMember.ASHLEY, StaffMember.PENINAH)
        if category == ShiftCategory.NIGHT:
            # Opposite phase to Sunday day
            return _alternate(week_index, StaffMember.PENINAH, StaffMember.ASHLEY)
        return None

    if weekday == Weekday.MON:
        return StaffMember.ASHLEY
    if weekday == Weekday.TUE:
        return StaffMember.PENINAH
    if weekday in (Weekday.WED, Weekday.THU):
        # 48h block
        return StaffMember.JOFLIX
    if weekday == Weekday.FRI:
        if week_index >= LOCUM_CUTOVER_WEEK:
            return StaffMember.LOCUM
        return StaffMember.PENINAH

    return None


def shift_hours(weekday: Weekday, category: ShiftCategory) -> int:
    """Duration of a shift in hours."""
    if not weekday.is_weekend:
        return WEEKDAY_HOURS
    if category in (ShiftCategory.DAY, ShiftCategory.NIGHT):
        return WEEKEND_HOURS
    return WEEKDAY_HOURS


def shift_categories(weekday: Weekday) -> List[ShiftCategory]:
    """Categories emitted for a day, in chronological order."""
    if weekday.is_weekend:
        return [ShiftCategory.DAY, ShiftCategory.NIGHT]
    return [ShiftCategory.FULL_DAY]


def shift_label(category: ShiftCategory, hours: int) -> str:
    """Human-readable label, e.g. 'Day 12h' or '24h'."""
    if category == ShiftCategory.FULL_DAY:
        return f"{hours}h"
    return f"{category.value} {hours}h"
