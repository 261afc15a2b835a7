"""
Slot-by-slot comparison of two rosters.

Shifts are aligned by (date, category) rather than by id, so rosters generated
independently over overlapping dates still line up.
"""

from datetime import date
from typing import Dict, Iterable, List, Tuple

from .models import Shift, ShiftCategory, ShiftComparison

SlotKey = Tuple[date, ShiftCategory]


def _index_by_slot(shifts: Iterable[Shift]) -> Dict[SlotKey, Shift]:
    return {shift.slot: shift for shift in shifts}


def compare_shifts(
    shifts_a: Iterable[Shift], shifts_b: Iterable[Shift]
) -> List[ShiftComparison]:
    """
    Compare the assignees of two shift sequences.

    Args:
        shifts_a: Shifts of the first roster
        shifts_b: Shifts of the second roster

    Returns:
        One entry per slot present on either side, ordered by date then
        category. A slot missing on one side counts as unassigned there.
    """
    by_slot_a = _index_by_slot(shifts_a)
    by_slot_b = _index_by_slot(shifts_b)

    keys = sorted(
        set(by_slot_a) | set(by_slot_b),
        key=lambda key: (key[0], key[1].sort_order),
    )

    comparisons = []
    for key in keys:
        shift_a = by_slot_a.get(key)
        shift_b = by_slot_b.get(key)
        reference = shift_a or shift_b

        assignee_a = shift_a.assignee if shift_a else None
        assignee_b = shift_b.assignee if shift_b else None

        comparisons.append(
            ShiftComparison(
                date=reference.date,
                weekday=reference.weekday,
                category=reference.category,
                assignee_a=assignee_a,
                assignee_b=assignee_b,
                changed=assignee_a != assignee_b,
            )
        )

    return comparisons


def count_changes(comparisons: Iterable[ShiftComparison]) -> int:
    """Number of slots whose assignee differs."""
    return sum(1 for comparison in comparisons if comparison.changed)
