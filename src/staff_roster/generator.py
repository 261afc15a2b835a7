"""
Roster generation from the fixed shift rules.
"""

import logging
import uuid
from datetime import date, timedelta
from typing import List

from .models import Roster, RosterConfig, Shift, ShiftCategory, Weekday
from .rules import (
    default_assignee,
    eligible_staff,
    shift_categories,
    shift_hours,
    shift_label,
)

logger = logging.getLogger(__name__)


def align_to_monday(day: date) -> date:
    """Return the Monday of the week containing `day`."""
    return day - timedelta(days=day.weekday())


def shift_id(day: date, category: ShiftCategory) -> str:
    """Stable shift id derived from date and category, e.g. '2024-06-08-night'."""
    return f"{day.isoformat()}-{category.value.lower()}"


class RosterGenerator:
    """Builds the shift calendar for a planning period."""

    def __init__(self, start_date: date, weeks: int):
        self.start_date = align_to_monday(start_date)
        self.weeks = weeks

        if self.start_date != start_date:
            logger.debug("Aligned start date %s to Monday %s", start_date, self.start_date)

    @classmethod
    def from_config(cls, config: RosterConfig) -> "RosterGenerator":
        return cls(config.start_date, config.weeks)

    @property
    def total_days(self) -> int:
        return self.weeks * 7

    @property
    def end_date(self) -> date:
        return self.start_date + timedelta(days=self.total_days - 1)

    def generate(self) -> List[Shift]:
        """
        Generate every shift in the planning period.

        Returns:
            Shifts in chronological order, Day before Night on the same date
        """
        shifts = []

        for k in range(self.total_days):
            day = self.start_date + timedelta(days=k)
            week_index = k // 7
            weekday = Weekday.of(day)

            for category in shift_categories(weekday):
                shifts.append(self._build_shift(day, weekday, category, week_index))

        logger.info(
            "Generated %d shifts for %s to %s (%d weeks)",
            len(shifts),
            self.start_date,
            self.end_date,
            self.weeks,
        )
        return shifts

    def build_roster(self, name: str | None = None) -> Roster:
        """Generate shifts and wrap them in a new, not yet persisted roster."""
        return Roster(
            id=str(uuid.uuid4()),
            name=name or f"Roster from {self.start_date.isoformat()}",
            start_date=self.start_date,
            weeks=self.weeks,
            shifts=self.generate(),
        )

    def _build_shift(
        self, day: date, weekday: Weekday, category: ShiftCategory, week_index: int
    ) -> Shift:
        hours = shift_hours(weekday, category)
        return Shift(
            id=shift_id(day, category),
            date=day,
            weekday=weekday.label,
            category=category,
            label=shift_label(category, hours),
            hours=hours,
            assignee=default_assignee(day, category, week_index),
            eligible=eligible_staff(day, category),
        )


def generate_shifts(start_date: date, weeks: int) -> List[Shift]:
    """Generate the shifts for `weeks` weeks starting the Monday of `start_date`."""
    return RosterGenerator(start_date, weeks).generate()
