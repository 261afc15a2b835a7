"""Tests for data models."""

import pytest
from datetime import date

from staff_roster.models import (
    Notification,
    NotificationType,
    Roster,
    RosterConfig,
    Shift,
    ShiftCategory,
    StaffMember,
    SwapRequest,
    SwapStatus,
    Weekday,
)


class TestWeekday:
    """Tests for the Weekday enumeration."""

    @pytest.mark.parametrize(
        "day,expected",
        [
            (date(2024, 6, 3), Weekday.MON),
            (date(2024, 6, 5), Weekday.WED),
            (date(2024, 6, 8), Weekday.SAT),
            (date(2024, 6, 9), Weekday.SUN),
        ],
    )
    def test_of_date(self, day: date, expected: Weekday):
        """Weekday.of follows date.weekday()."""
        assert Weekday.of(day) == expected

    def test_labels(self):
        """Labels are three-letter names starting Monday."""
        assert [d.label for d in Weekday] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

    def test_weekend(self):
        """Only Saturday and Sunday are weekend days."""
        assert [d for d in Weekday if d.is_weekend] == [Weekday.SAT, Weekday.SUN]


class TestStaffMember:
    """Tests for the StaffMember enumeration."""

    def test_canonical_order(self):
        """The enumeration has exactly four members in a fixed order."""
        assert [s.value for s in StaffMember] == ["Ashley", "Peninah", "Joflix", "Locum"]

    def test_str_is_name(self):
        assert str(StaffMember.LOCUM) == "Locum"


class TestShift:
    """Tests for Shift validation."""

    def test_empty_eligibility_raises_error(self):
        """A shift must have at least one eligible staff member."""
        with pytest.raises(ValueError, match="at least one eligible"):
            Shift(
                id="x",
                date=date(2024, 6, 3),
                weekday="Mon",
                category=ShiftCategory.FULL_DAY,
                label="24h",
                hours=24,
                assignee=None,
                eligible=[],
            )

    def test_ineligible_assignee_raises_error(self):
        """An assignee outside the eligibility set is rejected."""
        with pytest.raises(ValueError, match="not eligible"):
            Shift(
                id="2024-06-08-day",
                date=date(2024, 6, 8),
                weekday="Sat",
                category=ShiftCategory.DAY,
                label="Day 12h",
                hours=12,
                assignee=StaffMember.ASHLEY,
                eligible=[StaffMember.JOFLIX],
            )

    def test_single_eligible_is_locked(self, locked_shift: Shift):
        assert locked_shift.is_locked

    def test_multiple_eligible_not_locked(self, weekday_shift: Shift):
        assert not weekday_shift.is_locked

    def test_slot_is_date_and_category(self, weekday_shift: Shift):
        assert weekday_shift.slot == (date(2024, 6, 3), ShiftCategory.FULL_DAY)


class TestRoster:
    """Tests for Roster calculations."""

    def test_end_date(self):
        """End date is start + weeks*7 - 1."""
        roster = Roster(id="r", name="R", start_date=date(2024, 6, 3), weeks=4)
        assert roster.end_date == date(2024, 6, 30)

    def test_zero_weeks_raises_error(self):
        with pytest.raises(ValueError, match="at least one week"):
            Roster(id="r", name="R", start_date=date(2024, 6, 3), weeks=0)

    def test_get_shift(self, four_week_roster: Roster):
        shift = four_week_roster.get_shift("2024-06-08-night")
        assert shift.category == ShiftCategory.NIGHT

    def test_get_shift_raises_for_unknown(self, four_week_roster: Roster):
        with pytest.raises(LookupError, match="not found"):
            four_week_roster.get_shift("2030-01-01-day")

    def test_touch_bumps_updated_at(self, four_week_roster: Roster):
        before = four_week_roster.updated_at
        four_week_roster.touch()
        assert four_week_roster.updated_at >= before

    def test_summary_counts_shifts(self, four_week_roster: Roster):
        summary = four_week_roster.summary()
        assert summary.shift_count == 36
        assert summary.end_date == date(2024, 6, 30)
        assert summary.name == "June"


class TestRosterConfig:
    """Tests for RosterConfig validation."""

    @pytest.mark.parametrize("weeks", [0, 13, -1])
    def test_invalid_weeks_raises_error(self, weeks: int):
        with pytest.raises(ValueError, match="between 1 and 12"):
            RosterConfig(start_date=date(2024, 6, 3), weeks=weeks)

    @pytest.mark.parametrize("weeks", [1, 4, 12])
    def test_valid_weeks_accepted(self, weeks: int):
        config = RosterConfig(start_date=date(2024, 6, 3), weeks=weeks)
        assert config.total_days == weeks * 7

    def test_defaults(self):
        config = RosterConfig(start_date=date(2024, 6, 3))
        assert config.weeks == 4
        assert config.name is None
        assert config.allow_unassign_locked is False


class TestSwapRequestAndNotification:
    """Tests for swap request and notification defaults."""

    def test_new_swap_request_is_pending(self):
        request = SwapRequest(
            id="s",
            roster_id="r",
            shift_id="2024-06-03-24h",
            from_staff=StaffMember.ASHLEY,
            to_staff=StaffMember.PENINAH,
        )
        assert request.status == SwapStatus.PENDING
        assert request.is_pending
        assert request.responded_at is None

    def test_notification_mark_read(self):
        notification = Notification(
            id="n",
            staff_member=StaffMember.JOFLIX,
            type=NotificationType.SHIFT_ASSIGNED,
            title="t",
            message="m",
        )
        assert not notification.read
        notification.mark_read()
        assert notification.read
