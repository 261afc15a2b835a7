"""Shared fixtures for staff-roster tests."""

import pytest
from datetime import date

from staff_roster.generator import RosterGenerator
from staff_roster.models import Roster, Shift, ShiftCategory, StaffMember
from staff_roster.service import RosterService
from staff_roster.store import RosterStore
from staff_roster.validator import AssignmentValidator

MONDAY = date(2024, 6, 3)


@pytest.fixture
def monday() -> date:
    """A Monday to start rosters on."""
    return MONDAY


@pytest.fixture
def one_week_shifts() -> list[Shift]:
    """Default shifts for the week of 3 June 2024."""
    return RosterGenerator(MONDAY, 1).generate()


@pytest.fixture
def four_week_roster() -> Roster:
    """A generated but not stored four-week roster."""
    return RosterGenerator(MONDAY, 4).build_roster("June")


@pytest.fixture
def locked_shift() -> Shift:
    """Saturday day shift, which only Joflix can work."""
    return Shift(
        id="2024-06-08-day",
        date=date(2024, 6, 8),
        weekday="Sat",
        category=ShiftCategory.DAY,
        label="Day 12h",
        hours=12,
        assignee=StaffMember.JOFLIX,
        eligible=[StaffMember.JOFLIX],
    )


@pytest.fixture
def weekday_shift() -> Shift:
    """Monday 24h shift, open to every staff member."""
    return Shift(
        id="2024-06-03-24h",
        date=date(2024, 6, 3),
        weekday="Mon",
        category=ShiftCategory.FULL_DAY,
        label="24h",
        hours=24,
        assignee=StaffMember.ASHLEY,
        eligible=list(StaffMember),
    )


@pytest.fixture
def store() -> RosterStore:
    return RosterStore(AssignmentValidator())


@pytest.fixture
def service(store: RosterStore) -> RosterService:
    return RosterService(store)
