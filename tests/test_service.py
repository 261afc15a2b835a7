"""Tests for the roster service."""

import pytest
from datetime import date

from staff_roster.models import NotificationType, RosterConfig, StaffMember, SwapStatus
from staff_roster.service import RosterService
from staff_roster.store import RecordNotFoundError
from staff_roster.validator import IneligibleStaffError


class TestGenerateRoster:
    """Tests for roster generation through the service."""

    def test_generate_stores_active_roster(self, service: RosterService):
        roster = service.generate_roster(date(2024, 6, 3), 4, "June")

        assert service.store.get_active_roster() is roster
        assert len(roster.shifts) == 36
        assert roster.name == "June"

    @pytest.mark.parametrize("weeks", [0, 13])
    def test_weeks_out_of_range(self, service: RosterService, weeks: int):
        with pytest.raises(ValueError, match="between 1 and 12"):
            service.generate_roster(date(2024, 6, 3), weeks)

    def test_generate_from_config(self, service: RosterService):
        config = RosterConfig(start_date=date(2024, 6, 5), weeks=2, name="Mid-week start")
        roster = service.generate_from_config(config)

        assert roster.start_date == date(2024, 6, 3)
        assert roster.name == "Mid-week start"
        assert len(roster.shifts) == 18
        assert service.resolve_roster().id == roster.id

    def test_resolve_without_active_roster(self, service: RosterService):
        with pytest.raises(RecordNotFoundError, match="No active roster"):
            service.resolve_roster()


class TestReassignShift:
    """Tests for manual reassignment."""

    def test_reassign_active_roster_and_notify(self, service: RosterService):
        service.generate_roster(date(2024, 6, 3), 1)

        shift = service.reassign_shift("2024-06-07-24h", StaffMember.LOCUM)

        assert shift.assignee == StaffMember.LOCUM
        notes = service.store.list_notifications(StaffMember.LOCUM)
        assert len(notes) == 1
        assert notes[0].type == NotificationType.SHIFT_ASSIGNED
        assert notes[0].related_shift_id == "2024-06-07-24h"

    def test_reassign_specific_roster(self, service: RosterService):
        first = service.generate_roster(date(2024, 6, 3), 1)
        service.generate_roster(date(2024, 6, 3), 1)

        service.reassign_shift("2024-06-03-24h", StaffMember.PENINAH, roster_id=first.id)

        assert first.get_shift("2024-06-03-24h").assignee == StaffMember.PENINAH
        assert service.resolve_roster().get_shift("2024-06-03-24h").assignee == StaffMember.ASHLEY

    def test_same_assignee_does_not_notify(self, service: RosterService):
        service.generate_roster(date(2024, 6, 3), 1)
        service.reassign_shift("2024-06-03-24h", StaffMember.ASHLEY)
        assert service.store.list_notifications() == []

    def test_ineligible_reassign_rejected(self, service: RosterService):
        service.generate_roster(date(2024, 6, 3), 1)

        with pytest.raises(IneligibleStaffError):
            service.reassign_shift("2024-06-08-day", StaffMember.ASHLEY)
        assert service.store.list_notifications() == []


class TestSwapWorkflow:
    """Tests for requesting and answering swaps."""

    def test_request_notifies_target(self, service: RosterService):
        service.generate_roster(date(2024, 6, 3), 1)

        request = service.request_swap(
            "2024-06-09-night", StaffMember.PENINAH, StaffMember.LOCUM, "Holiday"
        )

        notes = service.store.list_notifications(StaffMember.LOCUM)
        assert len(notes) == 1
        assert notes[0].type == NotificationType.SWAP_REQUEST
        assert notes[0].related_swap_id == request.id
        assert "Peninah" in notes[0].message

    def test_approve_updates_shift_and_notifies_requester(self, service: RosterService):
        roster = service.generate_roster(date(2024, 6, 3), 1)
        request = service.request_swap("2024-06-09-night", StaffMember.PENINAH, StaffMember.LOCUM)

        service.respond_to_swap(request.id, approve=True)

        assert request.status == SwapStatus.APPROVED
        assert roster.get_shift("2024-06-09-night").assignee == StaffMember.LOCUM
        notes = service.store.list_notifications(StaffMember.PENINAH)
        assert notes[0].type == NotificationType.SWAP_RESPONSE
        assert "approved" in notes[0].message

    def test_reject_leaves_shift(self, service: RosterService):
        roster = service.generate_roster(date(2024, 6, 3), 1)
        request = service.request_swap("2024-06-09-night", StaffMember.PENINAH, StaffMember.LOCUM)

        service.respond_to_swap(request.id, approve=False)

        assert request.status == SwapStatus.REJECTED
        assert roster.get_shift("2024-06-09-night").assignee == StaffMember.PENINAH
        assert "rejected" in service.store.list_notifications(StaffMember.PENINAH)[0].message


class TestCompareAndHours:
    """Tests for comparison and hours through the service."""

    def test_compare_rosters(self, service: RosterService):
        first = service.generate_roster(date(2024, 6, 3), 1)
        second = service.generate_roster(date(2024, 6, 3), 1)
        service.reassign_shift("2024-06-05-24h", StaffMember.LOCUM, roster_id=second.id)

        comparisons = service.compare_rosters(first.id, second.id)

        assert [c.date for c in comparisons if c.changed] == [date(2024, 6, 5)]

    def test_staff_hours_of_active_roster(self, service: RosterService):
        service.generate_roster(date(2024, 6, 3), 1)
        hours = service.staff_hours()
        assert [h.total_hours for h in hours] == [48, 60, 60, 0]
