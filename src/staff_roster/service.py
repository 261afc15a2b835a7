"""
Roster operations exposed to the outer layers (CLI, HTTP).

Every change to a stored shift goes through the store's assignment validator.
"""

from datetime import date
from typing import List

from .analytics import summarize_hours
from .differ import compare_shifts
from .generator import RosterGenerator
from .models import (
    NotificationType,
    Roster,
    RosterConfig,
    Shift,
    ShiftComparison,
    StaffHours,
    StaffMember,
    SwapRequest,
)
from .store import RecordNotFoundError, RosterStore


class RosterService:
    """Generates, edits and compares stored rosters."""

    def __init__(self, store: RosterStore):
        self.store = store

    def generate_roster(self, start_date: date, weeks: int, name: str | None = None) -> Roster:
        """
        Generate a roster and store it as the active one.

        Raises:
            ValueError: If weeks is outside 1..12
        """
        if not RosterConfig.MIN_WEEKS <= weeks <= RosterConfig.MAX_WEEKS:
            raise ValueError(
                f"Weeks must be between {RosterConfig.MIN_WEEKS} and "
                f"{RosterConfig.MAX_WEEKS}, got {weeks}"
            )

        roster = RosterGenerator(start_date, weeks).build_roster(name)
        return self.store.save_roster(roster)

    def generate_from_config(self, config: RosterConfig) -> Roster:
        """Generate and store a roster from a validated configuration."""
        roster = RosterGenerator.from_config(config).build_roster(config.name)
        return self.store.save_roster(roster)

    def resolve_roster(self, roster_id: str | None = None) -> Roster:
        """Get a roster by id, or the active roster when no id is given."""
        if roster_id is not None:
            return self.store.get_roster(roster_id)

        roster = self.store.get_active_roster()
        if roster is None:
            raise RecordNotFoundError("No active roster")
        return roster

    def reassign_shift(
        self,
        shift_id: str,
        staff: StaffMember | None,
        roster_id: str | None = None,
    ) -> Shift:
        """Manually change a shift's assignee and notify the new assignee."""
        roster = self.resolve_roster(roster_id)
        previous = self.store.get_shift(roster.id, shift_id).assignee
        shift = self.store.update_shift(roster.id, shift_id, staff)

        if staff is not None and staff != previous:
            self.store.create_notification(
                staff,
                NotificationType.SHIFT_ASSIGNED,
                "Shift assigned",
                f"You have been assigned the {shift.label} shift on {shift.date.isoformat()}",
                related_shift_id=shift.id,
            )
        return shift

    def request_swap(
        self,
        shift_id: str,
        from_staff: StaffMember,
        to_staff: StaffMember,
        reason: str | None = None,
        roster_id: str | None = None,
    ) -> SwapRequest:
        """Create a pending swap request and notify the staff member asked to cover."""
        roster = self.resolve_roster(roster_id)
        request = self.store.create_swap_request(
            roster.id, shift_id, from_staff, to_staff, reason
        )
        shift = self.store.get_shift(roster.id, shift_id)

        self.store.create_notification(
            to_staff,
            NotificationType.SWAP_REQUEST,
            "Swap request",
            f"{from_staff} asked you to cover the {shift.label} shift on {shift.date.isoformat()}",
            related_shift_id=shift_id,
            related_swap_id=request.id,
        )
        return request

    def respond_to_swap(self, request_id: str, approve: bool) -> SwapRequest:
        """Approve or reject a swap request and notify the requester."""
        request = self.store.respond_to_swap_request(request_id, approve)
        shift = self.store.get_shift(request.roster_id, request.shift_id)

        self.store.create_notification(
            request.from_staff,
            NotificationType.SWAP_RESPONSE,
            f"Swap request {request.status.value}",
            f"Your request to swap the {shift.label} shift on {shift.date.isoformat()} "
            f"with {request.to_staff} was {request.status.value}",
            related_shift_id=request.shift_id,
            related_swap_id=request.id,
        )
        return request

    def compare_rosters(self, roster_id_a: str, roster_id_b: str) -> List[ShiftComparison]:
        roster_a = self.store.get_roster(roster_id_a)
        roster_b = self.store.get_roster(roster_id_b)
        return compare_shifts(roster_a.shifts, roster_b.shifts)

    def staff_hours(self, roster_id: str | None = None) -> List[StaffHours]:
        return summarize_hours(self.resolve_roster(roster_id).shifts)
