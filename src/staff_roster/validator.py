"""
Guards manual reassignments and swap approvals against shift eligibility.
"""

import logging

from .models import Shift, StaffMember

logger = logging.getLogger(__name__)


class AssignmentError(Exception):
    """Base class for rejected shift assignments."""

    pass


class IneligibleStaffError(AssignmentError):
    """Raised when the proposed staff member may not work the shift."""

    def __init__(self, shift: Shift, staff: StaffMember):
        self.shift = shift
        self.staff = staff
        super().__init__(
            f"Staff member {staff} is not allowed for shift {shift.id}. "
            f"Eligible: {', '.join(str(s) for s in shift.eligible)}"
        )


class LockedShiftError(AssignmentError):
    """Raised when unassigning a shift that only one staff member can work."""

    def __init__(self, shift: Shift):
        self.shift = shift
        super().__init__(
            f"Shift {shift.id} is locked to {shift.eligible[0]} and cannot be unassigned"
        )


class AssignmentValidator:
    """Validates and applies assignee changes to shifts."""

    def __init__(self, allow_unassign_locked: bool = False):
        """
        Args:
            allow_unassign_locked: If True, a locked (single-eligible) shift
                may be left unassigned; otherwise that is rejected
        """
        self.allow_unassign_locked = allow_unassign_locked

    def validate(self, shift: Shift, proposed: StaffMember | None) -> None:
        """
        Check that `proposed` may be assigned to `shift`.

        Raises:
            IneligibleStaffError: If proposed is not in the eligibility set
            LockedShiftError: If unassigning a locked shift is not allowed
        """
        if proposed is None:
            if shift.is_locked and not self.allow_unassign_locked:
                raise LockedShiftError(shift)
            return

        if proposed not in shift.eligible:
            raise IneligibleStaffError(shift, proposed)

    def is_valid(self, shift: Shift, proposed: StaffMember | None) -> bool:
        try:
            self.validate(shift, proposed)
        except AssignmentError:
            return False
        return True

    def apply(self, shift: Shift, proposed: StaffMember | None) -> Shift:
        """Validate, then set the shift's assignee. The shift is untouched on rejection."""
        self.validate(shift, proposed)

        if shift.assignee != proposed:
            logger.info("Shift %s reassigned from %s to %s", shift.id, shift.assignee, proposed)
        shift.assignee = proposed
        return shift
