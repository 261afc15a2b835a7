"""
In-memory record store for rosters, swap requests and notifications.

Shifts are owned by their roster: deleting a roster drops its shifts and any
swap requests that reference them. Exactly one roster is active at a time; the
store tracks it as an explicit id.
"""

import logging
import uuid
from datetime import datetime
from typing import Dict, List

from .models import (
    Notification,
    NotificationType,
    Roster,
    RosterSummary,
    Shift,
    StaffMember,
    SwapRequest,
    SwapStatus,
)
from .validator import AssignmentError, AssignmentValidator

logger = logging.getLogger(__name__)


class RecordNotFoundError(LookupError):
    """Raised when a roster, shift, swap request or notification does not exist."""

    pass


class SwapRequestClosedError(AssignmentError):
    """Raised when responding to a swap request that is no longer pending."""

    pass


class RosterStore:
    """Holds rosters and their related records in memory."""

    def __init__(self, validator: AssignmentValidator | None = None):
        self.validator = validator or AssignmentValidator()
        self._rosters: Dict[str, Roster] = {}
        self._swap_requests: Dict[str, SwapRequest] = {}
        self._notifications: Dict[str, Notification] = {}
        self._active_roster_id: str | None = None

    @property
    def active_roster_id(self) -> str | None:
        return self._active_roster_id

    # Rosters

    def save_roster(self, roster: Roster) -> Roster:
        """Store a new roster and make it the active one."""
        now = datetime.now()
        roster.created_at = now
        roster.updated_at = now
        self._rosters[roster.id] = roster
        self.set_active_roster(roster.id)

        logger.info("Saved roster %s '%s' with %d shifts", roster.id, roster.name, len(roster.shifts))
        return roster

    def get_roster(self, roster_id: str) -> Roster:
        try:
            return self._rosters[roster_id]
        except KeyError:
            raise RecordNotFoundError(f"Roster '{roster_id}' not found") from None

    def get_active_roster(self) -> Roster | None:
        if self._active_roster_id is None:
            return None
        return self._rosters[self._active_roster_id]

    def list_rosters(self) -> List[RosterSummary]:
        """Summaries of all rosters, newest first."""
        return [roster.summary() for roster in reversed(self._rosters.values())]

    def set_active_roster(self, roster_id: str) -> Roster:
        """Activate one roster and deactivate every other."""
        target = self.get_roster(roster_id)
        for roster in self._rosters.values():
            roster.is_active = False
        target.is_active = True
        self._active_roster_id = roster_id
        return target

    def delete_roster(self, roster_id: str) -> None:
        """Delete a roster along with its shifts and swap requests."""
        self.get_roster(roster_id)
        del self._rosters[roster_id]

        orphaned = [
            req_id
            for req_id, req in self._swap_requests.items()
            if req.roster_id == roster_id
        ]
        for req_id in orphaned:
            del self._swap_requests[req_id]

        if self._active_roster_id == roster_id:
            self._active_roster_id = None

        logger.info("Deleted roster %s and %d swap requests", roster_id, len(orphaned))

    # Shifts

    def get_shift(self, roster_id: str, shift_id: str) -> Shift:
        roster = self.get_roster(roster_id)
        try:
            return roster.get_shift(shift_id)
        except LookupError as e:
            raise RecordNotFoundError(str(e)) from e

    def update_shift(
        self, roster_id: str, shift_id: str, assignee: StaffMember | None
    ) -> Shift:
        """
        Change a shift's assignee after validating it.

        Raises:
            RecordNotFoundError: If the roster or shift does not exist
            AssignmentError: If the assignee is rejected; nothing is changed
        """
        shift = self.get_shift(roster_id, shift_id)
        self.validator.apply(shift, assignee)
        self.get_roster(roster_id).touch()
        return shift

    # Swap requests

    def create_swap_request(
        self,
        roster_id: str,
        shift_id: str,
        from_staff: StaffMember,
        to_staff: StaffMember,
        reason: str | None = None,
    ) -> SwapRequest:
        self.get_shift(roster_id, shift_id)

        request = SwapRequest(
            id=str(uuid.uuid4()),
            roster_id=roster_id,
            shift_id=shift_id,
            from_staff=from_staff,
            to_staff=to_staff,
            reason=reason or None,
        )
        self._swap_requests[request.id] = request
        return request

    def get_swap_request(self, request_id: str) -> SwapRequest:
        try:
            return self._swap_requests[request_id]
        except KeyError:
            raise RecordNotFoundError(f"Swap request '{request_id}' not found") from None

    def list_swap_requests(self, status: SwapStatus | None = None) -> List[SwapRequest]:
        """Swap requests, newest first, optionally filtered by status."""
        return [
            req
            for req in reversed(self._swap_requests.values())
            if status is None or req.status == status
        ]

    def respond_to_swap_request(self, request_id: str, approve: bool) -> SwapRequest:
        """
        Approve or reject a pending swap request.

        Approval moves the shift to `to_staff` through the validator. If the
        validator rejects it, the request stays pending. Rejection never
        touches the shift.

        Raises:
            RecordNotFoundError: If the request or its shift does not exist
            SwapRequestClosedError: If the request was already answered
            AssignmentError: If the target staff member may not work the shift
        """
        request = self.get_swap_request(request_id)
        if not request.is_pending:
            raise SwapRequestClosedError(
                f"Swap request '{request_id}' was already {request.status.value}"
            )

        if approve:
            self.update_shift(request.roster_id, request.shift_id, request.to_staff)
            request.status = SwapStatus.APPROVED
        else:
            request.status = SwapStatus.REJECTED
        request.responded_at = datetime.now()

        logger.info("Swap request %s %s", request_id, request.status.value)
        return request

    # Notifications

    def create_notification(
        self,
        staff_member: StaffMember,
        type: NotificationType,
        title: str,
        message: str,
        related_shift_id: str | None = None,
        related_swap_id: str | None = None,
    ) -> Notification:
        notification = Notification(
            id=str(uuid.uuid4()),
            staff_member=staff_member,
            type=type,
            title=title,
            message=message,
            related_shift_id=related_shift_id,
            related_swap_id=related_swap_id,
        )
        self._notifications[notification.id] = notification
        return notification

    def list_notifications(
        self, staff_member: StaffMember | None = None, unread_only: bool = False
    ) -> List[Notification]:
        """Notifications, newest first."""
        return [
            n
            for n in reversed(self._notifications.values())
            if (staff_member is None or n.staff_member == staff_member)
            and not (unread_only and n.read)
        ]

    def mark_notification_read(self, notification_id: str) -> Notification:
        try:
            notification = self._notifications[notification_id]
        except KeyError:
            raise RecordNotFoundError(f"Notification '{notification_id}' not found") from None
        notification.mark_read()
        return notification

    def mark_all_notifications_read(self, staff_member: StaffMember) -> int:
        """Mark every notification for a staff member as read; returns how many changed."""
        changed = 0
        for notification in self._notifications.values():
            if notification.staff_member == staff_member and not notification.read:
                notification.mark_read()
                changed += 1
        return changed
