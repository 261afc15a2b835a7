"""
Staff Roster - Rule-based shift rostering for a small healthcare team.
"""

__version__ = "0.1.0"

from .analytics import (
    coverage_gaps,
    fairness_metrics,
    round_half_up,
    summarize_hours,
    weekday_coverage,
)
from .config import ConfigLoader, ConfigurationError, InvalidDateFormatError
from .differ import compare_shifts, count_changes
from .generator import RosterGenerator, align_to_monday, generate_shifts
from .models import (
    Notification,
    NotificationType,
    Roster,
    RosterConfig,
    RosterSummary,
    Shift,
    ShiftCategory,
    ShiftComparison,
    StaffHours,
    StaffMember,
    SwapRequest,
    SwapStatus,
    Weekday,
)
from .reporter import ComparisonReporter, RosterReporter
from .rules import default_assignee, eligible_staff, shift_hours
from .service import RosterService
from .store import RecordNotFoundError, RosterStore, SwapRequestClosedError
from .validator import (
    AssignmentError,
    AssignmentValidator,
    IneligibleStaffError,
    LockedShiftError,
)

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "InvalidDateFormatError",
    "RosterConfig",
    "StaffMember",
    "ShiftCategory",
    "Weekday",
    "Shift",
    "Roster",
    "RosterSummary",
    "StaffHours",
    "ShiftComparison",
    "SwapRequest",
    "SwapStatus",
    "Notification",
    "NotificationType",
    "eligible_staff",
    "default_assignee",
    "shift_hours",
    "RosterGenerator",
    "align_to_monday",
    "generate_shifts",
    "summarize_hours",
    "coverage_gaps",
    "fairness_metrics",
    "round_half_up",
    "weekday_coverage",
    "compare_shifts",
    "count_changes",
    "AssignmentError",
    "AssignmentValidator",
    "IneligibleStaffError",
    "LockedShiftError",
    "RosterStore",
    "RecordNotFoundError",
    "SwapRequestClosedError",
    "RosterService",
    "RosterReporter",
    "ComparisonReporter",
]
