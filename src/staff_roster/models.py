"""
Data models for the staff rostering system.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum, IntEnum
from typing import List


class StaffMember(str, Enum):
    """The four staff members who can be rostered, in canonical order."""

    ASHLEY = "Ashley"
    PENINAH = "Peninah"
    JOFLIX = "Joflix"
    LOCUM = "Locum"

    def __str__(self) -> str:
        return self.value


class ShiftCategory(str, Enum):
    """Kind of shift. Weekends have Day and Night, weekdays one 24h shift."""

    DAY = "Day"
    NIGHT = "Night"
    FULL_DAY = "24h"

    def __str__(self) -> str:
        return self.value

    @property
    def sort_order(self) -> int:
        return list(ShiftCategory).index(self)


class Weekday(IntEnum):
    """Day of the week using date.weekday() indices (0=Mon, 6=Sun)."""

    MON = 0
    TUE = 1
    WED = 2
    THU = 3
    FRI = 4
    SAT = 5
    SUN = 6

    @classmethod
    def of(cls, day: date) -> "Weekday":
        return cls(day.weekday())

    @property
    def label(self) -> str:
        """Three-letter label, e.g. 'Mon'."""
        return self.name.capitalize()

    @property
    def is_weekend(self) -> bool:
        return self in (Weekday.SAT, Weekday.SUN)


class SwapStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class NotificationType(str, Enum):
    SHIFT_ASSIGNED = "shift_assigned"
    SHIFT_CHANGED = "shift_changed"
    SWAP_REQUEST = "swap_request"
    SWAP_RESPONSE = "swap_response"


@dataclass
class Shift:
    """A single schedulable slot and its current assignee."""

    id: str
    date: date
    weekday: str
    category: ShiftCategory
    label: str
    hours: int
    assignee: StaffMember | None
    eligible: List[StaffMember]

    def __post_init__(self):
        if not self.eligible:
            raise ValueError(f"Shift {self.id} must have at least one eligible staff member")
        if self.assignee is not None and self.assignee not in self.eligible:
            raise ValueError(
                f"{self.assignee} is not eligible for shift {self.id}, "
                f"eligible: {', '.join(str(s) for s in self.eligible)}"
            )

    @property
    def is_locked(self) -> bool:
        """A shift with a single eligible staff member cannot be reassigned."""
        return len(self.eligible) == 1

    @property
    def slot(self) -> tuple[date, ShiftCategory]:
        """Natural key used to align shifts across rosters."""
        return (self.date, self.category)


@dataclass
class RosterSummary:
    """Roster metadata for list views."""

    id: str
    name: str
    start_date: date
    end_date: date
    weeks: int
    created_at: datetime
    is_active: bool
    version: int
    shift_count: int


@dataclass
class Roster:
    """A named, versioned collection of shifts starting on a Monday."""

    id: str
    name: str
    start_date: date
    weeks: int
    shifts: List[Shift] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)
    is_active: bool = False
    version: int = 1

    def __post_init__(self):
        if self.weeks < 1:
            raise ValueError(f"Roster must span at least one week, got {self.weeks}")

    @property
    def end_date(self) -> date:
        """Last day covered by the roster (inclusive)."""
        return self.start_date + timedelta(days=self.total_days - 1)

    @property
    def total_days(self) -> int:
        return self.weeks * 7

    def get_shift(self, shift_id: str) -> Shift:
        """Get a shift by id."""
        for shift in self.shifts:
            if shift.id == shift_id:
                return shift
        raise LookupError(f"Shift '{shift_id}' not found in roster '{self.id}'")

    def touch(self) -> None:
        self.updated_at = datetime.now()

    def summary(self) -> RosterSummary:
        return RosterSummary(
            id=self.id,
            name=self.name,
            start_date=self.start_date,
            end_date=self.end_date,
            weeks=self.weeks,
            created_at=self.created_at,
            is_active=self.is_active,
            version=self.version,
            shift_count=len(self.shifts),
        )


@dataclass
class StaffHours:
    """Total hours and shift count for one staff member."""

    staff: StaffMember
    total_hours: int = 0
    shift_count: int = 0


@dataclass
class ShiftComparison:
    """How one (date, category) slot differs between two rosters."""

    date: date
    weekday: str
    category: ShiftCategory
    assignee_a: StaffMember | None
    assignee_b: StaffMember | None
    changed: bool


@dataclass
class SwapRequest:
    """A proposal to move a shift from one staff member to another."""

    id: str
    roster_id: str
    shift_id: str
    from_staff: StaffMember
    to_staff: StaffMember
    status: SwapStatus = SwapStatus.PENDING
    reason: str | None = None
    created_at: datetime = field(default_factory=datetime.now)
    responded_at: datetime | None = None

    @property
    def is_pending(self) -> bool:
        return self.status == SwapStatus.PENDING


@dataclass
class Notification:
    """A read/unread message for one staff member."""

    id: str
    staff_member: StaffMember
    type: NotificationType
    title: str
    message: str
    read: bool = False
    created_at: datetime = field(default_factory=datetime.now)
    related_shift_id: str | None = None
    related_swap_id: str | None = None

    def mark_read(self) -> None:
        self.read = True


@dataclass
class RosterConfig:
    """Configuration for generating a roster."""

    start_date: date
    weeks: int = 4
    name: str | None = None
    allow_unassign_locked: bool = False

    MIN_WEEKS = 1
    MAX_WEEKS = 12

    def __post_init__(self):
        if not self.MIN_WEEKS <= self.weeks <= self.MAX_WEEKS:
            raise ValueError(
                f"Weeks must be between {self.MIN_WEEKS} and {self.MAX_WEEKS}, got {self.weeks}"
            )

    @property
    def total_days(self) -> int:
        """Total number of days in the planning period."""
        return self.weeks * 7
