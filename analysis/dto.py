"""DTO types consumed and returned by the analytics engine.

DTOs are plain data containers used to transport analysis results to the host
and the chart geometry builders. They intentionally avoid any Django/ORM
dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Literal

WindowTag = Literal["day", "week", "month"]


@dataclass(frozen=True, slots=True)
class TimeWindow:
    """An inclusive date window resolved from a window tag.

    Attributes:
        tag: The selector tag that produced the window.
        start: Inclusive window start date.
        end: Inclusive window end date (always "today").
    """

    tag: WindowTag
    start: date
    end: date

    def contains(self, target: date) -> bool:
        """Return True when `target` falls within the window (inclusive)."""

        return self.start <= target <= self.end


@dataclass(frozen=True, slots=True)
class Viewport:
    """Drawing surface dimensions reported by the host.

    Attributes:
        width: Surface width in pixels; 0 until the host reports a layout pass.
        height: Surface height in pixels.
        padding: Inner padding applied on every side.
    """

    width: float
    height: float
    padding: float = 0.0

    @property
    def is_known(self) -> bool:
        """Return True once the host has reported a usable width."""

        return self.width > 0


@dataclass(frozen=True, slots=True)
class DatedValue:
    """One performance-trend sample."""

    date: date
    value: float


@dataclass(frozen=True, slots=True)
class CategoryQuantity:
    """Aggregated usage of one named category within the active window."""

    category: str
    quantity: float


@dataclass(frozen=True, slots=True)
class AttendanceSample:
    """Present/absent head counts for one day."""

    date: date
    present: int
    absent: int

    @property
    def total(self) -> int:
        return self.present + self.absent


@dataclass(frozen=True, slots=True)
class MaterialUsage:
    """A `(materialId, quantity)` pair attached to a task."""

    material_id: str
    quantity: float


@dataclass(frozen=True, slots=True)
class TaskRecord:
    """Task input as supplied by the task collaborator.

    Attributes:
        id: Task identifier.
        name: Display name.
        completed: Whether the task has been completed.
        date: Raw record date used for window filtering (may be unparseable).
        completed_at: Optional raw completion timestamp.
        assigned_to: Optional employee id.
        rating: Optional rating attached on completion.
        materials_used: Material usage pairs recorded against the task.
    """

    id: str
    name: str
    completed: bool
    date: str | None
    completed_at: str | None = None
    assigned_to: str | None = None
    rating: float | None = None
    materials_used: tuple[MaterialUsage, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class EmployeeRecord:
    """Employee input; only identity and department are used."""

    id: str
    name: str
    department: str | None = None


@dataclass(frozen=True, slots=True)
class MaterialRecord:
    """Material catalog entry used to resolve category display names."""

    id: str
    name: str
    quantity: float = 0.0
    unit: str | None = None


@dataclass(frozen=True, slots=True)
class ClockEvent:
    """A clock-in/clock-out pair for one employee shift."""

    employee_id: str
    clock_in: datetime | None
    clock_out: datetime | None = None

    @property
    def date(self) -> date | None:
        """Calendar date of the event (clock-in first, then clock-out)."""

        moment = self.clock_in or self.clock_out
        return moment.date() if moment is not None else None


@dataclass(frozen=True, slots=True)
class MaterialStock:
    """Remaining catalog quantity after window usage is deducted."""

    material_id: str
    name: str
    used: float
    remaining: float


@dataclass(frozen=True, slots=True)
class PerformanceMetrics:
    """Per-employee task performance within the active window.

    Attributes:
        employee_id: Employee identifier.
        employee_name: Employee display name.
        total_tasks: Tasks assigned within the window.
        completed_tasks: Completed tasks within the window.
        average_rating: Mean rating across rated tasks (0 when none).
        performance_score: Completion percentage rounded to an integer.
    """

    employee_id: str
    employee_name: str
    total_tasks: int
    completed_tasks: int
    average_rating: float
    performance_score: int
