"""
Persisted workout records.

A workout row stores its lifts as JSON: each lift is an exercise name plus an
explicit list of set records. The four numeric aggregates on the row are
snapshots computed at save time and never recomputed afterwards.
"""

from datetime import date as date_type
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SetRecord(BaseModel):
    """
    One performed (or skipped) set.

    ``completed`` is tri-state because older rows omit it. Aggregates only
    count sets where it is explicitly true; single-rep PR detection treats a
    missing flag as completed.
    """

    model_config = ConfigDict(extra="ignore")

    reps: int = Field(default=0, ge=0, description="Reps performed")
    weight: float = Field(default=0, ge=0, description="Load in the user's units")
    rpe: Optional[float] = Field(default=None, description="Set RPE (1-10)")
    completed: Optional[bool] = Field(default=None, description="Whether the set was done")

    @property
    def is_completed(self) -> bool:
        """True only when the set is explicitly marked completed."""
        return self.completed is True

    @property
    def is_single(self) -> bool:
        """True for a one-rep set that was not explicitly marked skipped."""
        return self.reps == 1 and self.completed is not False

    @property
    def volume(self) -> float:
        """Tonnage of the set when completed, else 0."""
        return self.reps * self.weight if self.is_completed else 0.0


class LiftRecord(BaseModel):
    """An exercise performed during a workout with its sets."""

    model_config = ConfigDict(extra="ignore")

    exercise: str = Field(default="", description="Exercise name as stored")
    sets: List[SetRecord] = Field(default_factory=list)

    @property
    def volume(self) -> float:
        """Tonnage of completed sets."""
        return sum(s.volume for s in self.sets)

    @property
    def completed_reps(self) -> int:
        """Reps across completed sets."""
        return sum(s.reps for s in self.sets if s.is_completed)

    @property
    def max_completed_reps(self) -> int:
        """Highest rep count among completed sets (0 if none)."""
        return max((s.reps for s in self.sets if s.is_completed), default=0)


class WorkoutRecord(BaseModel):
    """
    Aggregate representing one row of the ``workouts`` table.

    Records are created once and only ever deleted as a whole.

    Examples:
        >>> record = WorkoutRecord.model_validate({
        ...     "id": "w-1",
        ...     "user_id": "user-1",
        ...     "date": "2024-01-05",
        ...     "lifts": [{"exercise": "Squat", "sets": [{"reps": 5, "weight": 100, "completed": True}]}],
        ... })
        >>> record.total_volume_computed
        500.0
    """

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = Field(default=None, description="Row id (None before insert)")
    user_id: Optional[str] = Field(default=None, description="Owner id")
    date: date_type = Field(..., description="Training day")
    lifts: List[LiftRecord] = Field(default_factory=list)
    notes: Optional[str] = None
    session_rpe: Optional[float] = Field(default=None, description="Whole-session RPE (1-10)")

    # Derived snapshots
    total_reps: int = 0
    working_sets: int = 0
    total_volume: float = 0
    rpe_adjusted_volume: float = 0

    created_at: Optional[datetime] = None

    @field_validator("date", mode="before")
    @classmethod
    def strip_time_component(cls, v):
        """Accept full ISO timestamps by keeping only the calendar day."""
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str) and len(v) > 10:
            return v[:10]
        return v

    @property
    def total_volume_computed(self) -> float:
        """Tonnage of completed sets, recomputed from the lifts."""
        return sum(lift.volume for lift in self.lifts)

    def named_lifts(self) -> List[LiftRecord]:
        """Lifts that carry an exercise name."""
        return [lift for lift in self.lifts if lift.exercise]
