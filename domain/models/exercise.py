"""
Exercise entry value object.

The flat (exercise, sets, reps, weight, rpe) shape emitted by the AI coach
and submitted by the manual logging form. Entries are ephemeral: they are
materialized into lift records before anything is persisted.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_RPE = 7


class ExerciseEntry(BaseModel):
    """
    A single exercise as the user (or the coach) described it.

    All ``sets`` sets are assumed to share the same reps, weight and RPE.

    Examples:
        >>> entry = ExerciseEntry(exercise="Bench Press", sets=5, reps=5, weight=100)
        >>> entry.effective_rpe
        7.0
        >>> entry.total_reps
        25
    """

    model_config = ConfigDict(extra="ignore")

    exercise: str = Field(..., min_length=1, description="Exercise name")
    sets: int = Field(..., gt=0, description="Number of identical sets")
    reps: int = Field(..., gt=0, description="Reps per set")
    weight: float = Field(
        default=0, ge=0, description="Load per rep in the user's units (0 for bodyweight)"
    )
    rpe: Optional[float] = Field(
        default=None, ge=1, le=10, description="Rate of perceived exertion (1-10)"
    )
    completed: Optional[bool] = Field(
        default=None, description="Whether the sets were performed"
    )

    @property
    def effective_rpe(self) -> float:
        """RPE with the default of 7 applied when none was given."""
        return float(self.rpe or DEFAULT_RPE)

    @property
    def total_reps(self) -> int:
        """Reps across all sets."""
        return self.sets * self.reps

    @property
    def volume(self) -> float:
        """Tonnage across all sets (reps x weight)."""
        return self.total_reps * self.weight
