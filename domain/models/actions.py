"""
Structured actions the AI coach can attach to a reply.

The coach ends a reply with one ``ACTION: {...}`` line. The JSON object is a
tagged union discriminated by ``type``:

- ``workout``: log one or more exercise entries
- ``pr``: claim a personal record
- ``profile``: patch the user's preferences
- ``chat``: no side effect
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from domain.models.exercise import ExerciseEntry
from domain.models.preferences import ProfileUpdates


WeightUnit = Literal["kg", "lbs"]


class WorkoutAction(BaseModel):
    """Log a training session made of one or more exercise entries."""

    model_config = ConfigDict(extra="ignore")

    type: Literal["workout"] = "workout"
    exercises: List[ExerciseEntry] = Field(default_factory=list)
    session_rpe: Optional[float] = Field(default=None, ge=1, le=10)
    notes: Optional[str] = Field(default=None, max_length=2000)
    date: Optional[str] = Field(
        default=None, description="ISO date (YYYY-MM-DD); defaults to today on save"
    )


class PRAction(BaseModel):
    """Claim a new personal record for an exercise."""

    model_config = ConfigDict(extra="ignore")

    type: Literal["pr"] = "pr"
    exercise: str = Field(..., min_length=1)
    weight: float = Field(..., ge=0)
    unit: Optional[WeightUnit] = None
    previous_pr: Optional[float] = None


class ProfileAction(BaseModel):
    """Apply a partial update to the user's profile preferences."""

    model_config = ConfigDict(extra="ignore")

    type: Literal["profile"] = "profile"
    updates: ProfileUpdates = Field(default_factory=ProfileUpdates)


class ChatAction(BaseModel):
    """Plain conversation; nothing to persist."""

    model_config = ConfigDict(extra="ignore")

    type: Literal["chat"] = "chat"


AIAction = Annotated[
    Union[WorkoutAction, PRAction, ProfileAction, ChatAction],
    Field(discriminator="type"),
]

ai_action_adapter: TypeAdapter = TypeAdapter(AIAction)


class ParsedAIResponse(BaseModel):
    """
    Result of splitting a coach reply into prose and a structured action.

    ``confidence`` is 1.0 when the reply carried no action line, 0.9 when an
    action was extracted, and 0.5 when an action line was present but could
    not be parsed (the reply then degrades to chat).
    """

    action: AIAction
    message: str
    confidence: float = Field(..., ge=0, le=1)
    raw_response: str
