"""
User preferences and training type classification.

Preferences live as a JSON document on the ``users`` row. Keys are stored in
camelCase (``focusArea``, ``trainingType``) to stay compatible with existing
rows; the profile action uses snake_case (``focus_area``).
"""

from enum import Enum
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TrainingType(str, Enum):
    """Closed set of training styles that drive metric selection."""

    POWERLIFTING = "powerlifting"
    BODYBUILDING = "bodybuilding"
    CROSSFIT = "crossfit"
    CALISTHENICS = "calisthenics"
    GENERAL_STRENGTH = "general_strength"
    ENDURANCE = "endurance"
    FUNCTIONAL_FITNESS = "functional_fitness"

    @classmethod
    def coerce(cls, value: Any) -> "TrainingType":
        """Map any stored value onto a member, falling back to general strength."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.GENERAL_STRENGTH


class UserPreferences(BaseModel):
    """
    Preferences document stored on the user row.

    Unknown keys are preserved so that merging a profile update never drops
    data this service does not know about.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    goal: Optional[str] = None
    units: Literal["kg", "lbs"] = "kg"
    experience: Optional[str] = None
    focus_area: Optional[str] = Field(default=None, alias="focusArea")
    training_type: TrainingType = Field(
        default=TrainingType.GENERAL_STRENGTH, alias="trainingType"
    )

    @field_validator("training_type", mode="before")
    @classmethod
    def coerce_training_type(cls, v):
        if v is None:
            return TrainingType.GENERAL_STRENGTH
        return TrainingType.coerce(v)

    @field_validator("units", mode="before")
    @classmethod
    def default_units(cls, v):
        return v if v in ("kg", "lbs") else "kg"


class ProfileUpdates(BaseModel):
    """Partial patch carried by a profile action. Empty fields are ignored."""

    model_config = ConfigDict(extra="ignore")

    goal: Optional[str] = Field(default=None, max_length=500)
    experience: Optional[str] = Field(default=None, max_length=50)
    focus_area: Optional[str] = Field(default=None, max_length=200)
    units: Optional[Literal["kg", "lbs"]] = None

    def to_preferences_patch(self) -> Dict[str, Any]:
        """
        Build the storage patch, keyed the way the preferences document is.

        Returns:
            Dict containing only the fields that carry a non-empty value
        """
        patch: Dict[str, Any] = {}
        if self.goal:
            patch["goal"] = self.goal
        if self.experience:
            patch["experience"] = self.experience
        if self.focus_area:
            patch["focusArea"] = self.focus_area
        if self.units:
            patch["units"] = self.units
        return patch
