"""
Repository Interfaces (Ports) for the LiftMind API.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer and in backend.ai.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutRepository, UserRepository

    class SaveWorkoutUseCase:
        def __init__(self, workout_repo: WorkoutRepository):
            self._workout_repo = workout_repo
"""

from application.ports.workout_repository import WorkoutRepository
from application.ports.user_repository import UserRepository
from application.ports.coach_service import CoachService

__all__ = [
    "WorkoutRepository",
    "UserRepository",
    "CoachService",
]
