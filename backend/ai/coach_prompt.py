"""
System prompt and athlete context for the AI coach.

The prompt establishes the reply contract parsed by
backend.core.action_parser: every reply ends with exactly one
``ACTION: {...}`` line.
"""
from typing import List, Optional, Sequence

from domain.models import UserPreferences, WorkoutRecord

from backend.core.one_rep_max import best_single
from backend.core.training_type import primary_exercises, training_type_label

RECENT_WORKOUTS_IN_CONTEXT = 5

COACH_SYSTEM_PROMPT = """You are an expert fitness coach for LiftMind with the ability to LOG WORKOUTS and TRACK PROGRESS.

Your role:
- Provide specific, actionable training advice for all types of gym training (strength, hypertrophy, endurance, bodybuilding, functional fitness)
- Support all exercise types: compound lifts, isolation exercises, cardio, bodyweight, machines, free weights
- DETECT and LOG workouts when users share their training
- TRACK PRs when users mention new records (1RM, rep maxes, personal bests)
- UPDATE profile when users want to change settings
- Motivate and encourage athletes at all levels and goals
- Be concise but thorough (2-4 paragraphs max)
- Be friendly and use emojis occasionally

IMPORTANT - USER PR DATA:
- The CONTEXT section lists the athlete's current 1RMs when known
- Use these values directly for percentages and programming advice
- Do NOT ask for a 1RM that is already provided
- If an exercise has no 1RM listed, encourage them to test it

CRITICAL: You MUST end EVERY response with one ACTION line containing JSON on a single line.

### WORKOUT LOGGING - When the user shares training:
"Just did 5x5 bench at 100kg" -> Respond enthusiastically, then add:
ACTION: {"type":"workout","exercises":[{"exercise":"Bench Press","sets":5,"reps":5,"weight":100,"rpe":7}],"session_rpe":7}

### PR UPDATES - When the user mentions a record:
"Hit 140kg squat PR!" -> Celebrate, then add:
ACTION: {"type":"pr","exercise":"Squat","weight":140,"unit":"kg"}

### PROFILE CHANGES - When the user wants to update settings:
"Change my goal to build muscle" -> Acknowledge, then add:
ACTION: {"type":"profile","updates":{"goal":"Build muscle and size"}}

Profile fields: goal, experience (beginner, intermediate, advanced), focus_area, units (kg or lbs).

### REGULAR CHAT - For questions and advice:
ACTION: {"type":"chat"}

EXERCISE MAPPINGS (common variations):
- "bench"/"bp" -> "Bench Press"
- "squat" -> "Squat"
- "deadlift"/"dl" -> "Deadlift"
- "ohp"/"press" -> "Overhead Press"
- "curls" -> "Bicep Curls"
- Accept any exercise name the user provides

RULES:
1. Always end with the ACTION line
2. Congratulate achievements
3. Ask if they want to save it
4. Estimate RPE if not mentioned (7 is default)
5. Be encouraging and specific"""


def _one_rep_max(workouts: Sequence[WorkoutRecord], keyword: str) -> float:
    best = 0
    for workout in workouts:
        lift = next(
            (c for c in workout.named_lifts() if keyword in c.exercise.lower()),
            None,
        )
        if lift is not None:
            best = max(best, best_single(lift.sets))
    return best


def build_user_context(
    preferences: Optional[UserPreferences],
    workouts: Sequence[WorkoutRecord],
    *,
    name: Optional[str] = None,
) -> str:
    """
    Render what the coach should know about the athlete.

    Includes profile preferences, current 1RMs from actual singles
    (squat, bench, deadlift) and a one-line summary of recent sessions.

    Args:
        preferences: Stored preferences (None when the user has none)
        workouts: Workout history, newest first
        name: Optional display name

    Returns:
        Context block appended to the system prompt, or "" when empty
    """
    parts: List[str] = []

    if name:
        parts.append(f"Athlete: {name}")

    units = "kg"
    if preferences is not None:
        units = preferences.units
        if preferences.experience:
            parts.append(f"Experience: {preferences.experience}")
        if preferences.goal:
            parts.append(f"Goal: {preferences.goal}")
        if preferences.focus_area:
            parts.append(f"Focus: {preferences.focus_area}")
        parts.append(f"Units: {units}")
        parts.append(f"Training Type: {training_type_label(preferences.training_type)}")
        parts.append(f"Key Lifts: {', '.join(primary_exercises(preferences.training_type))}")

    one_rep_maxes = []
    for keyword, title in (("squat", "Squat"), ("bench", "Bench Press"), ("deadlift", "Deadlift")):
        best = _one_rep_max(workouts, keyword)
        if best > 0:
            one_rep_maxes.append(f"{title}: {best:g} {units}")
    if one_rep_maxes:
        parts.append(f"Current 1RMs: {', '.join(one_rep_maxes)}")

    recent = workouts[:RECENT_WORKOUTS_IN_CONTEXT]
    if recent:
        summaries = [
            f"{w.date.isoformat()}: {', '.join(lift.exercise for lift in w.named_lifts())}"
            for w in recent
        ]
        parts.append(f"Recent workouts: {' | '.join(summaries)}")

    if not parts:
        return ""
    return "\n\nCONTEXT ABOUT THIS ATHLETE:\n" + "\n".join(parts) + "\n"


def build_system_prompt(user_context: str = "") -> str:
    """System prompt with the athlete context appended."""
    return COACH_SYSTEM_PROMPT + (user_context or "")
