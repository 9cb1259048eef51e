"""
Dashboard metrics by training type.

"Progress" means something different to each kind of athlete, so the
dashboard bundle is computed by one of five branches:

- powerlifting: competition total (squat + bench + deadlift) and its change
- bodybuilding: training volume and the most-trained muscle group
- crossfit: session frequency and functional movement counts
- calisthenics: max-rep PRs on bodyweight movements
- everything else: total volume and the most frequent exercise

Every branch returns one primary metric, three secondary metrics and up to
three highlight cards. Values are display-ready (rounded, unit-labelled).
"""
from collections import Counter
from dataclasses import asdict, dataclass, field
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Sequence, Union

from domain.models import TrainingType, WorkoutRecord

from backend.core.exercise_categories import (
    BODYWEIGHT_KEYWORDS,
    FUNCTIONAL_KEYWORDS,
    POWERLIFTS,
    average_session_rpe,
    classify_muscle_group,
    display_keyword,
    match_keyword,
)
from backend.core.one_rep_max import best_lift_estimate
from backend.core.rounding import display_number, round_half_up

MetricValue = Union[int, float, str]

RECENT_WINDOW_DAYS = 30
PREVIOUS_WINDOW_DAYS = 60

CONSISTENCY_EXCELLENT = 12
CONSISTENCY_GOOD = 8


# =============================================================================
# Result DTOs
# =============================================================================


@dataclass
class PrimaryMetric:
    """Headline figure shown at the top of the dashboard."""
    label: str
    value: MetricValue
    unit: str
    description: str
    icon: str


@dataclass
class SecondaryMetric:
    """Smaller stat tile."""
    label: str
    value: MetricValue
    unit: str
    color: str
    icon: str


@dataclass
class Highlight:
    """Highlight card; ``change`` is the delta versus an earlier point, if known."""
    title: str
    value: MetricValue
    unit: str
    change: Optional[int] = None


@dataclass
class DashboardMetrics:
    """Complete dashboard bundle."""
    primary_metric: PrimaryMetric
    secondary_metrics: List[SecondaryMetric] = field(default_factory=list)
    highlights: List[Highlight] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# =============================================================================
# Shared Tiles
# =============================================================================


def _intensity_tile(workouts: Sequence[WorkoutRecord]) -> SecondaryMetric:
    return SecondaryMetric(
        label="Avg Intensity",
        value=average_session_rpe(workouts),
        unit="RPE",
        color="electric",
        icon="Flame",
    )


def _frequency_tile(workouts: Sequence[WorkoutRecord]) -> SecondaryMetric:
    return SecondaryMetric(
        label="Training Frequency",
        value=len(workouts),
        unit="sessions",
        color="green",
        icon="Calendar",
    )


def _completed_totals(workouts: Sequence[WorkoutRecord]):
    total_volume = 0.0
    total_reps = 0
    for workout in workouts:
        for lift in workout.named_lifts():
            total_volume += lift.volume
            total_reps += lift.completed_reps
    return total_volume, total_reps


# =============================================================================
# Branches
# =============================================================================


def _best_powerlifts(workouts: Sequence[WorkoutRecord]) -> Dict[str, float]:
    """Best squat / bench / deadlift across the given workouts."""
    bests = {key: 0 for key, _ in POWERLIFTS}
    for workout in workouts:
        for lift in workout.named_lifts():
            key = match_keyword(lift.exercise, (k for k, _ in POWERLIFTS))
            if key is None:
                continue
            best = best_lift_estimate(lift.sets)
            if best > bests[key]:
                bests[key] = best
    return bests


def _powerlifting(
    workouts: Sequence[WorkoutRecord], units: str, today: date
) -> DashboardMetrics:
    recent_start = today - timedelta(days=RECENT_WINDOW_DAYS)
    previous_start = today - timedelta(days=PREVIOUS_WINDOW_DAYS)

    recent = [w for w in workouts if w.date >= recent_start]
    previous = [w for w in workouts if previous_start <= w.date < recent_start]

    maxes = _best_powerlifts(recent)
    old_maxes = _best_powerlifts(previous)

    competition_total = display_number(sum(maxes.values()))
    # Delta only when the earlier window has a full total to compare against
    if all(old_maxes.values()):
        progress = display_number(competition_total - sum(old_maxes.values()))
    else:
        progress = 0

    return DashboardMetrics(
        primary_metric=PrimaryMetric(
            label="Competition Total",
            value=competition_total,
            unit=units,
            description="Squat + Bench + Deadlift",
            icon="Trophy",
        ),
        secondary_metrics=[
            _intensity_tile(recent),
            _frequency_tile(recent),
            SecondaryMetric(
                label="PR Progress",
                value=f"+{progress}" if progress > 0 else progress,
                unit=units,
                color="green" if progress > 0 else "champion",
                icon="TrendingUp",
            ),
        ],
        highlights=[
            Highlight(title=title, value=display_number(maxes[key]), unit=units)
            for key, title in POWERLIFTS
        ],
    )


def _bodybuilding(workouts: Sequence[WorkoutRecord], units: str) -> DashboardMetrics:
    total_volume, total_reps = _completed_totals(workouts)
    muscle_groups: Dict[str, float] = {}

    for workout in workouts:
        for lift in workout.named_lifts():
            group = classify_muscle_group(lift.exercise)
            if group:
                muscle_groups[group] = muscle_groups.get(group, 0) + lift.volume

    top_group = max(muscle_groups.items(), key=lambda item: item[1], default=None)

    return DashboardMetrics(
        primary_metric=PrimaryMetric(
            label="Total Volume",
            value=round_half_up(total_volume),
            unit=units,
            description="Last 30 days",
            icon="Dumbbell",
        ),
        secondary_metrics=[
            _intensity_tile(workouts),
            _frequency_tile(workouts),
            SecondaryMetric(
                label="Total Reps",
                value=total_reps,
                unit="reps",
                color="champion",
                icon="TrendingUp",
            ),
        ],
        highlights=[
            Highlight(
                title=top_group[0] if top_group else "N/A",
                value=round_half_up(top_group[1]) if top_group else 0,
                unit=units,
            ),
            Highlight(title="Total Volume", value=round_half_up(total_volume), unit=units),
            Highlight(title="Workouts", value=len(workouts), unit="sessions"),
        ],
    )


def consistency_label(session_count: int) -> str:
    """Qualitative consistency rating for a number of sessions."""
    if session_count >= CONSISTENCY_EXCELLENT:
        return "Excellent"
    if session_count >= CONSISTENCY_GOOD:
        return "Good"
    return "Building"


def _crossfit(workouts: Sequence[WorkoutRecord]) -> DashboardMetrics:
    frequency = len(workouts)
    functional_count = sum(
        1
        for workout in workouts
        for lift in workout.named_lifts()
        if match_keyword(lift.exercise, FUNCTIONAL_KEYWORDS)
    )
    avg_rpe = average_session_rpe(workouts)

    return DashboardMetrics(
        primary_metric=PrimaryMetric(
            label="Workout Frequency",
            value=frequency,
            unit="WODs",
            description="Last 30 days",
            icon="Calendar",
        ),
        secondary_metrics=[
            _intensity_tile(workouts),
            SecondaryMetric(
                label="Functional Moves",
                value=functional_count,
                unit="exercises",
                color="green",
                icon="Dumbbell",
            ),
            SecondaryMetric(
                label="Consistency",
                value=consistency_label(frequency),
                unit="",
                color="champion",
                icon="TrendingUp",
            ),
        ],
        highlights=[
            Highlight(title="WODs Completed", value=frequency, unit="sessions"),
            Highlight(title="Functional Exercises", value=functional_count, unit="exercises"),
            Highlight(title="Avg Intensity", value=avg_rpe, unit="RPE"),
        ],
    )


def bodyweight_prs(workouts: Sequence[WorkoutRecord]) -> Dict[str, int]:
    """Max completed reps per bodyweight movement, keyed by display name."""
    prs: Dict[str, int] = {}
    for workout in workouts:
        for lift in workout.named_lifts():
            keyword = match_keyword(lift.exercise, BODYWEIGHT_KEYWORDS)
            if keyword is None:
                continue
            max_reps = lift.max_completed_reps
            if max_reps > 0:
                key = display_keyword(keyword)
                prs[key] = max(prs.get(key, 0), max_reps)
    return prs


def _calisthenics(workouts: Sequence[WorkoutRecord]) -> DashboardMetrics:
    prs = bodyweight_prs(workouts)
    ranked = sorted(prs.items(), key=lambda item: item[1], reverse=True)
    top = ranked[0] if ranked else None

    return DashboardMetrics(
        primary_metric=PrimaryMetric(
            label=f"{top[0]} PR" if top else "Bodyweight Training",
            value=top[1] if top else 0,
            unit="reps",
            description="Best bodyweight exercise",
            icon="Trophy",
        ),
        secondary_metrics=[
            _intensity_tile(workouts),
            _frequency_tile(workouts),
            SecondaryMetric(
                label="Bodyweight PRs",
                value=len(prs),
                unit="exercises",
                color="champion",
                icon="TrendingUp",
            ),
        ],
        highlights=[
            Highlight(title=name, value=reps, unit="reps") for name, reps in ranked[:3]
        ],
    )


def _general(workouts: Sequence[WorkoutRecord], units: str) -> DashboardMetrics:
    total_volume, total_reps = _completed_totals(workouts)
    frequency = Counter(
        lift.exercise for workout in workouts for lift in workout.named_lifts()
    )
    top_exercise = frequency.most_common(1)

    return DashboardMetrics(
        primary_metric=PrimaryMetric(
            label="Total Volume",
            value=round_half_up(total_volume),
            unit=units,
            description="Last 30 days",
            icon="Dumbbell",
        ),
        secondary_metrics=[
            _intensity_tile(workouts),
            _frequency_tile(workouts),
            SecondaryMetric(
                label="Top Exercise",
                value=top_exercise[0][0] if top_exercise else "N/A",
                unit="",
                color="champion",
                icon="TrendingUp",
            ),
        ],
        highlights=[
            Highlight(title="Total Volume", value=round_half_up(total_volume), unit=units),
            Highlight(title="Total Reps", value=total_reps, unit="reps"),
            Highlight(title="Workouts", value=len(workouts), unit="sessions"),
        ],
    )


# =============================================================================
# Entry Point
# =============================================================================


def calculate_dashboard_metrics(
    workouts: Sequence[WorkoutRecord],
    training_type: TrainingType,
    units: str = "kg",
    *,
    today: Optional[date] = None,
) -> DashboardMetrics:
    """
    Compute the dashboard bundle for a user's recent workouts.

    The powerlifting branch reads up to 60 days of history: the last 30 days
    feed the headline and tiles, days 31-60 only feed the PR progress delta.
    Other branches use every workout they are given.

    Args:
        workouts: Workouts in the dashboard window (newest first)
        training_type: User's training type; unknown values use the default branch
        units: Weight unit label, "kg" or "lbs"
        today: Reference day for the powerlifting windows (defaults to today)

    Returns:
        DashboardMetrics for the selected branch
    """
    training_type = TrainingType.coerce(training_type)
    today = today or date.today()
    workouts = list(workouts)

    if training_type == TrainingType.POWERLIFTING:
        return _powerlifting(workouts, units, today)
    if training_type == TrainingType.BODYBUILDING:
        return _bodybuilding(workouts, units)
    if training_type == TrainingType.CROSSFIT:
        return _crossfit(workouts)
    if training_type == TrainingType.CALISTHENICS:
        return _calisthenics(workouts)
    return _general(workouts, units)
