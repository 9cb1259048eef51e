"""
Progress page metrics.

Two parts:
- universal aggregates computed for everyone (top exercises by volume,
  total volume, workout count, sessions per week)
- a training-type specific section with chart series and highlight cards,
  dispatched the same way as the dashboard (see dashboard_metrics)
"""
from collections import Counter
from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from domain.models import TrainingType, WorkoutRecord

from backend.core.dashboard_metrics import Highlight
from backend.core.exercise_categories import (
    BODYWEIGHT_KEYWORDS,
    FUNCTIONAL_KEYWORDS,
    classify_muscle_group,
    display_keyword,
    match_keyword,
)
from backend.core.one_rep_max import best_single
from backend.core.rounding import round_half_up, round_one_decimal

TOP_EXERCISES_LIMIT = 5
HIGHLIGHTS_LIMIT = 3

POWERLIFT_CHARTS = (
    ("squat", "Squat", "#00a3ff"),
    ("bench", "Bench Press", "#fbbf24"),
    ("deadlift", "Deadlift", "#10b981"),
)
VOLUME_CHART_COLOR = "#8b5cf6"
BODYWEIGHT_CHART_COLOR = "#00a3ff"


# =============================================================================
# Result DTOs
# =============================================================================


@dataclass
class ChartPoint:
    date: str  # ISO day
    label: str  # e.g. "Jan 5"
    value: float


@dataclass
class Chart:
    title: str
    color: str
    data: List[ChartPoint] = field(default_factory=list)


@dataclass
class HeadlineMetric:
    label: str
    value: float
    unit: str


@dataclass
class TopExercise:
    name: str
    volume: int
    sessions: int


@dataclass
class UniversalMetrics:
    top_exercises: List[TopExercise]
    total_volume: int
    workout_frequency: int
    consistency: float  # average sessions per week


@dataclass
class TypeSpecificMetrics:
    charts: List[Chart] = field(default_factory=list)
    highlights: List[Highlight] = field(default_factory=list)
    primary_metric: Optional[HeadlineMetric] = None


@dataclass
class ProgressMetrics:
    universal: UniversalMetrics
    type_specific: TypeSpecificMetrics

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# =============================================================================
# Helpers
# =============================================================================


def _short_label(day: date) -> str:
    return f"{day.strftime('%b')} {day.day}"


def _point(day: date, value: float) -> ChartPoint:
    return ChartPoint(date=day.isoformat(), label=_short_label(day), value=value)


def _chronological(workouts: Sequence[WorkoutRecord]) -> List[WorkoutRecord]:
    # Input is newest first; reversing before the stable sort keeps same-day order
    return sorted(reversed(list(workouts)), key=lambda w: w.date)


def calculate_consistency(workouts: Sequence[WorkoutRecord], today: date) -> float:
    """
    Average sessions per week since the oldest workout.

    Returns:
        ``len(workouts) / days_since_oldest * 7`` rounded to one decimal,
        0 when there are no workouts or no full day has elapsed
    """
    if not workouts:
        return 0
    oldest = min(w.date for w in workouts)
    days = (today - oldest).days
    if days <= 0:
        return 0
    return round_one_decimal(len(workouts) / days * 7)


def calculate_universal_metrics(
    workouts: Sequence[WorkoutRecord], today: date
) -> UniversalMetrics:
    stats: Dict[str, Dict[str, float]] = {}
    total_volume = 0.0

    for workout in workouts:
        for lift in workout.named_lifts():
            entry = stats.setdefault(lift.exercise, {"volume": 0.0, "sessions": 0})
            volume = lift.volume
            entry["volume"] += volume
            entry["sessions"] += 1
            total_volume += volume

    ranked = sorted(stats.items(), key=lambda item: item[1]["volume"], reverse=True)
    top_exercises = [
        TopExercise(
            name=name,
            volume=round_half_up(entry["volume"]),
            sessions=int(entry["sessions"]),
        )
        for name, entry in ranked[:TOP_EXERCISES_LIMIT]
    ]

    return UniversalMetrics(
        top_exercises=top_exercises,
        total_volume=round_half_up(total_volume),
        workout_frequency=len(workouts),
        consistency=calculate_consistency(workouts, today),
    )


# =============================================================================
# Branches
# =============================================================================


def _powerlifting(workouts: Sequence[WorkoutRecord], units: str) -> TypeSpecificMetrics:
    charts: List[Chart] = []
    highlights: List[Highlight] = []
    competition_total = 0.0

    ordered = _chronological(workouts)
    for keyword, title, color in POWERLIFT_CHARTS:
        chart = Chart(title=title, color=color)
        for workout in ordered:
            lift = next(
                (c for c in workout.named_lifts() if keyword in c.exercise.lower()),
                None,
            )
            if lift is None or not lift.sets:
                continue
            best = best_single(lift.sets)
            if best > 0:
                chart.data.append(_point(workout.date, best))

        current = chart.data[-1].value if chart.data else 0
        change = None
        if len(chart.data) > 1:
            change = round_half_up(current - chart.data[0].value)

        charts.append(chart)
        highlights.append(
            Highlight(title=title, value=round_half_up(current), unit=units, change=change)
        )
        competition_total += current

    return TypeSpecificMetrics(
        charts=charts,
        highlights=highlights,
        primary_metric=HeadlineMetric(
            label="Competition Total",
            value=round_half_up(competition_total),
            unit=units,
        ),
    )


def _bodybuilding(workouts: Sequence[WorkoutRecord], units: str) -> TypeSpecificMetrics:
    groups: Dict[str, float] = {}
    volume_by_day: Dict[date, float] = {}
    total_volume = 0.0

    for workout in workouts:
        day_volume = 0.0
        for lift in workout.named_lifts():
            volume = lift.volume
            total_volume += volume
            day_volume += volume
            group = classify_muscle_group(lift.exercise) or "Other"
            groups[group] = groups.get(group, 0) + volume
        volume_by_day[workout.date] = volume_by_day.get(workout.date, 0) + day_volume

    top_groups = sorted(groups.items(), key=lambda item: item[1], reverse=True)
    volume_chart = Chart(
        title="Total Volume",
        color=VOLUME_CHART_COLOR,
        data=[
            _point(day, round_half_up(volume))
            for day, volume in sorted(volume_by_day.items())
        ],
    )

    return TypeSpecificMetrics(
        charts=[volume_chart],
        highlights=[
            Highlight(title=name, value=round_half_up(volume), unit=units)
            for name, volume in top_groups[:HIGHLIGHTS_LIMIT]
        ],
        primary_metric=HeadlineMetric(
            label="Total Volume", value=round_half_up(total_volume), unit=units
        ),
    )


def _crossfit(workouts: Sequence[WorkoutRecord]) -> TypeSpecificMetrics:
    prs: Dict[str, int] = {}
    for workout in workouts:
        for lift in workout.named_lifts():
            keyword = match_keyword(lift.exercise, FUNCTIONAL_KEYWORDS)
            if keyword is None:
                continue
            max_reps = lift.max_completed_reps
            if max_reps > 0:
                prs[keyword] = max(prs.get(keyword, 0), max_reps)

    ranked = sorted(prs.items(), key=lambda item: item[1], reverse=True)
    return TypeSpecificMetrics(
        charts=[],
        highlights=[
            Highlight(title=display_keyword(name), value=reps, unit="reps")
            for name, reps in ranked[:HIGHLIGHTS_LIMIT]
        ],
        primary_metric=HeadlineMetric(
            label="Functional PRs", value=len(prs), unit="exercises"
        ),
    )


def _calisthenics(workouts: Sequence[WorkoutRecord]) -> TypeSpecificMetrics:
    series: Dict[str, List[ChartPoint]] = {}
    for workout in _chronological(workouts):
        for lift in workout.named_lifts():
            keyword = match_keyword(lift.exercise, BODYWEIGHT_KEYWORDS)
            if keyword is None:
                continue
            max_reps = lift.max_completed_reps
            if max_reps > 0:
                series.setdefault(keyword, []).append(_point(workout.date, max_reps))

    # Most frequently trained movements first
    ranked = sorted(series.items(), key=lambda item: len(item[1]), reverse=True)
    top = ranked[:HIGHLIGHTS_LIMIT]

    return TypeSpecificMetrics(
        charts=[
            Chart(title=display_keyword(name), color=BODYWEIGHT_CHART_COLOR, data=points)
            for name, points in top
        ],
        highlights=[
            Highlight(
                title=display_keyword(name),
                value=points[-1].value if points else 0,
                unit="reps",
            )
            for name, points in top
        ],
        primary_metric=HeadlineMetric(
            label="Bodyweight PRs", value=len(series), unit="exercises"
        ),
    )


def _general(workouts: Sequence[WorkoutRecord], units: str) -> TypeSpecificMetrics:
    frequency: Counter = Counter()
    total_volume = 0.0
    for workout in workouts:
        for lift in workout.named_lifts():
            frequency[lift.exercise] += 1
            total_volume += lift.volume

    return TypeSpecificMetrics(
        charts=[],
        highlights=[
            Highlight(title=name, value=count, unit="sessions")
            for name, count in frequency.most_common(HIGHLIGHTS_LIMIT)
        ],
        primary_metric=HeadlineMetric(
            label="Total Volume", value=round_half_up(total_volume), unit=units
        ),
    )


# =============================================================================
# Entry Point
# =============================================================================


def calculate_progress_metrics(
    workouts: Sequence[WorkoutRecord],
    training_type: TrainingType,
    units: str = "kg",
    *,
    today: Optional[date] = None,
) -> ProgressMetrics:
    """
    Compute the progress page bundle.

    Args:
        workouts: Workouts in the progress window (newest first)
        training_type: User's training type; unknown values use the default branch
        units: Weight unit label, "kg" or "lbs"
        today: Reference day for the consistency figure (defaults to today)

    Returns:
        ProgressMetrics with universal aggregates and the branch-specific section
    """
    training_type = TrainingType.coerce(training_type)
    today = today or date.today()
    workouts = list(workouts)

    if training_type == TrainingType.POWERLIFTING:
        type_specific = _powerlifting(workouts, units)
    elif training_type == TrainingType.BODYBUILDING:
        type_specific = _bodybuilding(workouts, units)
    elif training_type == TrainingType.CROSSFIT:
        type_specific = _crossfit(workouts)
    elif training_type == TrainingType.CALISTHENICS:
        type_specific = _calisthenics(workouts)
    else:
        type_specific = _general(workouts, units)

    return ProgressMetrics(
        universal=calculate_universal_metrics(workouts, today),
        type_specific=type_specific,
    )
