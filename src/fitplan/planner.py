"""
Weekly workout plan generation.

Plans are assembled from lookup tables:

* ``SPLITS`` maps ``(goal, experience)`` to the seven-slot weekly layout
  (a session label per weekday, ``None`` for rest).
* ``SESSIONS`` maps ``(session label, location)`` to the ordered exercise list.
* ``CATALOG`` describes each exercise (equipment need, prescription scheme) and
  ``PRESCRIPTIONS`` gives the fixed sets/reps per ``(scheme, experience)``.

Location only changes which exercises fill a session, never the layout.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import ConfigurationError
from .models import (
    WEEKDAYS,
    DayPlan,
    Exercise,
    Experience,
    Goal,
    Location,
    UserProfile,
    WeeklyPlan,
)

logger = logging.getLogger(__name__)

BEGINNER = Experience.BEGINNER
INTERMEDIATE = Experience.INTERMEDIATE
GYM = Location.GYM
HOME = Location.HOME

FULL_BODY = "Full Body"
UPPER_BODY = "Upper Body"
LOWER_BODY = "Lower Body"
PUSH = "Push"
PULL = "Pull"
LEGS = "Legs"
CARDIO = "Cardio"
HIIT = "HIIT"
MOBILITY = "Mobility"

# Monday .. Sunday, None = rest
SPLITS: dict[tuple[Goal, Experience], tuple[str | None, ...]] = {
    (Goal.STAY_HEALTHY, BEGINNER): (
        FULL_BODY, None, CARDIO, None, FULL_BODY, None, None,
    ),
    (Goal.STAY_HEALTHY, INTERMEDIATE): (
        FULL_BODY, CARDIO, None, FULL_BODY, MOBILITY, None, None,
    ),
    (Goal.MUSCLE_GAIN, BEGINNER): (
        UPPER_BODY, LOWER_BODY, None, UPPER_BODY, LOWER_BODY, None, None,
    ),
    (Goal.MUSCLE_GAIN, INTERMEDIATE): (
        PUSH, PULL, LEGS, None, UPPER_BODY, LOWER_BODY, None,
    ),
    (Goal.FAT_LOSS, BEGINNER): (
        FULL_BODY, CARDIO, None, FULL_BODY, CARDIO, None, None,
    ),
    (Goal.FAT_LOSS, INTERMEDIATE): (
        HIIT, UPPER_BODY, CARDIO, LOWER_BODY, None, HIIT, None,
    ),
}  # fmt: skip


@dataclass(frozen=True)
class ExerciseSpec:
    scheme: str
    equipment: bool


STRENGTH = "strength"
HYPERTROPHY = "hypertrophy"
BODYWEIGHT = "bodyweight"
HOLD = "hold"
CONDITIONING = "conditioning"
STEADY = "steady"
STRETCH = "stretch"

# (sets, reps); a beginner never gets more sets than an intermediate
PRESCRIPTIONS: dict[tuple[str, Experience], tuple[int, str]] = {
    (STRENGTH, BEGINNER): (3, "8-10"),
    (STRENGTH, INTERMEDIATE): (4, "5-8"),
    (HYPERTROPHY, BEGINNER): (2, "12-15"),
    (HYPERTROPHY, INTERMEDIATE): (4, "8-12"),
    (BODYWEIGHT, BEGINNER): (2, "10-12"),
    (BODYWEIGHT, INTERMEDIATE): (3, "15-20"),
    (HOLD, BEGINNER): (2, "20s"),
    (HOLD, INTERMEDIATE): (3, "45s"),
    (CONDITIONING, BEGINNER): (2, "30s"),
    (CONDITIONING, INTERMEDIATE): (4, "40s"),
    (STEADY, BEGINNER): (1, "15 min"),
    (STEADY, INTERMEDIATE): (1, "25 min"),
    (STRETCH, BEGINNER): (2, "30s"),
    (STRETCH, INTERMEDIATE): (2, "60s"),
}

CATALOG: dict[str, ExerciseSpec] = {
    # equipment
    "Barbell Back Squat": ExerciseSpec(STRENGTH, True),
    "Barbell Bench Press": ExerciseSpec(STRENGTH, True),
    "Deadlift": ExerciseSpec(STRENGTH, True),
    "Overhead Press": ExerciseSpec(STRENGTH, True),
    "Barbell Row": ExerciseSpec(STRENGTH, True),
    "Romanian Deadlift": ExerciseSpec(HYPERTROPHY, True),
    "Dumbbell Bench Press": ExerciseSpec(HYPERTROPHY, True),
    "Incline Dumbbell Press": ExerciseSpec(HYPERTROPHY, True),
    "Lat Pulldown": ExerciseSpec(HYPERTROPHY, True),
    "Seated Cable Row": ExerciseSpec(HYPERTROPHY, True),
    "Leg Press": ExerciseSpec(HYPERTROPHY, True),
    "Leg Curl": ExerciseSpec(HYPERTROPHY, True),
    "Dumbbell Walking Lunges": ExerciseSpec(HYPERTROPHY, True),
    "Standing Calf Raises": ExerciseSpec(HYPERTROPHY, True),
    "Face Pulls": ExerciseSpec(HYPERTROPHY, True),
    "Dumbbell Curls": ExerciseSpec(HYPERTROPHY, True),
    "Cable Tricep Pushdown": ExerciseSpec(HYPERTROPHY, True),
    "Cable Crunch": ExerciseSpec(HYPERTROPHY, True),
    "Kettlebell Swings": ExerciseSpec(CONDITIONING, True),
    "Box Jumps": ExerciseSpec(CONDITIONING, True),
    "Battle Ropes": ExerciseSpec(CONDITIONING, True),
    "Rowing Machine": ExerciseSpec(STEADY, True),
    "Treadmill Incline Walk": ExerciseSpec(STEADY, True),
    "Stationary Bike": ExerciseSpec(STEADY, True),
    "Foam Rolling": ExerciseSpec(STRETCH, True),
    # bodyweight
    "Bodyweight Squats": ExerciseSpec(BODYWEIGHT, False),
    "Push-ups": ExerciseSpec(BODYWEIGHT, False),
    "Pike Push-ups": ExerciseSpec(BODYWEIGHT, False),
    "Decline Push-ups": ExerciseSpec(BODYWEIGHT, False),
    "Diamond Push-ups": ExerciseSpec(BODYWEIGHT, False),
    "Reverse Lunges": ExerciseSpec(BODYWEIGHT, False),
    "Split Squats": ExerciseSpec(BODYWEIGHT, False),
    "Glute Bridges": ExerciseSpec(BODYWEIGHT, False),
    "Single-Leg Glute Bridges": ExerciseSpec(BODYWEIGHT, False),
    "Calf Raises": ExerciseSpec(BODYWEIGHT, False),
    "Prone Y-T-W Raises": ExerciseSpec(BODYWEIGHT, False),
    "Reverse Snow Angels": ExerciseSpec(BODYWEIGHT, False),
    "Bird Dogs": ExerciseSpec(BODYWEIGHT, False),
    "Superman Hold": ExerciseSpec(HOLD, False),
    "Plank": ExerciseSpec(HOLD, False),
    "Wall Sit": ExerciseSpec(HOLD, False),
    "Burpees": ExerciseSpec(CONDITIONING, False),
    "Mountain Climbers": ExerciseSpec(CONDITIONING, False),
    "Jump Squats": ExerciseSpec(CONDITIONING, False),
    "Skater Hops": ExerciseSpec(CONDITIONING, False),
    "Jumping Jacks": ExerciseSpec(CONDITIONING, False),
    "High Knees": ExerciseSpec(CONDITIONING, False),
    "Brisk Walk": ExerciseSpec(STEADY, False),
    "Cat-Cow": ExerciseSpec(STRETCH, False),
    "Hip Flexor Stretch": ExerciseSpec(STRETCH, False),
    "World's Greatest Stretch": ExerciseSpec(STRETCH, False),
    "Child's Pose": ExerciseSpec(STRETCH, False),
}

SESSIONS: dict[tuple[str, Location], tuple[str, ...]] = {
    (FULL_BODY, GYM): (
        "Barbell Back Squat",
        "Dumbbell Bench Press",
        "Seated Cable Row",
        "Romanian Deadlift",
        "Plank",
    ),
    (FULL_BODY, HOME): (
        "Bodyweight Squats",
        "Push-ups",
        "Reverse Lunges",
        "Glute Bridges",
        "Plank",
    ),
    (UPPER_BODY, GYM): (
        "Barbell Bench Press",
        "Lat Pulldown",
        "Overhead Press",
        "Seated Cable Row",
        "Dumbbell Curls",
    ),
    (UPPER_BODY, HOME): (
        "Push-ups",
        "Prone Y-T-W Raises",
        "Pike Push-ups",
        "Reverse Snow Angels",
        "Diamond Push-ups",
    ),
    (LOWER_BODY, GYM): (
        "Barbell Back Squat",
        "Romanian Deadlift",
        "Leg Press",
        "Dumbbell Walking Lunges",
        "Standing Calf Raises",
    ),
    (LOWER_BODY, HOME): (
        "Bodyweight Squats",
        "Reverse Lunges",
        "Glute Bridges",
        "Wall Sit",
        "Calf Raises",
    ),
    (PUSH, GYM): (
        "Barbell Bench Press",
        "Overhead Press",
        "Incline Dumbbell Press",
        "Cable Tricep Pushdown",
    ),
    (PUSH, HOME): ("Push-ups", "Pike Push-ups", "Decline Push-ups", "Diamond Push-ups"),
    (PULL, GYM): ("Deadlift", "Lat Pulldown", "Barbell Row", "Face Pulls", "Dumbbell Curls"),
    (PULL, HOME): ("Superman Hold", "Prone Y-T-W Raises", "Reverse Snow Angels", "Bird Dogs"),
    (LEGS, GYM): (
        "Barbell Back Squat",
        "Leg Press",
        "Romanian Deadlift",
        "Leg Curl",
        "Standing Calf Raises",
    ),
    (LEGS, HOME): (
        "Split Squats",
        "Jump Squats",
        "Single-Leg Glute Bridges",
        "Wall Sit",
        "Calf Raises",
    ),
    (CARDIO, GYM): ("Treadmill Incline Walk", "Rowing Machine", "Stationary Bike"),
    (CARDIO, HOME): ("Brisk Walk", "Jumping Jacks", "High Knees"),
    (HIIT, GYM): ("Kettlebell Swings", "Box Jumps", "Battle Ropes", "Burpees", "Cable Crunch"),
    (HIIT, HOME): ("Burpees", "Mountain Climbers", "Jump Squats", "Skater Hops", "Plank"),
    (MOBILITY, GYM): ("Foam Rolling", "Cat-Cow", "Hip Flexor Stretch", "World's Greatest Stretch"),
    (MOBILITY, HOME): ("Cat-Cow", "Hip Flexor Stretch", "World's Greatest Stretch", "Child's Pose"),
}

SPLIT_TEMPLATES: dict[tuple[Goal, Experience, Location], tuple[str | None, ...]] = {
    (goal, experience, location): layout
    for (goal, experience), layout in SPLITS.items()
    for location in Location
}


def template_for(
    goal: Goal, experience: Experience, location: Location
) -> tuple[str | None, ...]:
    """Return the weekly layout for a profile combination."""
    try:
        return SPLIT_TEMPLATES[(goal, experience, location)]
    except KeyError:
        raise ConfigurationError(
            f"no split template for goal={goal} experience={experience} location={location}"
        ) from None


def build_exercise(name: str, experience: Experience, location: Location) -> Exercise:
    spec = CATALOG.get(name)
    if spec is None:
        raise ConfigurationError(f"exercise {name!r} is not in the catalog")
    if location == HOME and spec.equipment:
        raise ConfigurationError(f"exercise {name!r} needs equipment but is listed for home")
    try:
        sets, reps = PRESCRIPTIONS[(spec.scheme, experience)]
    except KeyError:
        raise ConfigurationError(
            f"no prescription for scheme={spec.scheme} experience={experience}"
        ) from None
    return Exercise(name=name, sets=sets, reps=reps)


def build_session(
    session_type: str, experience: Experience, location: Location
) -> tuple[Exercise, ...]:
    try:
        names = SESSIONS[(session_type, location)]
    except KeyError:
        raise ConfigurationError(
            f"no exercises for session={session_type!r} location={location}"
        ) from None
    return tuple(build_exercise(n, experience, location) for n in names)


def generate(profile: UserProfile) -> WeeklyPlan:
    """
    Build the seven-day plan for a profile, Monday first.

    Raises:
        ConfigurationError: a rule table has no entry for the profile's combination.
    """
    layout = template_for(profile.goal, profile.experience, profile.location)
    if len(layout) != len(WEEKDAYS):
        raise ConfigurationError(f"split template has {len(layout)} days, expected 7")

    days = []
    for day_name, session_type in zip(WEEKDAYS, layout, strict=True):
        if session_type is None:
            days.append(DayPlan(day_name=day_name, is_rest=True))
            continue
        exercises = build_session(session_type, profile.experience, profile.location)
        days.append(
            DayPlan(day_name=day_name, is_rest=False, type=session_type, exercises=exercises)
        )

    plan = WeeklyPlan(days=tuple(days))
    logger.debug(
        "Generated plan: goal=%s experience=%s location=%s active_days=%s",
        profile.goal,
        profile.experience,
        profile.location,
        len(plan.active_days),
    )
    return plan
