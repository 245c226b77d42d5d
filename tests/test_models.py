"""Tests for profile parsing and plan entities."""

import pytest

from fitplan.errors import ValidationError
from fitplan.models import (
    WEEKDAYS,
    DayPlan,
    DietPlan,
    Exercise,
    Experience,
    Goal,
    Location,
    UserProfile,
    WeeklyPlan,
)


def test_profile_from_dict_coerces_enum_strings():
    profile = UserProfile.from_dict(
        {
            "age": 25,
            "height_cm": 175,
            "weight_kg": 70,
            "goal": "FAT_LOSS",
            "location": "home",
            "experience": "Beginner",
        }
    )
    assert profile.goal is Goal.FAT_LOSS
    assert profile.location is Location.HOME
    assert profile.experience is Experience.BEGINNER
    assert profile.onboarded is True


def test_profile_from_dict_accepts_spaced_names():
    profile = UserProfile.from_dict(
        {
            "age": 40,
            "height_cm": 165,
            "weight_kg": 60,
            "goal": "muscle gain",
            "location": Location.GYM,
            "experience": "intermediate",
            "onboarded": False,
        }
    )
    assert profile.goal is Goal.MUSCLE_GAIN
    assert profile.onboarded is False


def test_profile_from_dict_rejects_unknown_goal():
    with pytest.raises(ValidationError) as exc_info:
        UserProfile.from_dict(
            {
                "age": 25,
                "height_cm": 175,
                "weight_kg": 70,
                "goal": "get_swole",
                "location": "gym",
                "experience": "beginner",
            }
        )
    assert exc_info.value.field == "goal"
    assert "stay_healthy" in str(exc_info.value)


def test_profile_from_dict_requires_all_fields():
    with pytest.raises(ValidationError) as exc_info:
        UserProfile.from_dict({"age": 25, "height_cm": 175, "goal": "fat_loss"})
    assert exc_info.value.field == "weight_kg"


BASE = {
    "age": 25,
    "height_cm": 175,
    "weight_kg": 70,
    "goal": "fat_loss",
    "location": "home",
    "experience": "beginner",
}


@pytest.mark.parametrize(
    "raw,expected", [("false", False), (" No ", False), ("0", False), ("TRUE", True), (True, True)]
)
def test_profile_from_dict_parses_onboarded_flag(raw, expected):
    profile = UserProfile.from_dict({**BASE, "onboarded": raw})
    assert profile.onboarded is expected


@pytest.mark.parametrize("raw", ["maybe", 1, None])
def test_profile_from_dict_rejects_unclear_onboarded_flag(raw):
    with pytest.raises(ValidationError) as exc_info:
        UserProfile.from_dict({**BASE, "onboarded": raw})
    assert exc_info.value.field == "onboarded"


def test_profile_to_dict_uses_enum_values():
    profile = UserProfile(25, 175, 70, Goal.FAT_LOSS, Location.HOME, Experience.BEGINNER)
    assert profile.to_dict() == {
        "age": 25,
        "height_cm": 175,
        "weight_kg": 70,
        "goal": "fat_loss",
        "location": "home",
        "experience": "beginner",
        "onboarded": True,
    }


def test_validation_error_is_a_value_error():
    with pytest.raises(ValueError):
        UserProfile(0, 175, 70, Goal.FAT_LOSS, Location.HOME, Experience.BEGINNER).validate()


def test_weekly_plan_lookup_and_serialization():
    days = [DayPlan(day_name=name, is_rest=True) for name in WEEKDAYS]
    days[0] = DayPlan(
        day_name="Monday",
        is_rest=False,
        type="Cardio",
        exercises=(Exercise(name="Brisk Walk", sets=1, reps="15 min"),),
    )
    plan = WeeklyPlan(days=tuple(days))

    assert plan.day("monday").type == "Cardio"
    assert len(plan.active_days) == 1
    assert len(plan.rest_days) == 6
    assert plan.to_dict()["days"][0] == {
        "day_name": "Monday",
        "is_rest": False,
        "type": "Cardio",
        "exercises": [{"name": "Brisk Walk", "sets": 1, "reps": "15 min"}],
    }
    with pytest.raises(KeyError):
        plan.day("Funday")


def test_diet_plan_to_dict_lists_meals():
    diet = DietPlan(calories=2000, protein=120, meals=("a", "b", "c", "d"))
    assert diet.to_dict()["meals"] == ["a", "b", "c", "d"]
