"""Tests for weekly plan generation."""

import itertools

import pytest

from fitplan import planner
from fitplan.errors import ConfigurationError
from fitplan.models import WEEKDAYS, DayPlan, Experience, Goal, Location, UserProfile, WeeklyPlan
from fitplan.planner import generate

ALL_COMBINATIONS = list(itertools.product(Goal, Location, Experience))


def make_profile(goal=Goal.STAY_HEALTHY, location=Location.GYM, experience=Experience.BEGINNER):
    return UserProfile(
        age=30,
        height_cm=180,
        weight_kg=80,
        goal=goal,
        location=location,
        experience=experience,
    )


@pytest.mark.parametrize("goal,location,experience", ALL_COMBINATIONS)
def test_plan_has_canonical_week(goal, location, experience):
    plan = generate(make_profile(goal, location, experience))
    assert [d.day_name for d in plan.days] == list(WEEKDAYS)


@pytest.mark.parametrize("goal,location,experience", ALL_COMBINATIONS)
def test_rest_and_training_days_are_well_formed(goal, location, experience):
    plan = generate(make_profile(goal, location, experience))
    assert plan.rest_days, "every template needs a rest day"
    for day in plan.days:
        if day.is_rest:
            assert day.exercises == ()
        else:
            assert day.exercises
            assert day.type
            assert all(e.sets > 0 for e in day.exercises)


@pytest.mark.parametrize("goal,location,experience", ALL_COMBINATIONS)
def test_generate_is_deterministic(goal, location, experience):
    profile = make_profile(goal, location, experience)
    assert generate(profile) == generate(profile)


def test_body_stats_do_not_change_plan():
    a = make_profile(Goal.MUSCLE_GAIN)
    b = UserProfile(
        age=64,
        height_cm=158,
        weight_kg=101.5,
        goal=Goal.MUSCLE_GAIN,
        location=Location.GYM,
        experience=Experience.BEGINNER,
    )
    assert generate(a) == generate(b)


@pytest.mark.parametrize("experience", list(Experience))
def test_goals_with_more_training_than_stay_healthy(experience):
    def active(goal):
        return len(generate(make_profile(goal, Location.GYM, experience)).active_days)

    assert active(Goal.MUSCLE_GAIN) > active(Goal.STAY_HEALTHY)
    assert active(Goal.FAT_LOSS) > active(Goal.STAY_HEALTHY)


@pytest.mark.parametrize("goal,experience", list(itertools.product(Goal, Experience)))
def test_location_only_changes_exercise_selection(goal, experience):
    gym = generate(make_profile(goal, Location.GYM, experience))
    home = generate(make_profile(goal, Location.HOME, experience))

    assert [d.is_rest for d in gym.days] == [d.is_rest for d in home.days]
    assert [d.type for d in gym.days] == [d.type for d in home.days]
    assert [d.exercises for d in gym.active_days] != [d.exercises for d in home.active_days]


@pytest.mark.parametrize("goal", list(Goal))
def test_home_plans_are_bodyweight_only(goal):
    for experience in Experience:
        plan = generate(make_profile(goal, Location.HOME, experience))
        for day in plan.active_days:
            for exercise in day.exercises:
                assert not planner.CATALOG[exercise.name].equipment, exercise.name


def test_gym_plans_use_equipment():
    plan = generate(make_profile(Goal.MUSCLE_GAIN, Location.GYM, Experience.INTERMEDIATE))
    names = [e.name for d in plan.active_days for e in d.exercises]
    assert any(planner.CATALOG[n].equipment for n in names)


def test_beginner_never_gets_more_sets_than_intermediate():
    for scheme in {spec.scheme for spec in planner.CATALOG.values()}:
        beginner_sets, _ = planner.PRESCRIPTIONS[(scheme, Experience.BEGINNER)]
        intermediate_sets, _ = planner.PRESCRIPTIONS[(scheme, Experience.INTERMEDIATE)]
        assert beginner_sets <= intermediate_sets, scheme


def test_fat_loss_home_beginner_scenario():
    profile = UserProfile(
        age=25,
        height_cm=175,
        weight_kg=70,
        goal=Goal.FAT_LOSS,
        location=Location.HOME,
        experience=Experience.BEGINNER,
    )
    plan = generate(profile)

    assert [d.type for d in plan.days] == [
        "Full Body",
        "Cardio",
        None,
        "Full Body",
        "Cardio",
        None,
        None,
    ]
    beginner_sets = [e.sets for d in plan.active_days for e in d.exercises]
    assert max(beginner_sets) <= 2

    intermediate = generate(
        UserProfile(
            age=25,
            height_cm=175,
            weight_kg=70,
            goal=Goal.FAT_LOSS,
            location=Location.HOME,
            experience=Experience.INTERMEDIATE,
        )
    )
    intermediate_sets = [e.sets for d in intermediate.active_days for e in d.exercises]
    assert sum(beginner_sets) / len(beginner_sets) < sum(intermediate_sets) / len(
        intermediate_sets
    )


def test_push_ups_prescription_by_experience():
    beginner = planner.build_exercise("Push-ups", Experience.BEGINNER, Location.HOME)
    intermediate = planner.build_exercise("Push-ups", Experience.INTERMEDIATE, Location.HOME)
    assert (beginner.sets, beginner.reps) == (2, "10-12")
    assert (intermediate.sets, intermediate.reps) == (3, "15-20")


def test_every_combination_has_a_template():
    assert set(planner.SPLIT_TEMPLATES) == set(itertools.product(Goal, Experience, Location))
    layout = planner.template_for(Goal.MUSCLE_GAIN, Experience.INTERMEDIATE, Location.HOME)
    assert layout == planner.SPLITS[(Goal.MUSCLE_GAIN, Experience.INTERMEDIATE)]


def test_missing_template_raises_configuration_error(monkeypatch):
    key = (Goal.FAT_LOSS, Experience.BEGINNER, Location.HOME)
    monkeypatch.delitem(planner.SPLIT_TEMPLATES, key)
    with pytest.raises(ConfigurationError):
        generate(make_profile(Goal.FAT_LOSS, Location.HOME, Experience.BEGINNER))


def test_missing_session_raises_configuration_error(monkeypatch):
    monkeypatch.delitem(planner.SESSIONS, (planner.CARDIO, Location.GYM))
    with pytest.raises(ConfigurationError, match="Cardio"):
        generate(make_profile(Goal.STAY_HEALTHY, Location.GYM, Experience.BEGINNER))


def test_equipment_listed_for_home_raises_configuration_error(monkeypatch):
    monkeypatch.setitem(planner.SESSIONS, (planner.CARDIO, Location.HOME), ("Rowing Machine",))
    with pytest.raises(ConfigurationError, match="equipment"):
        generate(make_profile(Goal.STAY_HEALTHY, Location.HOME, Experience.BEGINNER))


def test_unknown_exercise_raises_configuration_error():
    with pytest.raises(ConfigurationError, match="catalog"):
        planner.build_exercise("Handstand Walk", Experience.BEGINNER, Location.HOME)


def test_template_without_rest_day_raises_configuration_error(monkeypatch):
    key = (Goal.STAY_HEALTHY, Experience.BEGINNER, Location.GYM)
    monkeypatch.setitem(planner.SPLIT_TEMPLATES, key, (planner.FULL_BODY,) * 7)
    with pytest.raises(ConfigurationError, match="rest day"):
        generate(make_profile())


def test_short_template_raises_configuration_error(monkeypatch):
    key = (Goal.STAY_HEALTHY, Experience.BEGINNER, Location.GYM)
    monkeypatch.setitem(planner.SPLIT_TEMPLATES, key, (planner.FULL_BODY, None))
    with pytest.raises(ConfigurationError):
        generate(make_profile())


def test_weekly_plan_rejects_out_of_order_days():
    days = tuple(DayPlan(day_name=name, is_rest=True) for name in reversed(WEEKDAYS))
    with pytest.raises(ConfigurationError):
        WeeklyPlan(days=days)
