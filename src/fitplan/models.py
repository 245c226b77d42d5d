"""
Domain entities shared by the workout planner and the nutrition calculator.
"""

from __future__ import annotations

import enum
import math
from dataclasses import asdict, dataclass
from typing import Any

from .errors import ConfigurationError, ValidationError

WEEKDAYS: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MIN_AGE = 1
MAX_AGE = 120
MAX_HEIGHT_CM = 300
MAX_WEIGHT_KG = 700


class Goal(str, enum.Enum):
    """Training goal."""

    STAY_HEALTHY = "stay_healthy"
    MUSCLE_GAIN = "muscle_gain"
    FAT_LOSS = "fat_loss"


class Location(str, enum.Enum):
    """Where the user trains."""

    GYM = "gym"
    HOME = "home"


class Experience(str, enum.Enum):
    """Training experience tier."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"


def _coerce_enum(enum_cls: type[enum.Enum], value: Any, field_name: str) -> Any:
    """Accept an enum member, its value or its name (case-insensitive)."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().lower().replace("-", "_").replace(" ", "_")
        for member in enum_cls:
            if key in (member.value, member.name.lower()):
                return member
    allowed = ", ".join(m.value for m in enum_cls)
    raise ValidationError(f"{field_name} must be one of: {allowed} (got {value!r})", field_name)


def _parse_flag(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        if key in {"1", "true", "yes", "on"}:
            return True
        if key in {"0", "false", "no", "off"}:
            return False
    raise ValidationError(f"{field_name} must be true or false (got {value!r})", field_name)


@dataclass(frozen=True)
class UserProfile:
    age: int
    height_cm: float
    weight_kg: float
    goal: Goal
    location: Location
    experience: Experience
    onboarded: bool = True

    def validate(self) -> None:
        """Raise ValidationError if any field is outside its domain."""
        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise ValidationError(f"age must be an integer (got {self.age!r})", "age")
        if not MIN_AGE <= self.age <= MAX_AGE:
            raise ValidationError(f"age must be between {MIN_AGE} and {MAX_AGE}", "age")
        for name, limit in (("height_cm", MAX_HEIGHT_CM), ("weight_kg", MAX_WEIGHT_KG)):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int | float):
                raise ValidationError(f"{name} must be a number (got {value!r})", name)
            if not math.isfinite(value) or value <= 0:
                raise ValidationError(f"{name} must be a positive number", name)
            if value > limit:
                raise ValidationError(f"{name} must be at most {limit}", name)
        if not isinstance(self.goal, Goal):
            raise ValidationError(f"goal must be a Goal (got {self.goal!r})", "goal")
        if not isinstance(self.location, Location):
            raise ValidationError(
                f"location must be a Location (got {self.location!r})", "location"
            )
        if not isinstance(self.experience, Experience):
            raise ValidationError(
                f"experience must be an Experience (got {self.experience!r})", "experience"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserProfile:
        """Build and validate a profile from plain values (e.g. form or JSON input)."""
        required = ("age", "height_cm", "weight_kg", "goal", "location", "experience")
        for name in required:
            if data.get(name) is None:
                raise ValidationError(f"{name} is required", name)
        profile = cls(
            age=data["age"],
            height_cm=data["height_cm"],
            weight_kg=data["weight_kg"],
            goal=_coerce_enum(Goal, data["goal"], "goal"),
            location=_coerce_enum(Location, data["location"], "location"),
            experience=_coerce_enum(Experience, data["experience"], "experience"),
            onboarded=_parse_flag(data.get("onboarded", True), "onboarded"),
        )
        profile.validate()
        return profile

    def to_dict(self) -> dict[str, Any]:
        return {
            "age": self.age,
            "height_cm": self.height_cm,
            "weight_kg": self.weight_kg,
            "goal": self.goal.value,
            "location": self.location.value,
            "experience": self.experience.value,
            "onboarded": self.onboarded,
        }


@dataclass(frozen=True)
class Exercise:
    name: str
    sets: int
    reps: str | int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DayPlan:
    day_name: str
    is_rest: bool
    type: str | None = None
    exercises: tuple[Exercise, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "day_name": self.day_name,
            "is_rest": self.is_rest,
            "type": self.type,
            "exercises": [e.to_dict() for e in self.exercises],
        }


@dataclass(frozen=True)
class WeeklyPlan:
    """Seven days, Monday through Sunday. Invariants are checked on construction."""

    days: tuple[DayPlan, ...]

    def __post_init__(self) -> None:
        names = tuple(d.day_name for d in self.days)
        if names != WEEKDAYS:
            raise ConfigurationError(f"weekly plan must cover {WEEKDAYS}, got {names}")
        for day in self.days:
            if day.is_rest and day.exercises:
                raise ConfigurationError(f"rest day {day.day_name} has exercises")
            if not day.is_rest and not day.exercises:
                raise ConfigurationError(f"training day {day.day_name} has no exercises")
        if not any(d.is_rest for d in self.days):
            raise ConfigurationError("weekly plan has no rest day")

    def day(self, name: str) -> DayPlan:
        for d in self.days:
            if d.day_name.lower() == name.lower():
                return d
        raise KeyError(name)

    @property
    def active_days(self) -> tuple[DayPlan, ...]:
        return tuple(d for d in self.days if not d.is_rest)

    @property
    def rest_days(self) -> tuple[DayPlan, ...]:
        return tuple(d for d in self.days if d.is_rest)

    def to_dict(self) -> dict[str, Any]:
        return {"days": [d.to_dict() for d in self.days]}


@dataclass(frozen=True)
class DietPlan:
    calories: int
    protein: int
    meals: tuple[str, ...]
    bmr: int = 0
    tdee: int = 0
    fat: int = 0
    carbs: int = 0

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["meals"] = list(self.meals)
        return data
