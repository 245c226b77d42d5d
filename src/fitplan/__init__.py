"""FitPlan - deterministic weekly workout plans and daily nutrition targets."""

import importlib.metadata

from .errors import ConfigurationError, FitPlanError, ValidationError
from .models import (
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
from .nutrition import calculate
from .planner import generate

try:
    __version__ = importlib.metadata.version("fitplan")
except importlib.metadata.PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "WEEKDAYS",
    "ConfigurationError",
    "DayPlan",
    "DietPlan",
    "Exercise",
    "Experience",
    "FitPlanError",
    "Goal",
    "Location",
    "UserProfile",
    "ValidationError",
    "WeeklyPlan",
    "calculate",
    "generate",
]
