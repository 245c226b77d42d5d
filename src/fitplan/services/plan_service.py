"""
Service for assembling and rendering a user's week.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any

from ..config import SETTINGS
from ..errors import ValidationError
from ..models import WEEKDAYS, DayPlan, DietPlan, UserProfile, WeeklyPlan
from ..nutrition import calculate
from ..planner import generate
from .coach_service import FALLBACK_MESSAGE, CoachService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanBundle:
    profile: UserProfile
    plan: WeeklyPlan
    diet: DietPlan
    coach_message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "profile": self.profile.to_dict(),
            "plan": self.plan.to_dict(),
            "diet": self.diet.to_dict(),
            "coach_message": self.coach_message,
        }


class PlanService:
    """Service for handling plan-related operations."""

    def __init__(self, coach: CoachService | None = None):
        self.coach = coach or CoachService()

    def compute(self, profile: UserProfile) -> tuple[WeeklyPlan, DietPlan]:
        """Compute plan and diet for an onboarded profile."""
        if not profile.onboarded:
            raise ValidationError("profile has not completed onboarding", "onboarded")
        diet = calculate(profile)
        plan = generate(profile)
        return plan, diet

    async def build(self, profile: UserProfile, with_coach: bool = True) -> PlanBundle:
        """
        Build plan, diet and coaching message.

        The coaching message is fetched after plan and diet are computed and is
        bounded by COACH_TIMEOUT; any failure yields the fallback message.
        """
        plan, diet = self.compute(profile)

        message = FALLBACK_MESSAGE
        if with_coach and SETTINGS.FF_COACH_MESSAGE:
            message = await self.fetch_coach_message(profile, plan, diet)

        logger.info(
            "Built plan: goal=%s location=%s experience=%s calories=%s",
            profile.goal.value,
            profile.location.value,
            profile.experience.value,
            diet.calories,
        )
        return PlanBundle(profile=profile, plan=plan, diet=diet, coach_message=message)

    async def fetch_coach_message(
        self, profile: UserProfile, plan: WeeklyPlan, diet: DietPlan
    ) -> str:
        try:
            return await asyncio.wait_for(
                self.coach.get_motivation(profile, plan, diet), timeout=SETTINGS.COACH_TIMEOUT
            )
        except TimeoutError:
            logger.warning("Coach message timed out after %ss", SETTINGS.COACH_TIMEOUT)
        except Exception as e:
            logger.exception("Coach message failed: %s", e)
        return FALLBACK_MESSAGE

    @staticmethod
    def todays_session(plan: WeeklyPlan, on: date | None = None) -> DayPlan:
        """Return the plan day matching a date's weekday (today by default)."""
        on = on or date.today()
        return plan.day(WEEKDAYS[on.weekday()])

    @staticmethod
    def render_day(day: DayPlan) -> str:
        if day.is_rest:
            return f"**{day.day_name}** — Rest"
        lines = [f"**{day.day_name}** — {day.type}"]
        lines += [f"• {e.name}: {e.sets}x{e.reps}" for e in day.exercises]
        return "\n".join(lines)

    def render_plan_message(self, plan: WeeklyPlan) -> str:
        """Render a weekly plan as a formatted message."""
        return "\n\n".join(self.render_day(d) for d in plan.days)

    @staticmethod
    def render_diet_message(diet: DietPlan) -> str:
        """Render a diet plan as a formatted message."""
        lines = [
            f"Daily target: {diet.calories} kcal",
            f"Protein {diet.protein} g • Carbs {diet.carbs} g • Fat {diet.fat} g",
            "",
            "Meals:",
        ]
        lines += [f"• {meal}" for meal in diet.meals]
        return "\n".join(lines)
