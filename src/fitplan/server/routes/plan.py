"""
Plan and diet API routes for FitPlan.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ...errors import ValidationError
from ...models import (
    MAX_AGE,
    MAX_HEIGHT_CM,
    MAX_WEIGHT_KG,
    MIN_AGE,
    Experience,
    Goal,
    Location,
    UserProfile,
)
from ...services import PlanService

router = APIRouter()

logger = logging.getLogger(__name__)


class ProfileRequest(BaseModel):
    """Onboarding profile as submitted by a client."""

    age: int = Field(..., ge=MIN_AGE, le=MAX_AGE, description="Age in years")
    height_cm: float = Field(..., gt=0, le=MAX_HEIGHT_CM, description="Height in centimetres")
    weight_kg: float = Field(..., gt=0, le=MAX_WEIGHT_KG, description="Weight in kilograms")
    goal: Goal
    location: Location
    experience: Experience
    onboarded: bool = True

    def to_profile(self) -> UserProfile:
        return UserProfile.from_dict(self.model_dump())


class TodayRequest(ProfileRequest):
    date: dt.date | None = Field(None, description="Day to look up, defaults to today")


class PlanResponse(BaseModel):
    success: bool
    plan: dict[str, Any] | None = None
    diet: dict[str, Any] | None = None
    coach_message: str | None = None
    error: str | None = None


class TodayResponse(BaseModel):
    success: bool
    day: dict[str, Any] | None = None
    message: str | None = None
    error: str | None = None


class DietResponse(BaseModel):
    success: bool
    diet: dict[str, Any] | None = None
    error: str | None = None


def _invalid(model: type[BaseModel], exc: ValidationError) -> JSONResponse:
    logger.info("Rejected profile: %s", exc)
    return JSONResponse(
        model(success=False, error=str(exc)).model_dump(), status_code=422
    )


@router.post("/plan", response_model=PlanResponse)
async def create_plan(req: ProfileRequest, coach: bool = True):
    """Generate the weekly plan, diet and coaching message for a profile."""
    try:
        bundle = await PlanService().build(req.to_profile(), with_coach=coach)
    except ValidationError as e:
        return _invalid(PlanResponse, e)
    return PlanResponse(
        success=True,
        plan=bundle.plan.to_dict(),
        diet=bundle.diet.to_dict(),
        coach_message=bundle.coach_message,
    )


@router.post("/plan/today", response_model=TodayResponse)
async def todays_session(req: TodayRequest):
    """Return the session scheduled for a given day (today by default)."""
    service = PlanService()
    try:
        plan, _ = service.compute(req.to_profile())
    except ValidationError as e:
        return _invalid(TodayResponse, e)
    day = service.todays_session(plan, req.date)
    return TodayResponse(success=True, day=day.to_dict(), message=service.render_day(day))


@router.post("/diet", response_model=DietResponse)
async def create_diet(req: ProfileRequest):
    """Calculate daily nutrition targets for a profile."""
    try:
        _, diet = PlanService().compute(req.to_profile())
    except ValidationError as e:
        return _invalid(DietResponse, e)
    return DietResponse(success=True, diet=diet.to_dict())
