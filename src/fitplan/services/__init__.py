"""
Services layer for FitPlan host features.
"""

from .coach_service import CoachService
from .plan_service import PlanBundle, PlanService

__all__ = ["CoachService", "PlanBundle", "PlanService"]
