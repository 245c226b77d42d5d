"""
Service for AI coaching messages.
"""

import logging

import httpx

from ..config import SETTINGS
from ..models import DietPlan, UserProfile, WeeklyPlan

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = (
    "Show up for every session on your plan, hit your protein target and sleep well. "
    "Consistency beats intensity."
)
MAX_MESSAGE_LENGTH = 500

GOAL_PHRASES = {
    "stay_healthy": "stay healthy",
    "muscle_gain": "build muscle",
    "fat_loss": "lose fat",
}


class CoachService:
    """Service for fetching a short motivational message from OpenAI."""

    def __init__(self):
        self.api_key = SETTINGS.OPENAI_API_KEY
        self.base_url = SETTINGS.OPENAI_BASE_URL.rstrip("/")
        self.default_model = SETTINGS.COACH_MODEL
        self.default_timeout = SETTINGS.COACH_TIMEOUT
        self.max_tokens = SETTINGS.COACH_MAX_TOKENS

    async def get_completion(self, prompt: str, model: str | None = None) -> str | None:
        """
        Get a completion from OpenAI API.

        Args:
            prompt: Prompt text
            model: OpenAI model to use (defaults to COACH_MODEL)

        Returns:
            AI-generated response or None if failed
        """
        if not self.api_key:
            logger.info("OpenAI API key not configured")
            return None

        if not prompt.strip():
            logger.warning("Empty prompt provided to coach service")
            return None

        model = model or self.default_model

        try:
            async with httpx.AsyncClient(timeout=self.default_timeout) as client:
                response = await client.post(
                    f"{self.base_url}/chat/completions",
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    json={
                        "model": model,
                        "messages": [
                            {
                                "role": "system",
                                "content": "You are an upbeat personal fitness coach. "
                                "Reply with two or three encouraging sentences.",
                            },
                            {"role": "user", "content": prompt},
                        ],
                        "max_tokens": self.max_tokens,
                    },
                )
                response.raise_for_status()

                result = response.json()
                if "choices" in result and len(result["choices"]) > 0:
                    content = (result["choices"][0]["message"]["content"] or "").strip()
                    logger.info("Coach response received: %s characters", len(content))
                    return content or None
                else:
                    logger.warning("Unexpected OpenAI response format")
                    return None

        except httpx.HTTPError as e:
            logger.warning("OpenAI HTTP request failed: %s", e)
            return None
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Malformed OpenAI response: %s", e)
            return None

    def build_prompt(self, profile: UserProfile, plan: WeeklyPlan, diet: DietPlan) -> str:
        sessions = ", ".join(f"{d.day_name} {d.type}" for d in plan.active_days)
        return (
            f"My goal is to {GOAL_PHRASES.get(profile.goal.value, profile.goal.value)}. "
            f"I am {profile.age} years old and a {profile.experience.value} training at "
            f"{profile.location.value}. This week I train {len(plan.active_days)} days: "
            f"{sessions}. My daily targets are {diet.calories} kcal and {diet.protein} g "
            "protein. Motivate me for the week."
        )

    async def get_motivation(
        self, profile: UserProfile, plan: WeeklyPlan, diet: DietPlan
    ) -> str:
        """
        Get a motivational message for a generated plan.

        Returns:
            AI-generated message or a fixed fallback
        """
        ai_response = await self.get_completion(self.build_prompt(profile, plan, diet))

        if ai_response:
            # Truncate if too long
            if len(ai_response) > MAX_MESSAGE_LENGTH:
                ai_response = ai_response[:MAX_MESSAGE_LENGTH] + "..."
            return ai_response

        return FALLBACK_MESSAGE

    def is_available(self) -> bool:
        """Check if the coach service is available."""
        return bool(self.api_key)
