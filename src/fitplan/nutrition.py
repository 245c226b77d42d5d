"""
Daily nutrition targets.

Calories follow Mifflin-St Jeor. Profiles carry no sex, so the sex constant is
the midpoint of the male (+5) and female (-161) values::

    BMR  = 10 * weight_kg + 6.25 * height_cm - 5 * age - 78
    TDEE = BMR * 1.55                      (moderately active, 3-5 sessions/week)
    kcal = TDEE * GOAL_CALORIE_FACTOR[goal], floored at MIN_DAILY_CALORIES

Protein is ``weight_kg * PROTEIN_PER_KG[goal]``. Fat covers 25% of calories and
carbohydrates take whatever remains.
"""

from __future__ import annotations

import logging

from .errors import ConfigurationError
from .models import DietPlan, Goal, UserProfile

logger = logging.getLogger(__name__)

SEX_NEUTRAL_CONSTANT = -78.0
ACTIVITY_MULTIPLIER = 1.55
MIN_DAILY_CALORIES = 1200

GOAL_CALORIE_FACTOR: dict[Goal, float] = {
    Goal.FAT_LOSS: 0.80,
    Goal.STAY_HEALTHY: 1.00,
    Goal.MUSCLE_GAIN: 1.10,
}

PROTEIN_PER_KG: dict[Goal, float] = {
    Goal.STAY_HEALTHY: 1.2,
    Goal.FAT_LOSS: 1.8,
    Goal.MUSCLE_GAIN: 2.0,
}

FAT_CALORIE_SHARE = 0.25
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9

# breakfast, lunch, snack, dinner
MEAL_CATALOG: dict[Goal, tuple[str, ...]] = {
    Goal.STAY_HEALTHY: (
        "Oatmeal with berries, walnuts and a glass of milk",
        "Whole-grain wrap with chicken, hummus and mixed greens",
        "Apple with a handful of almonds",
        "Baked salmon, quinoa and roasted vegetables",
    ),
    Goal.MUSCLE_GAIN: (
        "Four-egg omelette with whole-grain toast and avocado",
        "Rice bowl with lean beef, black beans and vegetables",
        "Greek yogurt with granola and a banana",
        "Chicken breast, sweet potatoes and steamed broccoli",
    ),
    Goal.FAT_LOSS: (
        "Egg-white scramble with spinach and tomatoes",
        "Grilled chicken salad with olive oil and lemon",
        "Cottage cheese with cucumber slices",
        "White fish with green beans and a small portion of brown rice",
    ),
}

MEALS_PER_DAY = 4


def check_meal_catalog(catalog: dict[Goal, tuple[str, ...]]) -> None:
    """Raise ConfigurationError unless every goal has exactly MEALS_PER_DAY meals."""
    for goal in Goal:
        meals = catalog.get(goal)
        if meals is None or len(meals) != MEALS_PER_DAY:
            raise ConfigurationError(
                f"meal catalog for {goal.value} must list {MEALS_PER_DAY} meals (got {meals!r})"
            )


check_meal_catalog(MEAL_CATALOG)


def basal_metabolic_rate(profile: UserProfile) -> float:
    return (
        10 * profile.weight_kg
        + 6.25 * profile.height_cm
        - 5 * profile.age
        + SEX_NEUTRAL_CONSTANT
    )


def calculate(profile: UserProfile) -> DietPlan:
    """
    Compute the daily calorie, macro and meal targets for a profile.

    Raises:
        ValidationError: a profile value is outside its domain.
    """
    profile.validate()

    bmr = max(basal_metabolic_rate(profile), 0.0)
    tdee = bmr * ACTIVITY_MULTIPLIER
    calories = max(round(tdee * GOAL_CALORIE_FACTOR[profile.goal]), MIN_DAILY_CALORIES)
    protein = max(round(profile.weight_kg * PROTEIN_PER_KG[profile.goal]), 1)
    fat = round(calories * FAT_CALORIE_SHARE / KCAL_PER_G_FAT)
    remaining = calories - protein * KCAL_PER_G_PROTEIN - fat * KCAL_PER_G_FAT
    carbs = max(round(remaining / KCAL_PER_G_CARBS), 0)

    diet = DietPlan(
        calories=calories,
        protein=protein,
        meals=MEAL_CATALOG[profile.goal],
        bmr=round(bmr),
        tdee=round(tdee),
        fat=fat,
        carbs=carbs,
    )
    logger.debug(
        "Calculated diet: goal=%s bmr=%s tdee=%s calories=%s protein=%s",
        profile.goal.value,
        diet.bmr,
        diet.tdee,
        diet.calories,
        diet.protein,
    )
    return diet
