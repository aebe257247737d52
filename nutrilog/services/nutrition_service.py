"""
Nutrition Service

Closed-form nutrition arithmetic: per-quantity nutrient scaling,
Mifflin-St Jeor BMR, activity-adjusted TDEE and goal-based calorie targets.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Union

from nutrilog.utils.enums import ActivityLevel, Gender, Goal

# Grams the catalog values are expressed against
REFERENCE_GRAMS = 100.0

ACTIVITY_FACTORS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
}
DEFAULT_ACTIVITY_FACTOR = ACTIVITY_FACTORS[ActivityLevel.SEDENTARY]

GOAL_ADJUSTMENTS = {
    Goal.LOSE: -500.0,
    Goal.MAINTAIN: 0.0,
    Goal.GAIN: 500.0,
}

# Values the calorie calculator starts from when the profile is incomplete
DEFAULT_PROFILE = {
    "age": 25,
    "weight": 70.0,
    "height": 170.0,
    "gender": Gender.MALE,
}


@dataclass(frozen=True)
class NutrientsPer100g:
    """Nutrient content of 100 grams of a food, as stored in the catalog."""
    calories: Optional[float] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fat: Optional[float] = None
    fiber: Optional[float] = None
    sugar: Optional[float] = None
    sodium: Optional[float] = None

    def to_dict(self) -> Dict[str, Optional[float]]:
        return asdict(self)


@dataclass(frozen=True)
class NutrientAmounts:
    """Absolute nutrient amounts for a consumed quantity."""
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0

    def __add__(self, other: "NutrientAmounts") -> "NutrientAmounts":
        if not isinstance(other, NutrientAmounts):
            return NotImplemented
        return NutrientAmounts(**{
            field: getattr(self, field) + getattr(other, field)
            for field in self.__dataclass_fields__
        })

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def scale(food: NutrientsPer100g, quantity_g: float) -> NutrientAmounts:
    """
    Scale per-100g nutrient values to a consumed quantity.

    Args:
        food: Catalog nutrient values per 100 grams
        quantity_g: Consumed quantity in grams

    Returns:
        NutrientAmounts where each field is value * quantity / 100
        (absent values scale to 0)
    """
    if not isinstance(food, NutrientsPer100g):
        raise TypeError("scale() expects per-100g nutrient values")
    factor = float(quantity_g) / REFERENCE_GRAMS
    return NutrientAmounts(**{
        field: float(value) * factor if value else 0.0
        for field, value in asdict(food).items()
    })


def bmr(weight_kg: float, height_cm: float, age_years: float, gender: Union[Gender, str]) -> float:
    """Mifflin-St Jeor basal metabolic rate in kcal/day."""
    gender = Gender(gender)
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age_years
    if gender is Gender.MALE:
        return base + 5
    return base - 161


def tdee(bmr_kcal: float, activity_level: Optional[str]) -> float:
    """Total daily energy expenditure; unknown activity levels count as sedentary."""
    try:
        factor = ACTIVITY_FACTORS[ActivityLevel(activity_level)]
    except ValueError:
        factor = DEFAULT_ACTIVITY_FACTOR
    return bmr_kcal * factor


def target_calories(tdee_kcal: float, goal: Union[Goal, str]) -> float:
    return tdee_kcal + GOAL_ADJUSTMENTS[Goal(goal)]


def calorie_goals(profile: Dict[str, Any], activity_level: Optional[str], goal: Optional[str],
                  consumed: float) -> Dict[str, Any]:
    """
    Calorie target and daily progress for a user profile.

    Missing profile fields fall back to DEFAULT_PROFILE; an unknown goal
    counts as maintain.
    """
    complete = all(profile.get(key) is not None for key in DEFAULT_PROFILE)
    values = {
        key: profile.get(key) if profile.get(key) is not None else default
        for key, default in DEFAULT_PROFILE.items()
    }
    try:
        goal_value = Goal(goal)
    except ValueError:
        goal_value = Goal.MAINTAIN

    bmr_kcal = bmr(float(values["weight"]), float(values["height"]), float(values["age"]), values["gender"])
    tdee_kcal = tdee(bmr_kcal, activity_level)
    target = target_calories(tdee_kcal, goal_value)
    progress = min(consumed / target * 100, 100.0) if target > 0 else 100.0

    return {
        "profile_complete": complete,
        "goal": goal_value.value,
        "bmr": round(bmr_kcal, 1),
        "tdee": round(tdee_kcal, 1),
        "target_calories": round(target, 1),
        "consumed": round(consumed, 1),
        "remaining": round(target - consumed, 1),
        "progress_percent": round(progress, 1),
    }
