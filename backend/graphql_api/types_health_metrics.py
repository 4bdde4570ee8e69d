"""GraphQL types for health metrics domain.

These types expose BMI classification, energy needs, the calorie-adjusted
diet plan and condition-specific advisories.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

import strawberry


__all__ = [
    # Enums
    "BMICategoryEnum",
    "HeightUnitEnum",
    "WeightUnitEnum",
    # Output types
    "BMICategoryType",
    "ActivityLevelType",
    "HealthMetricsType",
    "MacroSplitType",
    "MealPlanType",
    "DietRecommendationType",
    "HealthAssessmentType",
    # Input types
    "HealthFormInput",
]


# ============================================
# ENUMS
# ============================================


@strawberry.enum
class BMICategoryEnum(str, Enum):
    """WHO BMI category."""

    UNDERWEIGHT = "Underweight"  # [0, 18.5)
    NORMAL = "Normal"  # [18.5, 25)
    OVERWEIGHT = "Overweight"  # [25, 30)
    OBESE = "Obese"  # [30, inf)


@strawberry.enum
class HeightUnitEnum(str, Enum):
    """Unit of the submitted height."""

    CM = "cm"
    FT = "ft"  # heightFeet + heightInches


@strawberry.enum
class WeightUnitEnum(str, Enum):
    """Unit of the submitted weight."""

    KG = "kg"
    LB = "lb"


# ============================================
# OUTPUT TYPES
# ============================================


@strawberry.type
class BMICategoryType:
    """BMI category definition with generic recommendations."""

    category: BMICategoryEnum
    min_bmi: float  # inclusive
    max_bmi: Optional[float]  # exclusive, null when unbounded
    color: str
    description: str
    recommendations: List[str]


@strawberry.type
class ActivityLevelType:
    """Activity level option with its TDEE multiplier."""

    token: str
    multiplier: float
    description: str


@strawberry.type
class HealthMetricsType:
    """BMI, BMR and TDEE for one set of biometrics."""

    bmi: float
    category: BMICategoryEnum
    bmr: int  # kcal/day
    daily_calories: int  # TDEE, kcal/day
    ideal_weight_range: List[int]  # [min, max] kg
    color: str


@strawberry.type
class MacroSplitType:
    """Macronutrient distribution (protein, carbs, fat) in grams."""

    protein_g: int
    carbs_g: int
    fat_g: int
    protein_percentage: float  # share of macro kcal, 0-100
    carbs_percentage: float
    fat_percentage: float


@strawberry.type
class MealPlanType:
    """One meal of the daily plan."""

    name: str
    calories: int
    foods: List[str]
    timing: str


@strawberry.type
class DietRecommendationType:
    """Calorie-adjusted daily plan."""

    daily_calories: int  # adjusted target, not raw TDEE
    macros: MacroSplitType
    meals: List[MealPlanType]
    foods: List[str]
    restrictions: List[str]


@strawberry.type
class HealthAssessmentType:
    """Metrics with category guidance, diet plan and medical advisories."""

    metrics: HealthMetricsType
    description: str
    recommendations: List[str]
    diet: Optional[DietRecommendationType]
    medical_advisories: List[str]


# ============================================
# INPUT TYPES
# ============================================


@strawberry.input
class HealthFormInput:
    """Health form submitted by the client.

    Height is read from ``height`` (cm) or from ``heightFeet`` +
    ``heightInches`` when ``heightUnit`` is FT. Weight is in kg or lb
    depending on ``weightUnit``.
    """

    weight: float
    age: int
    gender: str  # male | female
    activity_level: str  # sedentary | light | moderate | active | very_active
    height: Optional[float] = None
    height_unit: HeightUnitEnum = HeightUnitEnum.CM
    weight_unit: WeightUnitEnum = WeightUnitEnum.KG
    height_feet: Optional[float] = None
    height_inches: Optional[float] = None
    medical_conditions: Optional[List[str]] = None
    dietary_restrictions: Optional[List[str]] = None
    goals: Optional[List[str]] = None  # accepted, not used by the engine
