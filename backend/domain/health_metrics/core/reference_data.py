"""Static reference tables for the health metrics engine.

All tables are immutable and built once; services receive them through a
``ReferenceData`` instance instead of reading module globals, so tests can
inject alternative tables.
"""

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

from .value_objects.activity_level import ActivityLevel
from .value_objects.bmi_category import BMICategory, BMICategoryDefinition


@dataclass(frozen=True)
class MacroRatios:
    """Share of daily calories per macronutrient (must sum to 1.0)."""

    protein: float = 0.25
    carbs: float = 0.45
    fat: float = 0.30

    def __post_init__(self) -> None:
        total = self.protein + self.carbs + self.fat
        if not math.isclose(total, 1.0):
            raise ValueError(f"Macro ratios must sum to 1.0, got {total}")


@dataclass(frozen=True)
class MealSlot:
    """A daily meal slot: calorie share, clock time and default foods."""

    name: str
    share: float
    timing: str
    foods: Tuple[str, ...]


@dataclass(frozen=True)
class FoodItem:
    """Catalog food with per-100g nutrients and diet tags."""

    name: str
    calories: float
    protein: float
    carbs: float
    fats: float
    category: str
    tags: FrozenSet[str] = frozenset()

    def is_suitable_for(self, restrictions: Tuple[str, ...]) -> bool:
        """True when any requested restriction is among the food tags.

        An empty restriction list keeps every food. Every catalog food
        carries the "all" tag.
        """
        if not restrictions:
            return True
        return any(restriction.lower() in self.tags for restriction in restrictions)


@dataclass(frozen=True)
class AdvisoryGroup:
    """Keywords of a medical condition and the dietary advice it triggers."""

    name: str
    keywords: Tuple[str, ...]
    advisories: Tuple[str, ...]

    def matches(self, condition: str) -> bool:
        """Case-insensitive substring match against any keyword."""
        text = condition.lower()
        return any(keyword in text for keyword in self.keywords)


BMI_CATEGORIES: Tuple[BMICategoryDefinition, ...] = (
    BMICategoryDefinition(
        category=BMICategory.UNDERWEIGHT,
        low=0.0,
        high=18.5,
        color="text-blue-600",
        description="Below normal weight",
        recommendations=(
            "Increase calorie intake with healthy fats and proteins",
            "Eat frequent, nutrient-dense meals",
            "Include strength training exercises",
            "Consult a nutritionist for weight gain plan",
        ),
    ),
    BMICategoryDefinition(
        category=BMICategory.NORMAL,
        low=18.5,
        high=25.0,
        color="text-green-600",
        description="Normal weight",
        recommendations=(
            "Maintain current weight with balanced diet",
            "Continue regular physical activity",
            "Focus on nutrient-dense whole foods",
            "Regular health checkups",
        ),
    ),
    BMICategoryDefinition(
        category=BMICategory.OVERWEIGHT,
        low=25.0,
        high=30.0,
        color="text-yellow-600",
        description="Above normal weight",
        recommendations=(
            "Create moderate calorie deficit",
            "Increase physical activity",
            "Focus on portion control",
            "Emphasize fruits, vegetables, and lean proteins",
        ),
    ),
    BMICategoryDefinition(
        category=BMICategory.OBESE,
        low=30.0,
        high=math.inf,
        color="text-red-600",
        description="Significantly above normal weight",
        recommendations=(
            "Consult healthcare provider before starting diet",
            "Create structured calorie deficit plan",
            "Combine diet with regular exercise",
            "Consider professional nutrition counseling",
        ),
    ),
)

ACTIVITY_MULTIPLIERS: Mapping[str, float] = MappingProxyType(
    {level.value: level.pal_multiplier() for level in ActivityLevel}
)

MEAL_SLOTS: Tuple[MealSlot, ...] = (
    MealSlot(
        name="Breakfast",
        share=0.25,
        timing="7:00 AM",
        foods=("Greek Yogurt with Berries", "Almonds", "Oatmeal"),
    ),
    MealSlot(
        name="Lunch",
        share=0.35,
        timing="12:30 PM",
        foods=("Grilled Chicken", "Brown Rice", "Steamed Broccoli", "Avocado"),
    ),
    MealSlot(
        name="Dinner",
        share=0.30,
        timing="7:00 PM",
        foods=("Baked Salmon", "Sweet Potato", "Spinach Salad"),
    ),
    MealSlot(
        name="Snack",
        share=0.10,
        timing="3:30 PM",
        foods=("Mixed Nuts", "Fruit"),
    ),
)

_PLANT = frozenset(
    {"all", "vegetarian", "vegan", "pescatarian", "gluten_free", "dairy_free", "nut_free"}
)

FOOD_CATALOG: Tuple[FoodItem, ...] = (
    FoodItem(
        "Chicken Breast", 165, 31, 0, 3.6, "Protein",
        frozenset({"all", "gluten_free", "dairy_free", "nut_free"}),
    ),
    FoodItem("Brown Rice", 111, 2.6, 23, 0.9, "Carbohydrate", _PLANT),
    FoodItem("Broccoli", 34, 2.8, 7, 0.4, "Vegetable", _PLANT),
    FoodItem("Avocado", 160, 2, 8.5, 14.7, "Healthy Fat", _PLANT),
    FoodItem(
        "Salmon", 208, 20, 0, 13, "Protein",
        frozenset({"all", "pescatarian", "gluten_free", "dairy_free", "nut_free"}),
    ),
    FoodItem("Quinoa", 120, 4.4, 22, 1.9, "Carbohydrate", _PLANT),
    FoodItem("Sweet Potato", 86, 1.6, 20, 0.1, "Carbohydrate", _PLANT),
    FoodItem(
        "Greek Yogurt", 59, 10, 3.6, 0.4, "Protein",
        frozenset({"all", "vegetarian", "pescatarian", "gluten_free", "nut_free"}),
    ),
    FoodItem("Spinach", 23, 2.9, 3.6, 0.4, "Vegetable", _PLANT),
    FoodItem(
        "Almonds", 164, 6, 6, 14, "Healthy Fat",
        frozenset(
            {"all", "vegetarian", "vegan", "pescatarian", "gluten_free", "dairy_free"}
        ),
    ),
)

ADVISORY_GROUPS: Tuple[AdvisoryGroup, ...] = (
    AdvisoryGroup(
        name="diabetes",
        keywords=("diabetes",),
        advisories=(
            "Focus on low glycemic index foods",
            "Monitor carbohydrate intake",
            "Eat frequent, smaller meals",
        ),
    ),
    AdvisoryGroup(
        name="hypertension",
        keywords=("hypertension", "high blood pressure"),
        advisories=(
            "Reduce sodium intake",
            "Increase potassium-rich foods",
            "Follow DASH diet principles",
        ),
    ),
    AdvisoryGroup(
        name="cholesterol",
        keywords=("cholesterol",),
        advisories=(
            "Increase fiber intake",
            "Choose lean proteins",
            "Include omega-3 rich foods",
        ),
    ),
)


@dataclass(frozen=True)
class ReferenceData:
    """Bundle of every static table the engine reads.

    Attributes:
        bmi_categories: Ordered, non-overlapping category definitions
        activity_multipliers: PAL multiplier per activity token
        fallback_activity: Token used when an activity level is unknown
        meal_slots: Daily meal slots (shares sum to 1.0)
        food_catalog: Foods offered by the diet generator
        advisory_groups: Medical keyword groups, in match priority order
        macro_ratios: Calorie share per macronutrient
    """

    bmi_categories: Tuple[BMICategoryDefinition, ...] = BMI_CATEGORIES
    activity_multipliers: Mapping[str, float] = field(
        default_factory=lambda: ACTIVITY_MULTIPLIERS
    )
    fallback_activity: str = ActivityLevel.SEDENTARY.value
    meal_slots: Tuple[MealSlot, ...] = MEAL_SLOTS
    food_catalog: Tuple[FoodItem, ...] = FOOD_CATALOG
    advisory_groups: Tuple[AdvisoryGroup, ...] = ADVISORY_GROUPS
    macro_ratios: MacroRatios = field(default_factory=MacroRatios)

    def __post_init__(self) -> None:
        if self.fallback_activity not in self.activity_multipliers:
            raise ValueError(
                f"Fallback activity '{self.fallback_activity}' has no multiplier"
            )
        shares = sum(slot.share for slot in self.meal_slots)
        if not math.isclose(shares, 1.0):
            raise ValueError(f"Meal shares must sum to 1.0, got {shares}")

    def category_definition(self, category: BMICategory) -> BMICategoryDefinition:
        """Look up the definition of a category."""
        for definition in self.bmi_categories:
            if definition.category == category:
                return definition
        raise KeyError(category)
