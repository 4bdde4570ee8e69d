"""Query resolvers for health metrics domain.

These resolvers run the health metrics engine:
- bmiCategories: Static BMI category table
- activityLevels: Activity level options with TDEE multipliers
- healthMetrics: BMI/BMR/TDEE only (real-time calculator)
- healthAssessment: Metrics + diet plan + medical advisories
"""

from typing import List, TYPE_CHECKING

import strawberry

from application.health_metrics.queries import (
    CalculateHealthMetricsQuery,
    CalculateHealthMetricsQueryHandler,
    GenerateDietPlanQuery,
    GenerateDietPlanQueryHandler,
)
from application.health_metrics.validation import HealthFormData
from domain.health_metrics.core.value_objects import ActivityLevel, HeightUnit, WeightUnit
from graphql_api.types_health_metrics import (
    ActivityLevelType,
    BMICategoryEnum,
    BMICategoryType,
    DietRecommendationType,
    HealthAssessmentType,
    HealthFormInput,
    HealthMetricsType,
    MacroSplitType,
    MealPlanType,
)

if TYPE_CHECKING:
    from application.health_metrics.orchestrators.health_orchestrator import (
        HealthOrchestrator,
    )
    from domain.health_metrics.core.value_objects import (
        BMICategoryDefinition,
        DietRecommendation,
        HealthAssessment,
        HealthMetrics,
    )


# ============================================
# HELPER FUNCTIONS
# ============================================


def map_input_to_form(data: HealthFormInput) -> HealthFormData:
    """Map GraphQL HealthFormInput to application HealthFormData."""
    return HealthFormData(
        age=data.age,
        gender=data.gender,
        activity_level=data.activity_level,
        height=data.height,
        weight=data.weight,
        height_unit=HeightUnit(data.height_unit.value),
        weight_unit=WeightUnit(data.weight_unit.value),
        height_feet=data.height_feet,
        height_inches=data.height_inches,
    )


def map_category_to_graphql(definition: "BMICategoryDefinition") -> BMICategoryType:
    """Map domain BMICategoryDefinition to GraphQL BMICategoryType."""
    return BMICategoryType(
        category=BMICategoryEnum(definition.category.value),
        min_bmi=definition.low,
        max_bmi=None if definition.is_unbounded else definition.high,
        color=definition.color,
        description=definition.description,
        recommendations=list(definition.recommendations),
    )


def map_metrics_to_graphql(metrics: "HealthMetrics") -> HealthMetricsType:
    """Map domain HealthMetrics to GraphQL HealthMetricsType."""
    return HealthMetricsType(
        bmi=metrics.bmi,
        category=BMICategoryEnum(metrics.category.value),
        bmr=metrics.bmr,
        daily_calories=metrics.daily_calories,
        ideal_weight_range=list(metrics.ideal_weight_range),
        color=metrics.color,
    )


def map_diet_to_graphql(diet: "DietRecommendation") -> DietRecommendationType:
    """Map domain DietRecommendation to GraphQL DietRecommendationType."""
    return DietRecommendationType(
        daily_calories=diet.daily_calories,
        macros=MacroSplitType(
            protein_g=diet.protein_g,
            carbs_g=diet.carbs_g,
            fat_g=diet.fats_g,
            protein_percentage=diet.macros.protein_percentage(),
            carbs_percentage=diet.macros.carbs_percentage(),
            fat_percentage=diet.macros.fat_percentage(),
        ),
        meals=[
            MealPlanType(
                name=meal.name,
                calories=meal.calories,
                foods=list(meal.foods),
                timing=meal.timing,
            )
            for meal in diet.meals
        ],
        foods=list(diet.foods),
        restrictions=list(diet.restrictions),
    )


def map_assessment_to_graphql(assessment: "HealthAssessment") -> HealthAssessmentType:
    """Map domain HealthAssessment to GraphQL HealthAssessmentType."""
    return HealthAssessmentType(
        metrics=map_metrics_to_graphql(assessment.metrics),
        description=assessment.category_definition.description,
        recommendations=list(assessment.recommendations),
        diet=map_diet_to_graphql(assessment.diet) if assessment.diet else None,
        medical_advisories=list(assessment.medical_advisories),
    )


def _get_orchestrator(info: strawberry.types.Info) -> "HealthOrchestrator":
    orchestrator = info.context.get("health_orchestrator")
    if not orchestrator:
        raise Exception("Missing health_orchestrator in GraphQL context")
    return orchestrator


# ============================================
# QUERY RESOLVERS
# ============================================


@strawberry.type
class HealthMetricsQueries:
    """GraphQL queries for health metrics domain."""

    @strawberry.field
    async def bmi_categories(self, info: strawberry.types.Info) -> List[BMICategoryType]:
        """Get the BMI category table.

        Example:
            query {
              healthMetrics {
                bmiCategories { category minBmi maxBmi description }
              }
            }
        """
        orchestrator = _get_orchestrator(info)
        return [map_category_to_graphql(d) for d in orchestrator.category_definitions()]

    @strawberry.field
    async def activity_levels(self) -> List[ActivityLevelType]:
        """Get the activity level options for the health form.

        Example:
            query {
              healthMetrics {
                activityLevels { token multiplier description }
              }
            }
        """
        return [
            ActivityLevelType(
                token=level.value,
                multiplier=level.pal_multiplier(),
                description=level.description(),
            )
            for level in ActivityLevel
        ]

    @strawberry.field
    async def health_metrics(
        self,
        info: strawberry.types.Info,
        input: HealthFormInput,
    ) -> HealthAssessmentType:
        """Calculate BMI, BMR and TDEE without a diet plan.

        Args:
            info: Strawberry field info (injected)
            input: Health form

        Returns:
            HealthAssessmentType with diet set to null

        Raises:
            InvalidBiometricInputError: If the form fails validation

        Example:
            query {
              healthMetrics {
                healthMetrics(input: {
                  height: 170, weight: 70, age: 25,
                  gender: "male", activityLevel: "moderate"
                }) {
                  metrics { bmi category bmr dailyCalories idealWeightRange }
                }
              }
            }
        """
        handler = CalculateHealthMetricsQueryHandler(_get_orchestrator(info))
        assessment = handler.handle(
            CalculateHealthMetricsQuery(form=map_input_to_form(input))
        )
        return map_assessment_to_graphql(assessment)

    @strawberry.field
    async def health_assessment(
        self,
        info: strawberry.types.Info,
        input: HealthFormInput,
    ) -> HealthAssessmentType:
        """Calculate metrics, diet plan and medical advisories.

        Args:
            info: Strawberry field info (injected)
            input: Health form with optional conditions and restrictions

        Returns:
            HealthAssessmentType with diet plan

        Raises:
            InvalidBiometricInputError: If the form fails validation

        Example:
            query {
              healthMetrics {
                healthAssessment(input: {
                  height: 170, weight: 70, age: 25,
                  gender: "male", activityLevel: "moderate",
                  medicalConditions: ["Type 2 diabetes"]
                }) {
                  diet { dailyCalories macros { proteinG carbsG fatG } }
                  medicalAdvisories
                }
              }
            }
        """
        handler = GenerateDietPlanQueryHandler(_get_orchestrator(info))
        assessment = handler.handle(
            GenerateDietPlanQuery(
                form=map_input_to_form(input),
                medical_conditions=input.medical_conditions,
                dietary_restrictions=input.dietary_restrictions,
            )
        )
        return map_assessment_to_graphql(assessment)
