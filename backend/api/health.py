"""REST API endpoints for the health metrics engine.

Provides the calculator endpoints used by the web health form:
- POST /api/bmi/calculate: BMI, BMR and TDEE (real-time calculator)
- GET /api/bmi/categories: BMI category table
- POST /api/diet/generate: Metrics, diet plan and medical advisories
"""

import logging
from typing import Any, List, Optional, Union

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from application.health_metrics.orchestrators.health_orchestrator import (
    HealthOrchestrator,
)
from application.health_metrics.queries import (
    CalculateHealthMetricsQuery,
    CalculateHealthMetricsQueryHandler,
    GenerateDietPlanQuery,
    GenerateDietPlanQueryHandler,
)
from application.health_metrics.validation import HealthFormData
from domain.health_metrics.core.exceptions import InvalidBiometricInputError
from domain.health_metrics.core.value_objects import (
    BMICategoryDefinition,
    DietRecommendation,
    HealthMetrics,
    HeightUnit,
    WeightUnit,
)
from infrastructure.health_metrics.engine_factory import get_health_orchestrator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["health"])


class CamelModel(BaseModel):
    """Base model exposing camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthFormRequest(CamelModel):
    """Request body of the health form."""

    weight: Any = None
    height: Any = None
    age: Any = None
    gender: Any = None
    activity_level: Any = None
    height_unit: HeightUnit = HeightUnit.CM
    weight_unit: WeightUnit = WeightUnit.KG
    height_feet: Any = None
    height_inches: Any = None
    medical_conditions: Union[str, List[str], None] = None
    dietary_restrictions: Union[str, List[str], None] = None
    goals: Union[str, List[str], None] = None

    def to_form(self) -> HealthFormData:
        return HealthFormData(
            age=self.age,
            gender=self.gender,
            activity_level=self.activity_level,
            height=self.height,
            weight=self.weight,
            height_unit=self.height_unit,
            weight_unit=self.weight_unit,
            height_feet=self.height_feet,
            height_inches=self.height_inches,
        )


class HealthMetricsResponse(CamelModel):
    """Rounded body metrics."""

    bmi: float
    category: str
    bmr: int
    daily_calories: int
    ideal_weight_range: List[int]
    color: str

    @classmethod
    def from_domain(cls, metrics: HealthMetrics) -> "HealthMetricsResponse":
        return cls(
            bmi=metrics.bmi,
            category=metrics.category.value,
            bmr=metrics.bmr,
            daily_calories=metrics.daily_calories,
            ideal_weight_range=list(metrics.ideal_weight_range),
            color=metrics.color,
        )


class BMICategoryResponse(CamelModel):
    """One row of the BMI category table."""

    category: str
    min_bmi: float
    max_bmi: Optional[float] = None
    color: str
    description: str
    recommendations: List[str]

    @classmethod
    def from_domain(cls, definition: BMICategoryDefinition) -> "BMICategoryResponse":
        return cls(
            category=definition.category.value,
            min_bmi=definition.low,
            max_bmi=None if definition.is_unbounded else definition.high,
            color=definition.color,
            description=definition.description,
            recommendations=list(definition.recommendations),
        )


class MealResponse(CamelModel):
    name: str
    calories: int
    foods: List[str]
    timing: str


class DietResponse(CamelModel):
    """Daily diet plan."""

    daily_calories: int
    protein: int
    carbs: int
    fats: int
    meals: List[MealResponse]
    foods: List[str]
    restrictions: List[str]

    @classmethod
    def from_domain(cls, diet: DietRecommendation) -> "DietResponse":
        return cls(
            daily_calories=diet.daily_calories,
            protein=diet.protein_g,
            carbs=diet.carbs_g,
            fats=diet.fats_g,
            meals=[
                MealResponse(
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


class DietPlanResponse(CamelModel):
    """Full assessment: metrics, category guidance, diet and advisories."""

    metrics: HealthMetricsResponse
    description: str
    recommendations: List[str]
    diet: DietResponse
    medical_advisories: List[str]


def _validation_failed(error: InvalidBiometricInputError) -> HTTPException:
    logger.info("Health form rejected", extra={"errors": error.errors})
    return HTTPException(
        status_code=400,
        detail={"message": "Validation failed", "errors": list(error.errors)},
    )


def _orchestrator() -> HealthOrchestrator:
    return get_health_orchestrator()


@router.post("/bmi/calculate", response_model=HealthMetricsResponse, response_model_by_alias=True)
async def calculate_bmi(body: HealthFormRequest) -> HealthMetricsResponse:
    """Calculate BMI, BMR and TDEE for the real-time calculator.

    Args:
        body: Health form

    Returns:
        HealthMetricsResponse with rounded metrics

    Raises:
        HTTPException: 400 if the form fails validation
    """
    handler = CalculateHealthMetricsQueryHandler(_orchestrator())
    try:
        assessment = handler.handle(CalculateHealthMetricsQuery(form=body.to_form()))
    except InvalidBiometricInputError as e:
        raise _validation_failed(e)

    return HealthMetricsResponse.from_domain(assessment.metrics)


@router.get("/bmi/categories", response_model=List[BMICategoryResponse], response_model_by_alias=True)
async def bmi_categories() -> List[BMICategoryResponse]:
    """Return the BMI category table in classification order."""
    return [
        BMICategoryResponse.from_domain(definition)
        for definition in _orchestrator().category_definitions()
    ]


@router.post("/diet/generate", response_model=DietPlanResponse, response_model_by_alias=True)
async def generate_diet(body: HealthFormRequest) -> DietPlanResponse:
    """Generate metrics, a diet plan and medical advisories.

    `goals` is accepted for client compatibility and not used.

    Args:
        body: Health form with optional conditions and restrictions

    Returns:
        DietPlanResponse

    Raises:
        HTTPException: 400 if the form fails validation
    """
    handler = GenerateDietPlanQueryHandler(_orchestrator())
    try:
        assessment = handler.handle(
            GenerateDietPlanQuery(
                form=body.to_form(),
                medical_conditions=body.medical_conditions,
                dietary_restrictions=body.dietary_restrictions,
            )
        )
    except InvalidBiometricInputError as e:
        raise _validation_failed(e)

    return DietPlanResponse(
        metrics=HealthMetricsResponse.from_domain(assessment.metrics),
        description=assessment.category_definition.description,
        recommendations=list(assessment.recommendations),
        diet=DietResponse.from_domain(assessment.diet),
        medical_advisories=list(assessment.medical_advisories),
    )
