"""Health form validation - raw form data to BiometricInput.

Range checks happen here, before the engine is called: the calculation
services assume validated input.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple, Union

from domain.health_metrics.calculation.unit_converter import (
    height_to_cm,
    weight_to_kg,
)
from domain.health_metrics.core.exceptions.domain_errors import (
    InvalidBiometricInputError,
)
from domain.health_metrics.core.value_objects import (
    ActivityLevel,
    BiometricInput,
    HeightUnit,
    Sex,
    WeightUnit,
)

WEIGHT_RANGE_KG = (20.0, 500.0)
HEIGHT_RANGE_CM = (100.0, 250.0)
AGE_RANGE_YEARS = (13, 120)


@dataclass(frozen=True)
class HealthFormData:
    """Health form as submitted by a client, before validation.

    Attributes:
        age: Age in years
        gender: "male" or "female"
        activity_level: Activity token (canonical or client alias)
        height: Height in cm (when height_unit is cm)
        weight: Weight in kg or lb, depending on weight_unit
        height_unit: Unit of the height fields
        weight_unit: Unit of the weight field
        height_feet: Feet part of the height (when height_unit is ft)
        height_inches: Inches part of the height (when height_unit is ft)
    """

    age: Any
    gender: Any
    activity_level: Any
    height: Any = None
    weight: Any = None
    height_unit: HeightUnit = HeightUnit.CM
    weight_unit: WeightUnit = WeightUnit.KG
    height_feet: Any = None
    height_inches: Any = None


def _to_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool) or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _height_cm(form: HealthFormData) -> Optional[float]:
    if form.height_unit == HeightUnit.FT:
        feet = _to_float(form.height_feet)
        if feet is None:
            return None
        if form.height_inches is None or form.height_inches == "":
            return height_to_cm(feet, 0.0)
        inches = _to_float(form.height_inches)
        if inches is None:
            return None
        return height_to_cm(feet, inches)
    return _to_float(form.height)


def _weight_kg(form: HealthFormData) -> Optional[float]:
    weight = _to_float(form.weight)
    if weight is None:
        return None
    if form.weight_unit == WeightUnit.LB:
        return weight_to_kg(weight)
    return weight


def validate_health_form(form: HealthFormData) -> BiometricInput:
    """Validate a health form and normalize it to metric biometrics.

    All problems are collected before raising, so clients can show every
    message at once.

    Args:
        form: Raw health form

    Returns:
        BiometricInput: Validated biometrics in cm/kg

    Raises:
        InvalidBiometricInputError: If any field is missing or out of range
    """
    errors: List[str] = []

    weight = _weight_kg(form)
    if weight is None:
        errors.append("Valid weight is required")
    elif not (WEIGHT_RANGE_KG[0] <= weight <= WEIGHT_RANGE_KG[1]):
        errors.append("Weight must be between 20 and 500 kg")

    height = _height_cm(form)
    if height is None:
        errors.append("Valid height is required")
    elif not (HEIGHT_RANGE_CM[0] <= height <= HEIGHT_RANGE_CM[1]):
        errors.append("Height must be between 100 and 250 cm")

    age = _to_float(form.age)
    if age is None or not age.is_integer():
        errors.append("Valid age is required")
    elif not (AGE_RANGE_YEARS[0] <= age <= AGE_RANGE_YEARS[1]):
        errors.append("Age must be between 13 and 120 years")

    sex: Optional[Sex] = None
    if isinstance(form.gender, str):
        try:
            sex = Sex(form.gender.strip().lower())
        except ValueError:
            sex = None
    if sex is None:
        errors.append("Valid gender is required")

    activity_level: Optional[ActivityLevel] = None
    if isinstance(form.activity_level, str):
        activity_level = ActivityLevel.from_token(form.activity_level)
    if activity_level is None:
        errors.append("Valid activity level is required")

    if errors:
        raise InvalidBiometricInputError(errors)

    return BiometricInput(
        height_cm=height,
        weight_kg=weight,
        age_years=int(age),
        sex=sex,
        activity_level=activity_level,
    )


def parse_conditions(raw: Union[str, Sequence[str], None]) -> Tuple[str, ...]:
    """Normalize a condition/restriction list.

    Accepts the comma-separated string sent by the health form or a list of
    strings. Entries are trimmed and blanks dropped.

    Example:
        >>> parse_conditions("Diabetes, , high cholesterol")
        ('Diabetes', 'high cholesterol')
    """
    if not raw:
        return ()
    items = raw.split(",") if isinstance(raw, str) else raw
    return tuple(item.strip() for item in items if item and item.strip())
