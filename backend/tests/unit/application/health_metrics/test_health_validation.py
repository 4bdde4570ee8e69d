"""Unit tests for health form validation."""

import pytest

from application.health_metrics.validation import (
    HealthFormData,
    parse_conditions,
    validate_health_form,
)
from domain.health_metrics.core.exceptions import InvalidBiometricInputError
from domain.health_metrics.core.value_objects import (
    ActivityLevel,
    HeightUnit,
    Sex,
    WeightUnit,
)


def make_form(**overrides):
    data = dict(
        age=25,
        gender="male",
        activity_level="moderate",
        height=170,
        weight=70,
    )
    data.update(overrides)
    return HealthFormData(**data)


def errors_of(form):
    with pytest.raises(InvalidBiometricInputError) as exc_info:
        validate_health_form(form)
    return exc_info.value.errors


class TestValidateHealthForm:
    """Test health form validation and normalization."""

    def test_valid_form(self):
        """Test valid metric form."""
        biometrics = validate_health_form(make_form())

        assert biometrics.height_cm == 170
        assert biometrics.weight_kg == 70
        assert biometrics.age_years == 25
        assert biometrics.sex == Sex.MALE
        assert biometrics.activity_level == ActivityLevel.MODERATE

    def test_string_numbers_accepted(self):
        """Test numeric strings from form fields."""
        biometrics = validate_health_form(make_form(age="30", height="165.5", weight="60"))

        assert biometrics.age_years == 30
        assert biometrics.height_cm == 165.5
        assert isinstance(biometrics.age_years, int)

    def test_gender_case_insensitive(self):
        """Test gender normalization."""
        assert validate_health_form(make_form(gender="Female")).sex == Sex.FEMALE

    def test_client_activity_alias(self):
        """Test hyphenated activity labels."""
        biometrics = validate_health_form(make_form(activity_level="lightly-active"))

        assert biometrics.activity_level == ActivityLevel.LIGHT

    def test_imperial_units(self):
        """Test ft/in and lb are converted before range checks."""
        biometrics = validate_health_form(
            make_form(
                height=None,
                height_unit=HeightUnit.FT,
                height_feet=5,
                height_inches=10,
                weight=150,
                weight_unit=WeightUnit.LB,
            )
        )

        assert biometrics.height_cm == pytest.approx(177.8)
        assert biometrics.weight_kg == pytest.approx(68.0388)

    def test_feet_without_inches(self):
        """Test missing inches default to zero."""
        biometrics = validate_health_form(
            make_form(height=None, height_unit=HeightUnit.FT, height_feet=6)
        )

        assert biometrics.height_cm == pytest.approx(182.88)

    def test_unparseable_inches_rejected(self):
        """Test inches that are not a number fail instead of counting as zero."""
        errors = errors_of(
            make_form(height=None, height_unit=HeightUnit.FT, height_feet=5, height_inches="abc")
        )

        assert errors == ["Valid height is required"]

    def test_imperial_out_of_range(self):
        """Test converted values are range checked."""
        errors = errors_of(make_form(weight=30, weight_unit=WeightUnit.LB))

        assert errors == ["Weight must be between 20 and 500 kg"]

    @pytest.mark.parametrize("weight", [20, 500])
    def test_weight_bounds_inclusive(self, weight):
        """Test weight range bounds are accepted."""
        assert validate_health_form(make_form(weight=weight)).weight_kg == weight

    @pytest.mark.parametrize(
        "field,value,message",
        [
            ("weight", None, "Valid weight is required"),
            ("weight", "heavy", "Valid weight is required"),
            ("weight", 19.9, "Weight must be between 20 and 500 kg"),
            ("weight", 501, "Weight must be between 20 and 500 kg"),
            ("height", None, "Valid height is required"),
            ("height", 99, "Height must be between 100 and 250 cm"),
            ("height", 251, "Height must be between 100 and 250 cm"),
            ("age", None, "Valid age is required"),
            ("age", 25.5, "Valid age is required"),
            ("age", 12, "Age must be between 13 and 120 years"),
            ("age", 121, "Age must be between 13 and 120 years"),
            ("gender", "other", "Valid gender is required"),
            ("gender", None, "Valid gender is required"),
            ("activity_level", "couch", "Valid activity level is required"),
            ("activity_level", None, "Valid activity level is required"),
        ],
    )
    def test_single_field_errors(self, field, value, message):
        """Test each field error message."""
        assert errors_of(make_form(**{field: value})) == [message]

    def test_all_errors_collected(self):
        """Test every problem is reported at once."""
        form = HealthFormData(age=None, gender=None, activity_level=None)

        errors = errors_of(form)

        assert errors == [
            "Valid weight is required",
            "Valid height is required",
            "Valid age is required",
            "Valid gender is required",
            "Valid activity level is required",
        ]

    def test_error_message_joins_errors(self):
        """Test exception message."""
        with pytest.raises(InvalidBiometricInputError, match="Valid age is required"):
            validate_health_form(make_form(age=None))


class TestParseConditions:
    """Test condition list normalization."""

    def test_none_and_empty(self):
        """Test missing input."""
        assert parse_conditions(None) == ()
        assert parse_conditions("") == ()
        assert parse_conditions([]) == ()

    def test_comma_separated_string(self):
        """Test form string encoding."""
        assert parse_conditions("Diabetes, , high cholesterol ") == (
            "Diabetes",
            "high cholesterol",
        )

    def test_list(self):
        """Test list input is trimmed."""
        assert parse_conditions([" vegan ", "", "nut_free"]) == ("vegan", "nut_free")
