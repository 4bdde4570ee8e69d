"""Tests for the GraphQL SDL export script."""

import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "export_schema.py"


@pytest.fixture
def export_schema():
    spec = importlib.util.spec_from_file_location("export_schema", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)  # type: ignore[union-attr]
    return module


def test_export_writes_sdl(export_schema, tmp_path: Path) -> None:
    """Test SDL contains the health metrics query fields."""
    out = tmp_path / "schema.graphql"

    exit_code = export_schema.main(["--out", str(out)])

    assert exit_code == 0
    sdl = out.read_text(encoding="utf-8")
    assert sdl.startswith('"""\nCanonical GraphQL SDL')
    assert "healthMetrics: HealthMetricsQueries!" in sdl
    assert "healthAssessment(input: HealthFormInput!): HealthAssessmentType!" in sdl
    assert "bmiCategories: [BMICategoryType!]!" in sdl
    assert "activityLevels: [ActivityLevelType!]!" in sdl
    assert "proteinPercentage: Float!" in sdl
