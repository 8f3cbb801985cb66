"""Tests for letter ratings."""

import pytest

from carbon_lens import Breakdown, CarbonEstimate, carbon_rating
from carbon_lens.estimation.rating import (
    COSMETIC_THRESHOLDS_PER_UNIT,
    FOOD_THRESHOLDS_PER_KG,
    classify_grade,
)


def _estimate(value, value_per_kg, kind="food"):
    return CarbonEstimate(
        value=value,
        value_per_kg=value_per_kg,
        confidence="medium",
        source="category-matched",
        breakdown=Breakdown(production=value, packaging=0.0, transport=0.0),
        explanation="Based on: test",
        product_weight_kg=1.0,
        kind=kind,
    )


@pytest.mark.parametrize(
    ("value", "grade"),
    [(0.5, "A"), (1.0, "A"), (1.01, "B"), (3.0, "B"), (5.0, "C"), (12.0, "D"), (12.5, "E")],
)
def test_classify_food_grade(value, grade):
    assert classify_grade(value, FOOD_THRESHOLDS_PER_KG).grade == grade


@pytest.mark.parametrize(
    ("value", "grade"),
    [(0.05, "A"), (0.2, "B"), (0.3, "C"), (1.0, "D"), (2.0, "E")],
)
def test_classify_cosmetic_grade(value, grade):
    assert classify_grade(value, COSMETIC_THRESHOLDS_PER_UNIT).grade == grade


def test_food_is_rated_per_kilogram():
    rating = carbon_rating(_estimate(value=0.8, value_per_kg=16.0))

    assert rating.grade == "E"
    assert rating.label == "Very High Impact"
    assert rating.color == "#E63E11"


def test_cosmetic_is_rated_per_unit():
    rating = carbon_rating(_estimate(value=0.3, value_per_kg=6.0, kind="cosmetic"))

    assert rating.grade == "C"
    assert rating.label == "Moderate Impact"
    assert rating.color == "#FECB02"
