"""Letter rating for carbon estimates."""

from __future__ import annotations

from carbon_lens.estimation.types import CarbonEstimate, CarbonRating, Grade

# Upper bounds (inclusive) for grades A..D; anything above is E.
FOOD_THRESHOLDS_PER_KG: tuple[float, ...] = (1.0, 3.0, 6.0, 12.0)
COSMETIC_THRESHOLDS_PER_UNIT: tuple[float, ...] = (0.1, 0.25, 0.5, 1.0)

_GRADES: tuple[tuple[Grade, str, str], ...] = (
    ("A", "Very Low Impact", "#038141"),
    ("B", "Low Impact", "#85BB2F"),
    ("C", "Moderate Impact", "#FECB02"),
    ("D", "High Impact", "#EE8100"),
    ("E", "Very High Impact", "#E63E11"),
)


def rated_value(estimate: CarbonEstimate) -> float:
    """Food is rated per kilogram, personal care per unit sold."""
    return estimate.value if estimate.kind == "cosmetic" else estimate.value_per_kg


def classify_grade(value: float, thresholds: tuple[float, ...]) -> CarbonRating:
    for (grade, label, color), upper in zip(_GRADES, thresholds):
        if value <= upper:
            return CarbonRating(grade=grade, label=label, color=color)
    grade, label, color = _GRADES[-1]
    return CarbonRating(grade=grade, label=label, color=color)


def carbon_rating(estimate: CarbonEstimate) -> CarbonRating:
    thresholds = COSMETIC_THRESHOLDS_PER_UNIT if estimate.kind == "cosmetic" else FOOD_THRESHOLDS_PER_KG
    return classify_grade(rated_value(estimate), thresholds)
