"""Carbon-intensity lookup for product text."""

from __future__ import annotations

from dataclasses import dataclass

from carbon_lens.estimation.data.cosmetic import COSMETIC_INTENSITY, DEFAULT_COSMETIC_INTENSITY
from carbon_lens.estimation.data.food import (
    DEFAULT_FOOD_INTENSITY,
    ECOSCORE_MULTIPLIERS,
    FOOD_INTENSITY,
    NOVA_MULTIPLIERS,
)
from carbon_lens.estimation.text import first_match, join_text
from carbon_lens.schema import Product

GENERAL_FOOD = "general food"
GENERAL_BEAUTY_PRODUCT = "general beauty product"


@dataclass(frozen=True)
class IntensityMatch:
    keyword: str
    intensity: float
    matched: bool


def match_food_intensity(product: Product) -> IntensityMatch:
    """Match categories, name and ingredients against the food table."""
    text = join_text(product.categories, product.name, product.ingredients_text)
    hit = first_match(text, FOOD_INTENSITY)
    if hit is None:
        return IntensityMatch(keyword=GENERAL_FOOD, intensity=DEFAULT_FOOD_INTENSITY, matched=False)
    keyword, intensity = hit
    return IntensityMatch(keyword=keyword, intensity=intensity, matched=True)


def match_cosmetic_intensity(product: Product) -> IntensityMatch:
    """Match categories and name against the personal-care table."""
    text = join_text(product.categories, product.name)
    hit = first_match(text, COSMETIC_INTENSITY)
    if hit is None:
        return IntensityMatch(
            keyword=GENERAL_BEAUTY_PRODUCT,
            intensity=DEFAULT_COSMETIC_INTENSITY,
            matched=False,
        )
    keyword, intensity = hit
    return IntensityMatch(keyword=keyword, intensity=intensity, matched=True)


def processing_multiplier(nova_group: int | None) -> float:
    if nova_group is None:
        return 1.0
    return NOVA_MULTIPLIERS.get(nova_group, 1.0)


def ecoscore_multiplier(grade: str | None) -> float:
    return ECOSCORE_MULTIPLIERS.get(normalize_grade(grade) or "", 1.0)


def normalize_grade(grade: str | None) -> str | None:
    """Return a lower-case eco-score grade a..e, or None for unknown values."""
    if not grade:
        return None
    value = grade.strip().lower()
    return value if value in ECOSCORE_MULTIPLIERS else None
