"""Water-content heuristics.

Water is treated as carbon-free, so the fraction returned here discounts the
mass that production intensity applies to.
"""

from __future__ import annotations

from carbon_lens.estimation.data.food import (
    HIGH_WATER_KEYWORDS,
    MEDIUM_WATER_KEYWORDS,
    WATER_LEADING_TOKENS,
)
from carbon_lens.estimation.text import first_keyword, join_text, normalize_text
from carbon_lens.schema import Product

WATER_FIRST_INGREDIENT = 0.85
HIGH_WATER = 0.80
MEDIUM_WATER = 0.50
DEFAULT_WATER = 0.30


def estimate_water_fraction(product: Product) -> float:
    ingredients = normalize_text(product.ingredients_text)
    if ingredients.startswith(WATER_LEADING_TOKENS):
        return WATER_FIRST_INGREDIENT

    text = join_text(product.categories, product.name)
    if first_keyword(text, HIGH_WATER_KEYWORDS):
        return HIGH_WATER
    if first_keyword(text, MEDIUM_WATER_KEYWORDS):
        return MEDIUM_WATER
    return DEFAULT_WATER
