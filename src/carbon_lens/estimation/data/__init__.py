"""Static lookup tables for carbon estimation.

Every keyword table is an ordered tuple of ``(keyword, value)`` pairs.
Order is match priority: the first keyword found in the text wins.
"""

from carbon_lens.estimation.data.cosmetic import (
    COSMETIC_INTENSITY,
    COSMETIC_MATERIAL_OVERRIDES,
    COSMETIC_PACKAGING_MATERIAL_CO2,
    COSMETIC_PACKAGING_PROFILES,
    DEFAULT_COSMETIC_INTENSITY,
    DEFAULT_COSMETIC_PACKAGING,
    PackagingProfile,
)
from carbon_lens.estimation.data.food import (
    BEVERAGE_KEYWORDS,
    DEFAULT_FOOD_INTENSITY,
    DEFAULT_PACKAGING_CO2,
    DEFAULT_PACKAGING_MATERIAL,
    ECOSCORE_MULTIPLIERS,
    FOOD_INTENSITY,
    FOOD_PACKAGING_MATERIALS,
    HIGH_WATER_KEYWORDS,
    MEDIUM_WATER_KEYWORDS,
    NOVA_MULTIPLIERS,
    WATER_LEADING_TOKENS,
)
from carbon_lens.estimation.data.geo import (
    COUNTRY_NAMES,
    EUROPE,
    EUROPEAN_KEYWORDS,
    LOCAL_KEYWORDS,
    OVERSEAS_KEYWORDS,
    TRANSPORT_CO2_PER_KG_KM,
)
from carbon_lens.estimation.data.units import COSMETIC_UNIT_PATTERNS, FOOD_UNIT_PATTERNS

__all__ = [
    "BEVERAGE_KEYWORDS",
    "COSMETIC_INTENSITY",
    "COSMETIC_MATERIAL_OVERRIDES",
    "COSMETIC_PACKAGING_MATERIAL_CO2",
    "COSMETIC_PACKAGING_PROFILES",
    "COSMETIC_UNIT_PATTERNS",
    "COUNTRY_NAMES",
    "DEFAULT_COSMETIC_INTENSITY",
    "DEFAULT_COSMETIC_PACKAGING",
    "DEFAULT_FOOD_INTENSITY",
    "DEFAULT_PACKAGING_CO2",
    "DEFAULT_PACKAGING_MATERIAL",
    "ECOSCORE_MULTIPLIERS",
    "EUROPE",
    "EUROPEAN_KEYWORDS",
    "FOOD_INTENSITY",
    "FOOD_PACKAGING_MATERIALS",
    "FOOD_UNIT_PATTERNS",
    "HIGH_WATER_KEYWORDS",
    "LOCAL_KEYWORDS",
    "MEDIUM_WATER_KEYWORDS",
    "NOVA_MULTIPLIERS",
    "OVERSEAS_KEYWORDS",
    "PackagingProfile",
    "TRANSPORT_CO2_PER_KG_KM",
    "WATER_LEADING_TOKENS",
]
