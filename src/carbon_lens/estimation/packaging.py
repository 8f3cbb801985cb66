"""Packaging mass and material estimation."""

from __future__ import annotations

from dataclasses import dataclass

from carbon_lens.estimation.data.cosmetic import (
    COSMETIC_MATERIAL_OVERRIDES,
    COSMETIC_PACKAGING_MATERIAL_CO2,
    COSMETIC_PACKAGING_PROFILES,
    DEFAULT_COSMETIC_PACKAGING,
    SECONDARY_BOX_MATERIAL,
    SECONDARY_BOX_WEIGHT_KG,
    PackagingProfile,
)
from carbon_lens.estimation.data.food import (
    BEVERAGE_KEYWORDS,
    DEFAULT_PACKAGING_CO2,
    DEFAULT_PACKAGING_MATERIAL,
    FOOD_PACKAGING_MATERIALS,
)
from carbon_lens.estimation.text import first_keyword, first_match, join_text, normalize_text
from carbon_lens.schema import Product

FOOD_PACKAGING_FRACTION = 0.05
BEVERAGE_PACKAGING_FRACTION = 0.10


@dataclass(frozen=True)
class PackagingEstimate:
    co2: float
    mass_kg: float
    material: str


def is_beverage(product: Product) -> bool:
    return first_keyword(normalize_text(product.categories), BEVERAGE_KEYWORDS) is not None


def estimate_food_packaging(product: Product, mass_kg: float) -> PackagingEstimate:
    """Packaging as a fixed share of product mass times a material factor."""
    fraction = BEVERAGE_PACKAGING_FRACTION if is_beverage(product) else FOOD_PACKAGING_FRACTION

    hit = first_match(normalize_text(product.packaging), FOOD_PACKAGING_MATERIALS, whole_word=True)
    material, factor = hit if hit else (DEFAULT_PACKAGING_MATERIAL, DEFAULT_PACKAGING_CO2)

    packaging_mass = mass_kg * fraction
    return PackagingEstimate(co2=packaging_mass * factor, mass_kg=packaging_mass, material=material)


def cosmetic_packaging_profile(product: Product) -> PackagingProfile:
    hit = first_match(join_text(product.categories, product.name), COSMETIC_PACKAGING_PROFILES)
    return hit[1] if hit else DEFAULT_COSMETIC_PACKAGING


def estimate_cosmetic_packaging(product: Product, volume_ml: float) -> PackagingEstimate:
    """Container mass from the product-type profile, plus an outer box when typical.

    The free-text packaging field overrides the profile material when it
    names glass, plastic or aluminium.
    """
    profile = cosmetic_packaging_profile(product)
    override = first_match(normalize_text(product.packaging), COSMETIC_MATERIAL_OVERRIDES)
    material = override[1] if override else profile.material
    factor = COSMETIC_PACKAGING_MATERIAL_CO2.get(material, COSMETIC_PACKAGING_MATERIAL_CO2["plastic"])

    primary_mass = profile.base_weight_kg + profile.per_ml_weight_kg * volume_ml
    secondary_mass = SECONDARY_BOX_WEIGHT_KG if profile.has_secondary_box else 0.0
    co2 = primary_mass * factor + secondary_mass * COSMETIC_PACKAGING_MATERIAL_CO2[SECONDARY_BOX_MATERIAL]
    return PackagingEstimate(co2=co2, mass_kg=primary_mass + secondary_mass, material=material)
