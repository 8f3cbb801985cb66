"""Food specialization: quantities in kilograms, rated per kilogram."""

from __future__ import annotations

from carbon_lens.estimation.aggregate import aggregate, build_explanation
from carbon_lens.estimation.data.food import NOVA_MULTIPLIERS
from carbon_lens.estimation.intensity import (
    IntensityMatch,
    ecoscore_multiplier,
    match_food_intensity,
    normalize_grade,
    processing_multiplier,
)
from carbon_lens.estimation.packaging import PackagingEstimate, estimate_food_packaging
from carbon_lens.estimation.quantity import parse_mass_kg
from carbon_lens.estimation.specializations.base import Specialization
from carbon_lens.estimation.transport import estimate_transport
from carbon_lens.estimation.types import CarbonEstimate
from carbon_lens.estimation.water import DEFAULT_WATER, estimate_water_fraction
from carbon_lens.schema import Product


class FoodSpecialization(Specialization):
    kind = "food"

    def resolve_quantity(self, product: Product) -> float:
        return parse_mass_kg(product.quantity)

    def match_intensity(self, product: Product) -> IntensityMatch:
        return match_food_intensity(product)

    def estimate_packaging(self, product: Product, quantity: float) -> PackagingEstimate:
        return estimate_food_packaging(product, quantity)

    def estimate(self, product: Product, user_country: str | None = None) -> CarbonEstimate:
        mass = self.resolve_quantity(product)
        water = estimate_water_fraction(product)
        match = self.match_intensity(product)
        nova_group = product.nova_group if product.nova_group in NOVA_MULTIPLIERS else None
        grade = normalize_grade(product.ecoscore_grade)

        production = (1 - water) * match.intensity * mass
        production *= processing_multiplier(nova_group)
        production *= ecoscore_multiplier(grade)

        packaging = self.estimate_packaging(product, mass)
        transport, _ = estimate_transport(product, mass, user_country)

        explanation = build_explanation(
            [
                f"Based on: {match.keyword}" if match.matched else None,
                f"~{round(water * 100)}% water content" if water != DEFAULT_WATER else None,
                f"NOVA {nova_group}" if nova_group else None,
                f"Eco-Score {grade.upper()}" if grade else None,
            ]
        )
        return aggregate(
            production=production,
            packaging=packaging.co2,
            transport=transport,
            mass_kg=mass,
            matched=match.matched,
            explanation=explanation,
            kind=self.kind,
            ecoscore_grade=grade,
            nova_group=nova_group,
        )
