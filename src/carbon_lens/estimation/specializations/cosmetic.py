"""Personal-care specialization: quantities in millilitres, rated per unit."""

from __future__ import annotations

from carbon_lens.estimation.aggregate import aggregate, build_explanation
from carbon_lens.estimation.intensity import IntensityMatch, match_cosmetic_intensity
from carbon_lens.estimation.packaging import PackagingEstimate, estimate_cosmetic_packaging
from carbon_lens.estimation.quantity import parse_volume_ml
from carbon_lens.estimation.specializations.base import Specialization
from carbon_lens.estimation.transport import estimate_transport
from carbon_lens.estimation.types import CarbonEstimate
from carbon_lens.estimation.water import DEFAULT_WATER, estimate_water_fraction
from carbon_lens.schema import Product


class CosmeticSpecialization(Specialization):
    kind = "cosmetic"

    def resolve_quantity(self, product: Product) -> float:
        return parse_volume_ml(product.quantity)

    def match_intensity(self, product: Product) -> IntensityMatch:
        return match_cosmetic_intensity(product)

    def estimate_packaging(self, product: Product, quantity: float) -> PackagingEstimate:
        return estimate_cosmetic_packaging(product, quantity)

    def estimate(self, product: Product, user_country: str | None = None) -> CarbonEstimate:
        volume_ml = self.resolve_quantity(product)
        mass = volume_ml / 1000  # 1 ml ~ 1 g
        water = estimate_water_fraction(product)
        match = self.match_intensity(product)

        production = (1 - water) * match.intensity * mass
        packaging = self.estimate_packaging(product, volume_ml)
        # Small items ship with their packaging, which can outweigh them.
        transport, _ = estimate_transport(product, mass + packaging.mass_kg, user_country)

        total = production + packaging.co2 + transport
        packaging_share = round(packaging.co2 / total * 100) if total > 0 else 0
        explanation = build_explanation(
            [
                f"Based on: {match.keyword}" if match.matched else None,
                f"{volume_ml:g} ml",
                f"~{round(water * 100)}% water content" if water != DEFAULT_WATER else None,
                f"{packaging.material} packaging (~{packaging_share}% of footprint)",
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
        )
