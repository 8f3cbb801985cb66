"""Human-readable renderings of carbon estimates."""

from __future__ import annotations

from carbon_lens.estimation.types import CarbonEstimate

# Average passenger car, kg CO2e per km.
CAR_KG_CO2E_PER_KM = 0.21


def format_carbon_value(estimate: CarbonEstimate) -> str:
    value = estimate.value
    if value < 1:
        return f"{round(value * 1000)}g CO₂e"
    return f"{value:.2f} kg CO₂e"


def format_carbon_per_kg(estimate: CarbonEstimate) -> str:
    if estimate.kind == "cosmetic":
        return "per unit"
    value = estimate.value_per_kg
    if value < 1:
        return f"{round(value * 1000)}g CO₂e/kg"
    return f"{value:.1f} kg CO₂e/kg"


def driving_comparison(estimate: CarbonEstimate) -> str:
    """Express the footprint as an equivalent distance driven by car."""
    km = estimate.value / CAR_KG_CO2E_PER_KM
    if km < 1:
        return f"≈ {round(km * 1000)}m of driving"
    return f"≈ {km:.1f} km of driving"
