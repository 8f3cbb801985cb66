"""Carbon estimation pipeline for carbon-lens."""

from carbon_lens.estimation.authoritative import extract_authoritative
from carbon_lens.estimation.rating import carbon_rating
from carbon_lens.estimation.specializations import (
    CosmeticSpecialization,
    FoodSpecialization,
    Specialization,
    select_specialization,
)
from carbon_lens.estimation.types import Breakdown, CarbonEstimate, CarbonRating

__all__ = [
    "Breakdown",
    "CarbonEstimate",
    "CarbonRating",
    "CosmeticSpecialization",
    "FoodSpecialization",
    "Specialization",
    "carbon_rating",
    "extract_authoritative",
    "select_specialization",
]
