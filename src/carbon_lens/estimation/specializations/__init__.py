"""Food and personal-care specializations of the heuristic pipeline."""

from carbon_lens.estimation.specializations.base import Specialization
from carbon_lens.estimation.specializations.cosmetic import CosmeticSpecialization
from carbon_lens.estimation.specializations.food import FoodSpecialization
from carbon_lens.schema import Product

FOOD = FoodSpecialization()
COSMETIC = CosmeticSpecialization()


def select_specialization(product: Product) -> Specialization:
    return COSMETIC if product.is_personal_care else FOOD


__all__ = [
    "COSMETIC",
    "CosmeticSpecialization",
    "FOOD",
    "FoodSpecialization",
    "Specialization",
    "select_specialization",
]
