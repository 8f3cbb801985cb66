"""carbon-lens: Estimate the carbon footprint of food and personal-care products."""

from carbon_lens.core import estimate
from carbon_lens.estimation import Breakdown, CarbonEstimate, CarbonRating, carbon_rating
from carbon_lens.schema import Product

__version__ = "0.1.0"

__all__ = [
    "estimate",
    "carbon_rating",
    "Breakdown",
    "CarbonEstimate",
    "CarbonRating",
    "Product",
    "__version__",
]
