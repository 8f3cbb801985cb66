"""Presentation bundle shared by the CLI and the HTTP service."""

from pydantic import BaseModel

from carbon_lens.estimation.rating import carbon_rating
from carbon_lens.estimation.types import CarbonEstimate, CarbonRating
from carbon_lens.formatting import driving_comparison, format_carbon_per_kg, format_carbon_value
from carbon_lens.schema import Product


class EstimateReport(BaseModel):
    """Estimate with its rating and display strings."""

    barcode: str
    name: str
    brand: str
    estimate: CarbonEstimate
    rating: CarbonRating
    display_value: str
    display_per_kg: str
    comparison: str


def build_report(product: Product, estimate: CarbonEstimate) -> EstimateReport:
    return EstimateReport(
        barcode=product.barcode,
        name=product.name,
        brand=product.brand,
        estimate=estimate,
        rating=carbon_rating(estimate),
        display_value=format_carbon_value(estimate),
        display_per_kg=format_carbon_per_kg(estimate),
        comparison=driving_comparison(estimate),
    )
