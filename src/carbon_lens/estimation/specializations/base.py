"""Base specialization interface."""

from abc import ABC, abstractmethod

from carbon_lens.estimation.intensity import IntensityMatch
from carbon_lens.estimation.packaging import PackagingEstimate
from carbon_lens.estimation.types import CarbonEstimate, EstimateKind
from carbon_lens.schema import Product


class Specialization(ABC):
    """Heuristic pipeline tuned for one family of products.

    Subclasses share the stage interface (quantity, intensity, packaging)
    and differ in tables and normalization basis.
    """

    kind: EstimateKind

    @abstractmethod
    def resolve_quantity(self, product: Product) -> float:
        """Resolve the product quantity in the specialization's own unit."""
        pass

    @abstractmethod
    def match_intensity(self, product: Product) -> IntensityMatch:
        pass

    @abstractmethod
    def estimate_packaging(self, product: Product, quantity: float) -> PackagingEstimate:
        pass

    @abstractmethod
    def estimate(self, product: Product, user_country: str | None = None) -> CarbonEstimate:
        """Run the heuristic stages and aggregate them.

        Args:
            product: Product record from the lookup.
            user_country: Validated ISO2 code of the buyer, if known.

        Returns:
            CarbonEstimate with `medium` or `low` confidence.
        """
        pass
