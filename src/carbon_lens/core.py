"""Core estimation function."""

from __future__ import annotations

import logging

from carbon_lens.estimation.authoritative import extract_authoritative
from carbon_lens.estimation.specializations import select_specialization
from carbon_lens.estimation.transport import normalize_country_code
from carbon_lens.estimation.types import CarbonEstimate
from carbon_lens.schema import Product

logger = logging.getLogger(__name__)


def estimate(product: Product, *, user_country_code: str | None = None) -> CarbonEstimate:
    """Estimate the carbon footprint of a product.

    Agribalyse LCA data in the raw record is used when present; otherwise the
    food or personal-care heuristics run, selected by ``product.source``.

    Args:
        product: Product record from the open product database lookup.
        user_country_code: ISO2 code of the buyer's country, case-insensitive.
            Invalid values are ignored.

    Returns:
        CarbonEstimate. Never raises for a valid Product.

    Raises:
        ValueError: If ``product`` is None.
    """
    if product is None:
        raise ValueError("product is required")

    specialization = select_specialization(product)
    authoritative = extract_authoritative(product, kind=specialization.kind)
    if authoritative is not None:
        return authoritative

    user_country = normalize_country_code(user_country_code)
    if user_country_code and user_country is None:
        logger.debug("ignoring invalid user country code %r", user_country_code)
    return specialization.estimate(product, user_country)
