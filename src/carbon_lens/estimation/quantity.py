"""Free-text quantity parsing."""

from __future__ import annotations

import logging
import re

from carbon_lens.estimation.data.units import (
    COSMETIC_UNIT_PATTERNS,
    FOOD_UNIT_PATTERNS,
    MULTIPLIER_PATTERN,
)

logger = logging.getLogger(__name__)

DEFAULT_MASS_KG = 1.0
MIN_MASS_KG = 1e-6
MAX_MASS_KG = 100.0
DEFAULT_VOLUME_ML = 100.0
MIN_VOLUME_ML = 0.001
MAX_VOLUME_ML = 100_000.0

_FOOD_PATTERNS = tuple((re.compile(pattern, re.IGNORECASE), factor) for pattern, factor in FOOD_UNIT_PATTERNS)
_COSMETIC_PATTERNS = tuple(
    (re.compile(pattern, re.IGNORECASE), factor) for pattern, factor in COSMETIC_UNIT_PATTERNS
)
_MULTIPLIER = re.compile(MULTIPLIER_PATTERN, re.IGNORECASE)


def parse_mass_kg(quantity: str | None) -> float:
    """Resolve a quantity string such as ``"6 x 500ml"`` to kilograms.

    Litres count as kilograms. Unparseable quantities, and those outside
    1 mg to 100 kg, resolve to 1 kg.
    """
    value = _parse(quantity, _FOOD_PATTERNS)
    if value is None or not MIN_MASS_KG <= value <= MAX_MASS_KG:
        logger.debug("quantity %r unresolved, using %s kg", quantity, DEFAULT_MASS_KG)
        return DEFAULT_MASS_KG
    return value


def parse_volume_ml(quantity: str | None) -> float:
    """Resolve a personal-care quantity string to millilitres.

    Grams count as millilitres. Failures, and volumes outside 0.001 ml to
    100 l, resolve to 100 ml.
    """
    value = _parse(quantity, _COSMETIC_PATTERNS)
    if value is None or not MIN_VOLUME_ML <= value <= MAX_VOLUME_ML:
        logger.debug("quantity %r unresolved, using %s ml", quantity, DEFAULT_VOLUME_ML)
        return DEFAULT_VOLUME_ML
    return value


def _parse(quantity: str | None, patterns: tuple[tuple[re.Pattern[str], float], ...]) -> float | None:
    text = (quantity or "").strip().lower()
    if not text:
        return None

    multiplier = 1
    multi_match = _MULTIPLIER.search(text)
    if multi_match:
        try:
            multiplier = int(multi_match.group(1))
        except ValueError:
            return None
        # The pack count must not be read as the unit amount.
        text = text[: multi_match.start()] + " " + text[multi_match.end() :]

    for pattern, factor in patterns:
        match = pattern.search(text)
        if match:
            amount = float(match.group(1).replace(",", "."))
            try:
                return amount * factor * multiplier
            except OverflowError:
                return None
    return None
