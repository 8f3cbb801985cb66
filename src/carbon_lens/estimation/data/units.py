"""Quantity patterns and their conversion factors."""

# A number that does not continue another number and is not negated.
_NUMBER = r"(?<![\d.,\-])(\d+(?:[.,]\d+)?)\s*"

# Conversion to kilograms; 1 l of product counts as 1 kg.
FOOD_UNIT_PATTERNS: tuple[tuple[str, float], ...] = (
    (_NUMBER + r"kg", 1.0),
    (_NUMBER + r"g(?!a)", 0.001),
    (_NUMBER + r"l(?:itre|iter)?s?\b", 1.0),
    (_NUMBER + r"ml", 0.001),
    (_NUMBER + r"cl", 0.01),
    (_NUMBER + r"fl\.?\s*oz", 0.0296),
    (_NUMBER + r"oz", 0.0283),
    (_NUMBER + r"lbs?\b", 0.453),
)

# Conversion to millilitres; 1 g of product counts as 1 ml.
COSMETIC_UNIT_PATTERNS: tuple[tuple[str, float], ...] = (
    (_NUMBER + r"ml", 1.0),
    (_NUMBER + r"l(?:itre|iter)?s?\b", 1000.0),
    (_NUMBER + r"cl", 10.0),
    (_NUMBER + r"fl\.?\s*oz", 29.6),
    (_NUMBER + r"oz", 28.3),
    (_NUMBER + r"kg", 1000.0),
    (_NUMBER + r"g(?!a)", 1.0),
    (_NUMBER + r"lbs?\b", 453.0),
)

MULTIPLIER_PATTERN = r"(?<![\d.,])(\d+)\s*[x×]\s*(?=\d)"
