"""Validate estimation lookup tables.

Checks:
1. No keyword appears twice in the same table.
2. No keyword is shadowed: a later keyword that always contains an earlier
   one can never win, because table order is match priority.
3. Every cosmetic packaging profile names a material with a known factor.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable

from carbon_lens.estimation.data import (
    BEVERAGE_KEYWORDS,
    COSMETIC_INTENSITY,
    COSMETIC_MATERIAL_OVERRIDES,
    COSMETIC_PACKAGING_MATERIAL_CO2,
    COSMETIC_PACKAGING_PROFILES,
    COUNTRY_NAMES,
    EUROPEAN_KEYWORDS,
    FOOD_INTENSITY,
    FOOD_PACKAGING_MATERIALS,
    HIGH_WATER_KEYWORDS,
    LOCAL_KEYWORDS,
    MEDIUM_WATER_KEYWORDS,
    OVERSEAS_KEYWORDS,
)
from carbon_lens.estimation.text import contains_keyword, normalize_text

# (label, keywords, whole_word) for tables scanned with first_match.
PRIORITY_TABLES: list[tuple[str, list[str], bool]] = [
    ("food_intensity", [keyword for keyword, _ in FOOD_INTENSITY], False),
    ("food_packaging_materials", [keyword for keyword, _ in FOOD_PACKAGING_MATERIALS], True),
    ("cosmetic_intensity", [keyword for keyword, _ in COSMETIC_INTENSITY], False),
    ("cosmetic_packaging_profiles", [keyword for keyword, _ in COSMETIC_PACKAGING_PROFILES], False),
    ("cosmetic_material_overrides", [keyword for keyword, _ in COSMETIC_MATERIAL_OVERRIDES], False),
    ("country_names", [keyword for keyword, _ in COUNTRY_NAMES], True),
]

KEYWORD_LISTS: list[tuple[str, Iterable[str]]] = [
    ("high_water", HIGH_WATER_KEYWORDS),
    ("medium_water", MEDIUM_WATER_KEYWORDS),
    ("beverage", BEVERAGE_KEYWORDS),
    ("local", LOCAL_KEYWORDS),
    ("european", EUROPEAN_KEYWORDS),
    ("overseas", OVERSEAS_KEYWORDS),
]


def find_duplicates(keywords: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    duplicates: list[str] = []
    for keyword in keywords:
        normalized = normalize_text(keyword)
        if normalized in seen:
            duplicates.append(keyword)
        seen.add(normalized)
    return duplicates


def find_shadowed(keywords: list[str], *, whole_word: bool) -> list[tuple[str, str]]:
    """Return ``(earlier, later)`` pairs where ``later`` can never match first."""
    shadowed: list[tuple[str, str]] = []
    for index, later in enumerate(keywords):
        later_text = normalize_text(later)
        for earlier in keywords[:index]:
            if normalize_text(earlier) == later_text:
                continue
            if contains_keyword(later_text, earlier, whole_word=whole_word):
                shadowed.append((earlier, later))
                break
    return shadowed


def collect_errors() -> list[str]:
    errors: list[str] = []
    for label, keywords, whole_word in PRIORITY_TABLES:
        for keyword in find_duplicates(keywords):
            errors.append(f"{label}: duplicate keyword {keyword!r}")
        for earlier, later in find_shadowed(keywords, whole_word=whole_word):
            errors.append(f"{label}: {later!r} is shadowed by earlier {earlier!r}")

    for label, keywords in KEYWORD_LISTS:
        for keyword in find_duplicates(keywords):
            errors.append(f"{label}: duplicate keyword {keyword!r}")

    for keyword, profile in COSMETIC_PACKAGING_PROFILES:
        if profile.material not in COSMETIC_PACKAGING_MATERIAL_CO2:
            errors.append(f"cosmetic_packaging_profiles: unknown material {profile.material!r} for {keyword!r}")
    return errors


def main() -> int:
    errors = collect_errors()
    for error in errors:
        print(f"[table-check] ERROR: {error}")
    if errors:
        return 1
    print("[table-check] OK")
    return 0


if __name__ == "__main__":
    sys.exit(main())
