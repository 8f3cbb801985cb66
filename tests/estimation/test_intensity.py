"""Tests for carbon-intensity matching."""

import pytest

from carbon_lens import Product
from carbon_lens.estimation.intensity import (
    ecoscore_multiplier,
    match_cosmetic_intensity,
    match_food_intensity,
    normalize_grade,
    processing_multiplier,
)


def test_match_food_intensity_beef():
    match = match_food_intensity(Product(categories="Meats, Beef burgers"))

    assert match.keyword == "beef"
    assert match.intensity == 27.0
    assert match.matched is True


def test_match_food_intensity_table_order_beats_text_order():
    product = Product(ingredients_text="wheat flour, tomato, cheese")

    match = match_food_intensity(product)

    assert match.keyword == "cheese"


def test_match_food_intensity_specific_oil_first():
    match = match_food_intensity(Product(name="Extra virgin olive oil"))

    assert match.keyword == "olive oil"
    assert match.intensity == 4.0


def test_match_food_intensity_french_keyword():
    match = match_food_intensity(Product(categories="Produits laitiers, Fromages"))

    assert match.keyword == "fromage"


def test_match_food_intensity_requires_word_start():
    match = match_food_intensity(Product(name="Steak", categories="Meats"))

    assert match.keyword != "tea"
    assert match.matched is False


def test_match_food_intensity_default():
    match = match_food_intensity(Product(name="Mystery item", categories="Miscellaneous"))

    assert match.keyword == "general food"
    assert match.intensity == 2.0
    assert match.matched is False


@pytest.mark.parametrize(
    ("group", "expected"),
    [(1, 1.0), (2, 1.1), (3, 1.25), (4, 1.4), (None, 1.0), (7, 1.0)],
)
def test_processing_multiplier(group, expected):
    assert processing_multiplier(group) == expected


@pytest.mark.parametrize(
    ("grade", "expected"),
    [("a", 0.7), ("A", 0.7), ("b", 0.85), ("c", 1.0), ("d", 1.2), ("e", 1.5), ("unknown", 1.0), (None, 1.0)],
)
def test_ecoscore_multiplier(grade, expected):
    assert ecoscore_multiplier(grade) == expected


def test_normalize_grade_rejects_not_applicable():
    assert normalize_grade("not-applicable") is None
    assert normalize_grade(" B ") == "b"


def test_match_cosmetic_intensity_french_shampoo():
    match = match_cosmetic_intensity(Product(name="Shampooing doux", source="personal_care"))

    assert match.keyword == "shampooing"
    assert match.intensity == 2.8


def test_match_cosmetic_intensity_specific_before_generic():
    match = match_cosmetic_intensity(Product(categories="Body lotion", source="personal_care"))

    assert match.keyword == "body lotion"
    assert match.intensity == 3.2


def test_match_cosmetic_intensity_default():
    match = match_cosmetic_intensity(Product(name="Thing", source="personal_care"))

    assert match.keyword == "general beauty product"
    assert match.intensity == 4.0
    assert match.matched is False
