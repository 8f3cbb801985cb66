"""Tests for water-content heuristics."""

from carbon_lens import Product
from carbon_lens.estimation.water import estimate_water_fraction


def test_water_first_ingredient_wins_over_category():
    product = Product(ingredients_text="water, sugar, carbon dioxide", categories="soda")

    assert estimate_water_fraction(product) == 0.85


def test_water_first_ingredient_french():
    product = Product(ingredients_text="  Eau minérale naturelle")

    assert estimate_water_fraction(product) == 0.85


def test_beverage_category_is_high_water():
    product = Product(ingredients_text="Sugar, water, flavouring", categories="Beverages, Sodas")

    assert estimate_water_fraction(product) == 0.80


def test_beverage_keyword_in_name():
    product = Product(name="Orange juice", categories="Breakfast")

    assert estimate_water_fraction(product) == 0.80


def test_semi_liquid_category_is_medium_water():
    product = Product(categories="Condiments, Sauces, Tomato sauces")

    assert estimate_water_fraction(product) == 0.50


def test_dry_food_defaults():
    product = Product(name="Butter biscuits", categories="Biscuits")

    assert estimate_water_fraction(product) == 0.30
