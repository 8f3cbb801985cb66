"""Tests for quantity parsing."""

import pytest

from carbon_lens.estimation.quantity import parse_mass_kg, parse_volume_ml


@pytest.mark.parametrize(
    ("quantity", "expected"),
    [
        ("6 x 500ml", 3.0),
        ("6x500 ml", 3.0),
        ("2.5kg", 2.5),
        ("500 g", 0.5),
        ("1,5 L", 1.5),
        ("1 litre", 1.0),
        ("33cl", 0.33),
        ("12 fl oz", 12 * 0.0296),
        ("16 oz", 16 * 0.0283),
        ("2 lbs", 2 * 0.453),
        ("100 kg", 100.0),
    ],
)
def test_parse_mass_kg(quantity, expected):
    assert parse_mass_kg(quantity) == pytest.approx(expected)


@pytest.mark.parametrize(
    "quantity",
    [
        "",
        "   ",
        "abc",
        "-5kg",
        "0 g",
        "150 kg",
        "1 gallon",
        None,
        "0.0000001 kg",
        "1" + "0" * 400 + " x 500ml",
        "9" * 5000 + " x 1g",
        "1" + "0" * 400 + " g",
    ],
)
def test_parse_mass_kg_falls_back_to_one_kilogram(quantity):
    assert parse_mass_kg(quantity) == 1.0


def test_parse_mass_kg_prefers_kilograms_over_grams():
    assert parse_mass_kg("1 kg (1000 g)") == pytest.approx(1.0)


def test_parse_mass_kg_zero_pack_count_falls_back():
    assert parse_mass_kg("0 x 500ml") == 1.0


@pytest.mark.parametrize(
    ("quantity", "expected"),
    [
        ("50 ml", 50.0),
        ("50ml", 50.0),
        ("200g", 200.0),
        ("1.7 fl oz", 1.7 * 29.6),
        ("0,5 l", 500.0),
        ("2 x 75ml", 150.0),
        ("25 cl", 250.0),
    ],
)
def test_parse_volume_ml(quantity, expected):
    assert parse_volume_ml(quantity) == pytest.approx(expected)


@pytest.mark.parametrize(
    "quantity",
    ["", "abc", "-5ml", "0 ml", "500 l", None, "0." + "0" * 320 + "1 ml", "1" + "0" * 400 + " x 50ml"],
)
def test_parse_volume_ml_falls_back_to_100_ml(quantity):
    assert parse_volume_ml(quantity) == 100.0


def test_parse_mass_kg_accepts_small_amounts():
    assert parse_mass_kg("0.01 g") == pytest.approx(1e-5)
