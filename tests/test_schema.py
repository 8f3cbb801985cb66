"""Tests for schema models."""

import pytest

from carbon_lens import Product
from carbon_lens.exceptions import ProductDataError


def _off_response(**product):
    return {"code": "3017620422003", "status": 1, "product": product}


def test_product_defaults():
    """Product with no data should work."""
    product = Product()
    assert product.barcode == ""
    assert product.name == "Unknown Product"
    assert product.brand == "Unknown Brand"
    assert product.source == "food"
    assert product.is_personal_care is False


def test_product_rejects_unknown_source():
    with pytest.raises(ValueError):
        Product(source="electronics")


def test_from_off_payload_v2_response():
    """A found v2 response should map the product fields."""
    payload = _off_response(
        product_name="Nutella",
        brands="Ferrero",
        quantity="400 g",
        categories="Spreads, Sweet spreads",
        ingredients_text="Sugar, palm oil, hazelnuts",
        packaging="Glass jar",
        nutriscore_grade="e",
        ecoscore_grade="d",
        nova_group=4,
    )

    product = Product.from_off_payload(payload)

    assert product.barcode == "3017620422003"
    assert product.name == "Nutella"
    assert product.brand == "Ferrero"
    assert product.quantity == "400 g"
    assert product.nova_group == 4
    assert product.ecoscore_grade == "d"
    assert product.source == "food"
    assert product.raw == payload["product"]


def test_from_off_payload_bare_product():
    product = Product.from_off_payload({"code": "123", "product_name_en": "Oat drink"}, barcode="999")

    assert product.barcode == "999"
    assert product.name == "Oat drink"


def test_from_off_payload_falls_back_to_placeholders():
    product = Product.from_off_payload(_off_response(product_name="  ", brands=None))

    assert product.name == "Unknown Product"
    assert product.brand == "Unknown Brand"


def test_from_off_payload_stringifies_values():
    product = Product.from_off_payload(_off_response(brands=1664, quantity=330))

    assert product.brand == "1664"
    assert product.quantity == "330"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(4, 4), ("2", 2), (9, None), ("unknown", None), (True, None), (None, None)],
)
def test_from_off_payload_nova_group(value, expected):
    product = Product.from_off_payload(_off_response(nova_group=value))

    assert product.nova_group == expected


def test_from_off_payload_not_found():
    """A not-found response should raise ProductDataError."""
    with pytest.raises(ProductDataError):
        Product.from_off_payload({"status": 0, "status_verbose": "product not found"})


def test_from_off_payload_rejects_non_object():
    with pytest.raises(ProductDataError):
        Product.from_off_payload(["not", "a", "product"])


def test_from_off_payload_infers_personal_care():
    payload = _off_response(
        product_name="Shampooing doux",
        url="https://world.openbeautyfacts.org/product/3600523614455",
    )

    product = Product.from_off_payload(payload)

    assert product.source == "personal_care"
    assert product.is_personal_care is True


def test_from_off_payload_explicit_source_wins():
    product = Product.from_off_payload(_off_response(product_name="Lip balm"), source="personal_care")

    assert product.source == "personal_care"


def test_from_off_payload_food_url_mentioning_beauty():
    """A food product slug containing 'beauty' stays on the food path."""
    payload = _off_response(
        product_name="Beauty Sleep herbal tea",
        url="https://world.openfoodfacts.org/product/123/beauty-sleep-herbal-tea",
    )

    product = Product.from_off_payload(payload)

    assert product.source == "food"


def test_from_off_payload_source_hint():
    payload = _off_response(product_name="Savon", _source="openbeautyfacts")

    assert Product.from_off_payload(payload).source == "personal_care"
