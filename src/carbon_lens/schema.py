"""Data models for carbon-lens."""

from __future__ import annotations

from typing import Any, Literal
from urllib.parse import urlparse

from pydantic import BaseModel

from carbon_lens.exceptions import ProductDataError

ProductSource = Literal["food", "personal_care"]

_FOOD_MARKER = "openfoodfacts"
_BEAUTY_MARKER = "openbeautyfacts"
_FOUND_STATUSES = (1, "1", "success", "success_with_warnings")


class Product(BaseModel):
    """Product metadata as returned by the open product database lookup."""

    barcode: str = ""
    name: str = "Unknown Product"
    brand: str = "Unknown Brand"
    image_url: str | None = None
    quantity: str | None = None
    categories: str | None = None
    ingredients_text: str | None = None
    packaging: str | None = None
    nutriscore_grade: str | None = None
    ecoscore_grade: str | None = None
    nova_group: int | None = None
    source: ProductSource = "food"
    raw: dict[str, Any] | None = None

    @property
    def is_personal_care(self) -> bool:
        return self.source == "personal_care"

    @classmethod
    def from_off_payload(
        cls,
        payload: dict[str, Any],
        *,
        barcode: str | None = None,
        source: ProductSource | None = None,
    ) -> "Product":
        """Build a Product from an Open Food Facts / Open Beauty Facts record.

        Accepts either the v2 API response (``{"status": 1, "product": {...}}``)
        or the bare product dict.

        Raises:
            ProductDataError: If the payload reports a missing product.
        """
        if not isinstance(payload, dict):
            raise ProductDataError("Product payload must be a JSON object")

        if "product" in payload or "status" in payload:
            if payload.get("status") not in _FOUND_STATUSES or not isinstance(payload.get("product"), dict):
                raise ProductDataError("Product not found")
            product = payload["product"]
            code = barcode or payload.get("code") or product.get("code") or ""
        else:
            product = payload
            code = barcode or product.get("code") or ""

        return cls(
            barcode=str(code),
            name=_first_text(product, "product_name", "product_name_en") or "Unknown Product",
            brand=_first_text(product, "brands") or "Unknown Brand",
            image_url=_first_text(product, "image_url", "image_front_url", "image_front_small_url"),
            quantity=_optional_text(product.get("quantity")),
            categories=_optional_text(product.get("categories")),
            ingredients_text=_first_text(product, "ingredients_text", "ingredients_text_en"),
            packaging=_optional_text(product.get("packaging")),
            nutriscore_grade=_optional_text(product.get("nutriscore_grade")),
            ecoscore_grade=_optional_text(product.get("ecoscore_grade")),
            nova_group=_parse_nova_group(product.get("nova_group")),
            source=source or _infer_source(payload, product),
            raw=product,
        )


def _first_text(product: dict[str, Any], *keys: str) -> str | None:
    for key in keys:
        text = _optional_text(product.get(key))
        if text:
            return text
    return None


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_nova_group(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        group = int(str(value).strip())
    except ValueError:
        return None
    return group if 1 <= group <= 4 else None


def _infer_source(payload: dict[str, Any], product: dict[str, Any]) -> ProductSource:
    """Read the database of origin from source hints, then the product URL host."""
    hints = [payload.get("source"), product.get("source"), product.get("_source")]
    url = product.get("url")
    if isinstance(url, str):
        hints.append(urlparse(url if "//" in url else "//" + url).netloc)

    for hint in hints:
        if not isinstance(hint, str):
            continue
        value = hint.strip().lower()
        if value == "personal_care" or _BEAUTY_MARKER in value:
            return "personal_care"
        if value == "food" or _FOOD_MARKER in value:
            return "food"
    return "food"
