"""Transport distance, mode and emissions."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Literal

from carbon_lens.estimation.data.geo import (
    COUNTRY_NAMES,
    EUROPE,
    EUROPEAN_KEYWORD_KM,
    EUROPEAN_KEYWORDS,
    INTRA_EUROPE_KM,
    LOCAL_KEYWORD_KM,
    LOCAL_KEYWORDS,
    OVERSEAS_KEYWORDS,
    OVERSEAS_KM,
    REGIONAL_DEFAULT_KM,
    SAME_COUNTRY_KM,
    TRANSPORT_CO2_PER_KG_KM,
)
from carbon_lens.estimation.text import first_keyword, first_match, normalize_text
from carbon_lens.estimation.types import TransportMode
from carbon_lens.schema import Product

logger = logging.getLogger(__name__)

RouteBasis = Literal[
    "same_country",
    "intra_europe",
    "overseas",
    "local_keyword",
    "european_keyword",
    "overseas_keyword",
    "regional_default",
]

_ISO2 = re.compile(r"^[a-z]{2}$")
_COUNTRY_LOOKUP = dict(COUNTRY_NAMES)


@dataclass(frozen=True)
class TransportRoute:
    distance_km: float
    mode: TransportMode
    basis: RouteBasis
    origin: str | None = None
    destination: str | None = None


def normalize_country_code(code: str | None) -> str | None:
    """Return an upper-case ISO2 code, or None for anything that is not two letters."""
    if not isinstance(code, str):
        return None
    value = code.strip().lower()
    return value.upper() if _ISO2.match(value) else None


def infer_origin_iso2(product: Product) -> str | None:
    """Guess the producing country from tags, then origin text, then sold-in countries."""
    raw = product.raw or {}

    for tag in [*_as_list(raw.get("origins_tags")), *_as_list(raw.get("countries_tags"))]:
        token = normalize_text(str(tag)).rsplit(":", 1)[-1].strip()
        if token in _COUNTRY_LOOKUP:
            return _COUNTRY_LOOKUP[token]
        code = normalize_country_code(token)
        if code:
            return code

    origin_text = normalize_text(
        " ".join(_as_text(raw.get(key)) for key in ("origins", "manufacturing_places", "origin"))
    )
    hit = first_match(origin_text, COUNTRY_NAMES, whole_word=True)
    if hit:
        return hit[1]

    hit = first_match(normalize_text(_as_text(raw.get("countries"))), COUNTRY_NAMES, whole_word=True)
    if hit:
        return hit[1]
    return None


def plan_route(product: Product, user_country: str | None) -> TransportRoute:
    origin = infer_origin_iso2(product)
    destination = normalize_country_code(user_country)

    if origin and destination:
        if origin == destination:
            return TransportRoute(SAME_COUNTRY_KM, "truck", "same_country", origin, destination)
        if origin in EUROPE and destination in EUROPE:
            return TransportRoute(INTRA_EUROPE_KM, "truck", "intra_europe", origin, destination)
        return TransportRoute(OVERSEAS_KM, "ship", "overseas", origin, destination)

    # Only one end known: the keyword heuristic takes over even if a country resolved.
    logger.debug(
        "transport keyword fallback (origin=%s, destination=%s, origins=%r)",
        origin,
        destination,
        _fallback_origin_text(product),
    )
    text = normalize_text(_fallback_origin_text(product))
    if first_keyword(text, LOCAL_KEYWORDS, whole_word=True):
        return TransportRoute(LOCAL_KEYWORD_KM, "truck", "local_keyword", origin, destination)
    if first_keyword(text, EUROPEAN_KEYWORDS, whole_word=True):
        return TransportRoute(EUROPEAN_KEYWORD_KM, "truck", "european_keyword", origin, destination)
    if first_keyword(text, OVERSEAS_KEYWORDS, whole_word=True):
        return TransportRoute(OVERSEAS_KM, "ship", "overseas_keyword", origin, destination)
    return TransportRoute(REGIONAL_DEFAULT_KM, "truck", "regional_default", origin, destination)


def estimate_transport(
    product: Product,
    mass_kg: float,
    user_country: str | None = None,
) -> tuple[float, TransportRoute]:
    """Return transport kg CO2e for ``mass_kg`` of goods and the route used."""
    route = plan_route(product, user_country)
    co2 = mass_kg * route.distance_km * TRANSPORT_CO2_PER_KG_KM[route.mode]
    return co2, route


def _fallback_origin_text(product: Product) -> str:
    raw = product.raw or {}
    for key in ("origins", "origin", "manufacturing_places", "countries"):
        value = _as_text(raw.get(key))
        if value:
            return value
    return ""


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(str(item) for item in value)
    return str(value)
