"""Assemble stage outputs into a CarbonEstimate."""

from __future__ import annotations

from collections.abc import Iterable

from carbon_lens.estimation.types import Breakdown, CarbonEstimate, Confidence, EstimateKind

EXPLANATION_SEPARATOR = " • "
GENERIC_EXPLANATION = "General estimate"


def round_breakdown(production: float, packaging: float, transport: float) -> Breakdown:
    return Breakdown(
        production=round(max(production, 0.0), 3),
        packaging=round(max(packaging, 0.0), 3),
        transport=round(max(transport, 0.0), 3),
    )


def classify_confidence(
    matched: bool,
    ecoscore_grade: str | None = None,
    nova_group: int | None = None,
) -> Confidence:
    """Heuristic results are `medium` with any specific signal, otherwise `low`."""
    if matched or ecoscore_grade or nova_group:
        return "medium"
    return "low"


def build_explanation(parts: Iterable[str | None]) -> str:
    present = [part for part in parts if part]
    return EXPLANATION_SEPARATOR.join(present) if present else GENERIC_EXPLANATION


def aggregate(
    *,
    production: float,
    packaging: float,
    transport: float,
    mass_kg: float,
    matched: bool,
    explanation: str,
    kind: EstimateKind,
    ecoscore_grade: str | None = None,
    nova_group: int | None = None,
) -> CarbonEstimate:
    breakdown = round_breakdown(production, packaging, transport)
    value = round(breakdown.total, 3)
    return CarbonEstimate(
        value=value,
        value_per_kg=round(value / mass_kg, 2),
        confidence=classify_confidence(matched, ecoscore_grade, nova_group),
        source="category-matched" if matched else "generic-estimate",
        breakdown=breakdown,
        explanation=explanation,
        product_weight_kg=mass_kg,
        kind=kind,
    )
