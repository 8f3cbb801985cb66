"""Data models for estimation output."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Confidence = Literal["high", "medium", "low"]
EstimateSource = Literal["authoritative", "category-matched", "generic-estimate"]
EstimateKind = Literal["food", "cosmetic"]
Grade = Literal["A", "B", "C", "D", "E"]
TransportMode = Literal["truck", "ship"]


class Breakdown(BaseModel):
    """CO2e split of a single estimate, in kg CO2e for the unit as sold."""

    model_config = ConfigDict(frozen=True)

    production: float = Field(ge=0.0)
    packaging: float = Field(ge=0.0)
    transport: float = Field(ge=0.0)

    @property
    def total(self) -> float:
        return self.production + self.packaging + self.transport


class CarbonEstimate(BaseModel):
    """Carbon footprint estimate for one product."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(ge=0.0)
    value_per_kg: float = Field(ge=0.0)
    confidence: Confidence
    source: EstimateSource
    breakdown: Breakdown
    explanation: str
    product_weight_kg: float = Field(gt=0.0, le=100.0)
    kind: EstimateKind = "food"


class CarbonRating(BaseModel):
    """Consumer-facing letter rating derived from an estimate."""

    model_config = ConfigDict(frozen=True)

    grade: Grade
    label: str
    color: str
