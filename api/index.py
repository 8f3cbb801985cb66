import logging
from pathlib import Path
import sys
from typing import Any

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

# Ensure local src package is importable in serverless runtime.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from carbon_lens import Product, estimate  # noqa: E402
from carbon_lens.config import Settings, resolve_user_country  # noqa: E402
from carbon_lens.exceptions import ProductDataError  # noqa: E402
from carbon_lens.report import EstimateReport, build_report  # noqa: E402

SETTINGS = Settings.from_env()
app = FastAPI(title="carbon-lens API", version="1.0.0")
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(SETTINGS.frontend_origins),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}


class OffEstimateRequest(BaseModel):
    payload: dict[str, Any]
    source: str | None = None


def _estimate_report(product: Product, user_country_code: str | None) -> EstimateReport:
    country = resolve_user_country(user_country_code, SETTINGS, use_locale=False)
    try:
        result = estimate(product, user_country_code=country)
    except Exception as exc:
        logger.exception("estimate failed for %s", product.barcode)
        raise HTTPException(status_code=500, detail="internal_error") from exc
    return build_report(product, result)


@app.post("/estimate", response_model=EstimateReport)
def estimate_product(
    product: Product,
    user_country_code: str | None = Query(default=None, alias="userCountryCode"),
) -> EstimateReport:
    return _estimate_report(product, user_country_code)


@app.post("/estimate/off", response_model=EstimateReport)
def estimate_off_product(
    body: OffEstimateRequest,
    user_country_code: str | None = Query(default=None, alias="userCountryCode"),
) -> EstimateReport:
    if body.source is not None and body.source not in {"food", "personal_care"}:
        raise HTTPException(status_code=400, detail=f"invalid source: {body.source}")
    try:
        product = Product.from_off_payload(body.payload, source=body.source)
    except ProductDataError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _estimate_report(product, user_country_code)
