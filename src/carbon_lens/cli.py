"""Command-line interface for carbon-lens."""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from carbon_lens import __version__, estimate
from carbon_lens.config import Settings, resolve_user_country
from carbon_lens.exceptions import CarbonLensError, ProductDataError
from carbon_lens.report import EstimateReport, build_report
from carbon_lens.schema import Product

_OFF_KEYS = {"product", "status", "product_name", "code"}


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="carbon-lens",
        description="Estimate the carbon footprint of a product record",
    )
    parser.add_argument(
        "product",
        help="Path to a product JSON file or Open Food Facts response ('-' for stdin)",
    )
    parser.add_argument(
        "--country",
        help="Buyer country as ISO2 code (default: CARBON_LENS_USER_COUNTRY, then locale)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log estimation steps to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"carbon-lens {__version__}",
    )

    args = parser.parse_args(argv)
    settings = Settings.from_env()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        product = load_product(args.product)
    except CarbonLensError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    country = resolve_user_country(args.country, settings)
    report = build_report(product, estimate(product, user_country_code=country))

    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        _print_formatted(report)

    return 0


def load_product(path: str) -> Product:
    """Read a Product or an Open Food Facts payload from a file or stdin.

    Raises:
        ProductDataError: If the input cannot be read or parsed.
    """
    try:
        text = sys.stdin.read() if path == "-" else Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ProductDataError(f"Cannot read {path}: {exc}") from exc

    try:
        data = json.loads(text)
    except ValueError as exc:
        raise ProductDataError(f"Invalid JSON in {path}") from exc

    if not isinstance(data, dict):
        raise ProductDataError("Product payload must be a JSON object")
    if _OFF_KEYS & data.keys():
        return Product.from_off_payload(data)
    try:
        return Product.model_validate(data)
    except ValidationError as exc:
        raise ProductDataError(f"Invalid product record: {exc.error_count()} error(s)") from exc


def _print_formatted(report: EstimateReport) -> None:
    """Print report in human-readable format."""
    estimate_ = report.estimate
    breakdown = estimate_.breakdown
    print()
    print("  carbon-lens")
    print()

    fields = [
        ("Product", f"{report.name} ({report.brand})"),
        ("Barcode", report.barcode),
        ("Footprint", report.display_value),
        ("Intensity", report.display_per_kg),
        ("Rating", f"{report.rating.grade} - {report.rating.label}"),
        ("Confidence", f"{estimate_.confidence} ({estimate_.source})"),
        ("Production", f"{breakdown.production:.3f} kg"),
        ("Packaging", f"{breakdown.packaging:.3f} kg"),
        ("Transport", f"{breakdown.transport:.3f} kg"),
        ("Comparison", report.comparison),
        ("Why", estimate_.explanation),
    ]

    for label, value in fields:
        display = value if value else "-"
        print(f"  {label + ':':<14} {display}")

    print()


if __name__ == "__main__":
    sys.exit(main())
