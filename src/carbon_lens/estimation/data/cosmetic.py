"""Personal-care tables: formulation intensities and packaging profiles."""

from __future__ import annotations

from dataclasses import dataclass

# kg CO2e per kg of formulation.
COSMETIC_INTENSITY: tuple[tuple[str, float], ...] = (
    # Fragrance
    ("eau de toilette", 10.0),
    ("perfume", 12.0),
    ("parfum", 12.0),
    ("fragrance", 12.0),
    # Make-up
    ("lipstick", 8.0),
    ("rouge à lèvres", 8.0),
    ("mascara", 7.5),
    ("foundation", 6.5),
    ("fond de teint", 6.5),
    ("nail polish", 7.0),
    ("vernis", 7.0),
    ("makeup", 6.0),
    ("maquillage", 6.0),
    # Hair care
    ("après shampooing", 3.0),
    ("conditioner", 3.0),
    ("shampooing", 2.8),
    ("shampoo", 2.8),
    ("hair oil", 3.5),
    ("hair spray", 6.0),
    ("laque", 6.0),
    ("hair dye", 5.5),
    ("coloration", 5.5),
    # Body care
    ("body lotion", 3.2),
    ("body wash", 2.5),
    ("gel douche", 2.5),
    ("shower gel", 2.5),
    ("deodorant", 3.5),
    ("déodorant", 3.5),
    ("soap", 1.8),
    ("savon", 1.8),
    # Skincare
    ("sunscreen", 4.2),
    ("solaire", 4.2),
    ("face wash", 3.5),
    ("cleanser", 3.5),
    ("moisturizer", 4.5),
    ("serum", 5.0),
    ("sérum", 5.0),
    ("toner", 3.0),
    ("tonique", 3.0),
    ("mask", 4.0),
    ("masque", 4.0),
    ("lotion", 3.8),
    ("cream", 4.5),
    ("crème", 4.5),
    # Oral care
    ("toothpaste", 2.0),
    ("dentifrice", 2.0),
    ("mouthwash", 1.8),
    ("bain de bouche", 1.8),
)

DEFAULT_COSMETIC_INTENSITY = 4.0


@dataclass(frozen=True)
class PackagingProfile:
    base_weight_kg: float
    per_ml_weight_kg: float
    material: str
    has_secondary_box: bool


COSMETIC_PACKAGING_PROFILES: tuple[tuple[str, PackagingProfile], ...] = (
    # Fragrances: heavy glass bottles
    ("eau de toilette", PackagingProfile(0.12, 0.0015, "glass", True)),
    ("perfume", PackagingProfile(0.15, 0.002, "glass", True)),
    ("parfum", PackagingProfile(0.15, 0.002, "glass", True)),
    ("fragrance", PackagingProfile(0.15, 0.002, "glass", True)),
    # Small cosmetics: a lot of packaging per gram
    ("lipstick", PackagingProfile(0.025, 0.002, "plastic", True)),
    ("rouge à lèvres", PackagingProfile(0.025, 0.002, "plastic", True)),
    ("mascara", PackagingProfile(0.02, 0.002, "plastic", True)),
    ("foundation", PackagingProfile(0.04, 0.001, "glass", True)),
    ("fond de teint", PackagingProfile(0.04, 0.001, "glass", True)),
    ("nail polish", PackagingProfile(0.03, 0.002, "glass", True)),
    ("vernis", PackagingProfile(0.03, 0.002, "glass", True)),
    # Aerosols
    ("deodorant", PackagingProfile(0.06, 0.0003, "aluminum", False)),
    ("déodorant", PackagingProfile(0.06, 0.0003, "aluminum", False)),
    ("hair spray", PackagingProfile(0.08, 0.0003, "aluminum", False)),
    ("laque", PackagingProfile(0.08, 0.0003, "aluminum", False)),
    # Plastic bottles
    ("après shampooing", PackagingProfile(0.025, 0.0001, "plastic", False)),
    ("shampoo", PackagingProfile(0.025, 0.0001, "plastic", False)),
    ("conditioner", PackagingProfile(0.025, 0.0001, "plastic", False)),
    ("body wash", PackagingProfile(0.025, 0.0001, "plastic", False)),
    ("shower gel", PackagingProfile(0.025, 0.0001, "plastic", False)),
    ("gel douche", PackagingProfile(0.025, 0.0001, "plastic", False)),
    # Pump bottles
    ("body lotion", PackagingProfile(0.04, 0.0002, "plastic", False)),
    ("cleanser", PackagingProfile(0.03, 0.0003, "plastic", False)),
    # Tubes
    ("sunscreen", PackagingProfile(0.015, 0.0002, "plastic", True)),
    ("solaire", PackagingProfile(0.015, 0.0002, "plastic", True)),
    ("toothpaste", PackagingProfile(0.012, 0.0001, "plastic", True)),
    ("dentifrice", PackagingProfile(0.012, 0.0001, "plastic", True)),
    ("face wash", PackagingProfile(0.015, 0.0002, "plastic", False)),
    # Glass jars
    ("moisturizer", PackagingProfile(0.08, 0.001, "glass", True)),
    ("serum", PackagingProfile(0.05, 0.0008, "glass", True)),
    ("sérum", PackagingProfile(0.05, 0.0008, "glass", True)),
    ("mask", PackagingProfile(0.06, 0.001, "glass", True)),
    ("masque", PackagingProfile(0.06, 0.001, "glass", True)),
    ("cream", PackagingProfile(0.08, 0.001, "glass", True)),
    ("crème", PackagingProfile(0.08, 0.001, "glass", True)),
    ("lotion", PackagingProfile(0.04, 0.0003, "plastic", False)),
    # Solid products
    ("soap", PackagingProfile(0.005, 0.0, "paper", False)),
    ("savon", PackagingProfile(0.005, 0.0, "paper", False)),
)

DEFAULT_COSMETIC_PACKAGING = PackagingProfile(0.03, 0.0003, "plastic", False)

# kg CO2e per kg of packaging material.
COSMETIC_PACKAGING_MATERIAL_CO2: dict[str, float] = {
    "glass": 0.85,
    "plastic": 2.0,
    "aluminum": 8.0,
    "paper": 0.7,
    "cardboard": 0.8,
}

# Material overrides named in the free-text packaging field.
COSMETIC_MATERIAL_OVERRIDES: tuple[tuple[str, str], ...] = (
    ("glass", "glass"),
    ("verre", "glass"),
    ("plastic", "plastic"),
    ("plastique", "plastic"),
    ("alumin", "aluminum"),
)

SECONDARY_BOX_WEIGHT_KG = 0.02
SECONDARY_BOX_MATERIAL = "cardboard"
