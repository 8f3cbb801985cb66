"""Food tables: water signals, ingredient intensities, packaging materials."""

WATER_LEADING_TOKENS: tuple[str, ...] = ("water", "aqua", "eau")

# Beverages and liquid foods (70-95% water).
HIGH_WATER_KEYWORDS: tuple[str, ...] = (
    "water",
    "aqua",
    "eau",
    "soda",
    "soft drink",
    "juice",
    "jus",
    "milk",
    "beer",
    "beverage",
    "drink",
    "boisson",
    "getränk",
    "soup",
    "soupe",
    "broth",
    "bouillon",
    "stock",
    "yogurt",
    "yoghurt",
    "yaourt",
)

# Semi-liquid foods (30-70% water).
MEDIUM_WATER_KEYWORDS: tuple[str, ...] = (
    "sauce",
    "ketchup",
    "mayonnaise",
    "dressing",
    "cream",
    "crème",
    "gelato",
    "pudding",
    "custard",
    "mousse",
    "jam",
    "confiture",
    "jelly",
    "compote",
    "puree",
    "purée",
    "fruit",
    "vegetable",
    "légume",
)

BEVERAGE_KEYWORDS: tuple[str, ...] = (
    "beverage",
    "drink",
    "water",
    "juice",
    "soda",
    "boisson",
)

# kg CO2e per kg of raw ingredient, before processing.
FOOD_INTENSITY: tuple[tuple[str, float], ...] = (
    # Animal products
    ("beef", 27.0),
    ("boeuf", 27.0),
    ("bœuf", 27.0),
    ("lamb", 24.0),
    ("agneau", 24.0),
    ("cheese", 13.5),
    ("fromage", 13.5),
    ("pork", 7.6),
    ("porc", 7.6),
    ("poultry", 6.9),
    ("chicken", 6.9),
    ("poulet", 6.9),
    ("fish", 6.0),
    ("poisson", 6.0),
    ("seafood", 6.0),
    ("eggs", 4.8),
    ("oeufs", 4.8),
    ("œufs", 4.8),
    ("butter", 9.0),
    ("beurre", 9.0),
    ("cream", 5.0),
    ("crème", 5.0),
    ("milk", 3.2),
    ("lait", 3.2),
    ("dairy", 3.5),
    ("yogurt", 2.5),
    ("yaourt", 2.5),
    # Plant proteins
    ("tofu", 2.0),
    ("legumes", 0.9),
    ("légumes secs", 0.9),
    ("beans", 0.8),
    ("haricots", 0.8),
    ("lentils", 0.9),
    ("lentilles", 0.9),
    ("peanut", 1.8),
    ("cacahuète", 1.8),
    ("nuts", 2.3),
    ("noix", 2.3),
    # Grains
    ("rice", 2.7),
    ("riz", 2.7),
    ("pasta", 1.3),
    ("pâtes", 1.3),
    ("bread", 1.4),
    ("pain", 1.4),
    ("cereals", 1.2),
    ("céréales", 1.2),
    ("flour", 1.1),
    ("farine", 1.1),
    ("wheat", 1.0),
    ("blé", 1.0),
    ("oats", 0.9),
    ("avoine", 0.9),
    # Fruits and vegetables
    ("vegetables", 0.5),
    ("légumes", 0.5),
    ("fruits", 0.7),
    ("potatoes", 0.3),
    ("pommes de terre", 0.3),
    ("tomatoes", 1.4),
    ("tomates", 1.4),
    ("salad", 0.4),
    ("apple", 0.4),
    ("pomme", 0.4),
    ("banana", 0.7),
    ("banane", 0.7),
    ("orange", 0.5),
    ("berries", 1.1),
    # Beverage ingredients (concentrates, not water)
    ("coffee", 8.0),
    ("café", 8.0),
    ("tea", 1.0),
    ("thé", 1.0),
    ("cocoa", 4.5),
    ("cacao", 4.5),
    ("chocolate", 4.6),
    ("chocolat", 4.6),
    # Oils
    ("olive oil", 4.0),
    ("huile d'olive", 4.0),
    ("palm oil", 7.6),
    ("huile de palme", 7.6),
    ("sunflower", 2.5),
    ("tournesol", 2.5),
    ("rapeseed", 2.0),
    ("colza", 2.0),
    ("oil", 3.5),
    ("huile", 3.5),
    # Sweeteners
    ("sugar", 1.2),
    ("sucre", 1.2),
    ("honey", 1.5),
    ("miel", 1.5),
    # Other
    ("salt", 0.2),
    ("sel", 0.2),
    ("spices", 1.0),
    ("épices", 1.0),
)

DEFAULT_FOOD_INTENSITY = 2.0

NOVA_MULTIPLIERS: dict[int, float] = {
    1: 1.0,
    2: 1.1,
    3: 1.25,
    4: 1.4,
}

ECOSCORE_MULTIPLIERS: dict[str, float] = {
    "a": 0.7,
    "b": 0.85,
    "c": 1.0,
    "d": 1.2,
    "e": 1.5,
}

# kg CO2e per kg of packaging material.
FOOD_PACKAGING_MATERIALS: tuple[tuple[str, float], ...] = (
    ("glass", 0.85),
    ("verre", 0.85),
    ("plastic", 2.0),
    ("plastique", 2.0),
    ("pet", 2.5),
    ("hdpe", 1.8),
    ("pp", 1.9),
    ("aluminum", 8.0),
    ("aluminium", 8.0),
    ("metal", 2.5),
    ("tin", 2.5),
    ("steel", 1.8),
    ("cardboard", 0.8),
    ("carton", 0.8),
    ("paper", 0.7),
    ("papier", 0.7),
    ("tetra", 1.2),
    ("composite", 1.5),
)

DEFAULT_PACKAGING_MATERIAL = "composite"
DEFAULT_PACKAGING_CO2 = 1.5
