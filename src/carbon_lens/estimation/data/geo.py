"""Country tables and transport factors."""

# Country names (English, native and French spellings) to ISO2.
COUNTRY_NAMES: tuple[tuple[str, str], ...] = (
    ("france", "FR"),
    ("united kingdom", "GB"),
    ("royaume uni", "GB"),
    ("great britain", "GB"),
    ("uk", "GB"),
    ("england", "GB"),
    ("scotland", "GB"),
    ("germany", "DE"),
    ("deutschland", "DE"),
    ("allemagne", "DE"),
    ("spain", "ES"),
    ("españa", "ES"),
    ("espagne", "ES"),
    ("italy", "IT"),
    ("italia", "IT"),
    ("italie", "IT"),
    ("poland", "PL"),
    ("pologne", "PL"),
    ("netherlands", "NL"),
    ("holland", "NL"),
    ("pays bas", "NL"),
    ("belgium", "BE"),
    ("belgique", "BE"),
    ("switzerland", "CH"),
    ("suisse", "CH"),
    ("austria", "AT"),
    ("autriche", "AT"),
    ("portugal", "PT"),
    ("ireland", "IE"),
    ("irlande", "IE"),
    ("denmark", "DK"),
    ("danemark", "DK"),
    ("sweden", "SE"),
    ("suède", "SE"),
    ("united states", "US"),
    ("états unis", "US"),
    ("usa", "US"),
    ("america", "US"),
    ("canada", "CA"),
    ("mexico", "MX"),
    ("china", "CN"),
    ("chine", "CN"),
    ("india", "IN"),
    ("inde", "IN"),
    ("japan", "JP"),
    ("japon", "JP"),
    ("brazil", "BR"),
    ("brésil", "BR"),
    ("australia", "AU"),
    ("australie", "AU"),
    ("new zealand", "NZ"),
    ("nouvelle zélande", "NZ"),
)

EUROPE: frozenset[str] = frozenset(
    {
        "FR",
        "GB",
        "DE",
        "ES",
        "IT",
        "PL",
        "NL",
        "BE",
        "CH",
        "AT",
        "PT",
        "IE",
        "DK",
        "SE",
    }
)

# Keyword fallback when origin and destination cannot both be resolved.
LOCAL_KEYWORDS: tuple[str, ...] = (
    "local",
    "france",
    "deutschland",
    "uk",
    "usa",
    "domestic",
)

EUROPEAN_KEYWORDS: tuple[str, ...] = (
    "europe",
    "eu",
    "italy",
    "spain",
    "germany",
    "poland",
    "netherlands",
)

OVERSEAS_KEYWORDS: tuple[str, ...] = (
    "asia",
    "china",
    "india",
    "america",
    "brazil",
    "australia",
    "fiji",
    "new zealand",
)

# kg CO2e per kg of goods per km.
TRANSPORT_CO2_PER_KG_KM: dict[str, float] = {
    "truck": 0.0001,
    "ship": 0.00001,
}

SAME_COUNTRY_KM = 200
INTRA_EUROPE_KM = 1200
OVERSEAS_KM = 8000
LOCAL_KEYWORD_KM = 300
EUROPEAN_KEYWORD_KM = 1000
REGIONAL_DEFAULT_KM = 500
