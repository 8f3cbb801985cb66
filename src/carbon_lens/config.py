"""Environment-driven settings for the CLI and HTTP service."""

from __future__ import annotations

import os
from dataclasses import dataclass

from carbon_lens.estimation.transport import normalize_country_code

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Settings:
    default_user_country: str | None = None
    log_level: str = "WARNING"
    frontend_origins: tuple[str, ...] = ("*",)

    @classmethod
    def from_env(cls) -> "Settings":
        level = os.getenv("CARBON_LENS_LOG_LEVEL", "WARNING").strip().upper()
        raw_origins = os.getenv("FRONTEND_ORIGINS", "*")
        origins = tuple(origin.strip() for origin in raw_origins.split(",") if origin.strip())
        return cls(
            default_user_country=normalize_country_code(os.getenv("CARBON_LENS_USER_COUNTRY")),
            log_level=level if level in _LOG_LEVELS else "WARNING",
            frontend_origins=origins or ("*",),
        )


def country_from_locale(tag: str | None) -> str | None:
    """Extract the region of a locale tag such as ``fr_FR.UTF-8`` or ``fr-FR``."""
    if not tag:
        return None
    base = tag.split(".", 1)[0].split("@", 1)[0]
    parts = base.replace("-", "_").split("_")
    if len(parts) < 2:
        return None
    return normalize_country_code(parts[1])


def resolve_user_country(
    explicit: str | None = None,
    settings: Settings | None = None,
    *,
    use_locale: bool = True,
) -> str | None:
    """Pick the buyer country: explicit code, configured default, then the process locale."""
    code = normalize_country_code(explicit)
    if code:
        return code
    settings = settings or Settings.from_env()
    if settings.default_user_country:
        return settings.default_user_country
    if not use_locale:
        return None
    for name in ("LC_ALL", "LANG"):
        code = country_from_locale(os.getenv(name))
        if code:
            return code
    return None
