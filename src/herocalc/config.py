"""Calculator settings persisted as JSON."""
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from herocalc.data.repositories.heroes_repo import DEFAULT_FALLBACK_HERO


@dataclass(frozen=True, slots=True)
class CalculatorSettings:
    """Where definitions live and how strictly the catalog is treated."""

    definitions_path: Path | None = None
    fallback_hero: str | None = DEFAULT_FALLBACK_HERO
    strict_restrictions: bool = False


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "HeroCalc"
        return Path.home() / "HeroCalc"
    return Path.home() / ".config" / "herocalc"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_path(value: object) -> Path | None:
    return Path(value) if isinstance(value, str) and value else None


def _normalize_fallback(value: object) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) and value else DEFAULT_FALLBACK_HERO


def load_settings(path: Path | None = None) -> CalculatorSettings:
    """Load settings from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return CalculatorSettings()
    if not isinstance(raw, dict):
        return CalculatorSettings()
    return CalculatorSettings(
        definitions_path=_normalize_path(raw.get("definitions_path")),
        fallback_hero=_normalize_fallback(raw.get("fallback_hero", DEFAULT_FALLBACK_HERO)),
        strict_restrictions=raw.get("strict_restrictions") is True,
    )


def save_settings(settings: CalculatorSettings, path: Path | None = None) -> None:
    """Persist settings to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "definitions_path": str(settings.definitions_path) if settings.definitions_path else None,
        "fallback_hero": settings.fallback_hero,
        "strict_restrictions": settings.strict_restrictions,
    }
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
