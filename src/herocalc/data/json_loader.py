"""Low-level JSON helpers for the definition repositories."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import DataLoadError, DataValidationError


def load_json(path: Path) -> object:
    """Load a definitions file, tolerating a UTF-8 byte order mark from exported data dumps."""
    try:
        text = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise DataLoadError(f"Definitions file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DataLoadError(f"Unable to read definitions file {path}: {exc}") from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"Invalid JSON in {path}: {exc}") from exc


def load_json_object(path: Path) -> dict[str, object]:
    """Load a definitions file whose top level must be an object keyed by name or type."""
    raw = load_json(path)
    if not isinstance(raw, dict):
        raise DataValidationError(f"Expected top-level object in {path}, got {type(raw).__name__}.")
    return raw
