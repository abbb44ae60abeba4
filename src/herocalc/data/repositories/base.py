"""Base repository implementation for JSON definition data."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Generic, Hashable, List, TypeVar

from herocalc.data.errors import DataValidationError
from herocalc.data.json_loader import load_json_object
from herocalc.data import paths

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


class RepositoryBase(Generic[K, T]):
    """Common caching and loading behavior for repositories."""

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[K, T] | None = None

    def _get_file_path(self) -> Path:
        definitions_dir = paths.get_definitions_path(self._base_path)
        return definitions_dir / self._filename

    def _load_raw(self) -> dict[str, object]:
        return load_json_object(self._get_file_path())

    def _build(self, raw: dict[str, object]) -> Dict[K, T]:
        """Convert a raw dict into typed definitions."""
        raise NotImplementedError

    def _ensure_loaded(self) -> Dict[K, T]:
        if self._definitions is None:
            raw = self._load_raw()
            self._definitions = self._build(raw)
        return self._definitions

    def get(self, def_id: K) -> T:
        """Return a definition by id."""
        definitions = self._ensure_loaded()
        try:
            return definitions[def_id]
        except KeyError as exc:
            raise KeyError(def_id) from exc

    def all(self) -> list[T]:
        """Return all definitions sorted deterministically by id."""
        definitions = self._ensure_loaded()
        return [definitions[key] for key in sorted(definitions.keys())]

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be an object/dict.")
        return value

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_int(value: object, context: str) -> int:
        if not isinstance(value, int) or isinstance(value, bool):
            raise DataValidationError(f"{context} must be an integer.")
        return value

    @staticmethod
    def _require_list(value: object, context: str) -> List[object]:
        if not isinstance(value, list):
            raise DataValidationError(f"{context} must be a list.")
        return value

    @staticmethod
    def _require_literal(value: object, allowed: set[str], context: str) -> str:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        if value not in allowed:
            raise DataValidationError(f"{context} must be one of {sorted(allowed)}.")
        return value

    @staticmethod
    def _parse_rarity(value: object, context: str) -> int | None:
        """Parse a rarity gate; None, "-" and "" mean no gate."""
        if value is None or value in ("-", ""):
            return None
        if isinstance(value, str) and value.strip().isdigit():
            value = int(value)
        if not isinstance(value, int) or isinstance(value, bool) or not 1 <= value <= 5:
            raise DataValidationError(f"{context} must be a rarity from 1 to 5 or '-'.")
        return value

    @staticmethod
    def _assert_exact_fields(
        payload: dict[str, object],
        expected_keys: set[str],
        context: str,
        *,
        optional_fields: set[str] | None = None,
    ) -> None:
        actual_keys = set(payload.keys())
        optional = optional_fields or set()
        missing = expected_keys - actual_keys
        unknown = actual_keys - expected_keys - optional
        if missing or unknown:
            msg_parts = []
            if missing:
                msg_parts.append(f"missing fields: {sorted(missing)}")
            if unknown:
                msg_parts.append(f"unknown fields: {sorted(unknown)}")
            raise DataValidationError(f"{context} has schema issues ({'; '.join(msg_parts)}).")
