import json
import math
import os
from typing import Dict, Mapping
from kitchen_scaler.core.densities import BUILTIN_DENSITIES, build_density_table
from kitchen_scaler.core.logging_config import get_logger
from kitchen_scaler.core.settings import settings

logger = get_logger(__name__)


class DensityValidationError(Exception):
    def __init__(self, error_code: str, message: str, status_code: int = 400):
        super().__init__(message)
        self.error_code = error_code
        self.message = message
        self.status_code = status_code


class DensityStore:
    """User-defined densities (g/ml) persisted as a flat JSON object."""

    def __init__(self, path: str = settings.density_store_path):
        self.path = path

    def load(self) -> Dict[str, float]:
        """Read the custom densities fresh from disk; invalid entries are skipped."""
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning(f"Could not read custom densities from {self.path}: {exc}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Custom densities at {self.path} are not a JSON object, ignoring")
            return {}

        densities = {}
        for name, value in data.items():
            key = str(name).strip().lower()
            if key and _is_valid_density(value):
                densities[key] = float(value)
            else:
                logger.warning(f"Skipping invalid custom density entry: {name!r}={value!r}")
        return densities

    def merged(self) -> Mapping[str, float]:
        return build_density_table(self.load())

    def add(self, name: str, grams_per_ml: float) -> Dict[str, float]:
        key = (name or "").strip().lower()
        if not key:
            raise DensityValidationError("EMPTY_DENSITY_NAME", "Please enter an ingredient name.")
        if not _is_valid_density(grams_per_ml):
            raise DensityValidationError(
                "INVALID_DENSITY", f"Please enter a valid density (g/ml), got {grams_per_ml}."
            )
        if key in BUILTIN_DENSITIES:
            raise DensityValidationError(
                "BUILTIN_DENSITY_CONFLICT", f"'{key}' already exists in the built-in database."
            )

        densities = self.load()
        densities[key] = float(grams_per_ml)
        self._save(densities)
        logger.info(f"Saved custom density {key}={grams_per_ml} g/ml")
        return densities

    def remove(self, name: str) -> Dict[str, float]:
        key = (name or "").strip().lower()
        densities = self.load()
        if key not in densities:
            raise DensityValidationError(
                "DENSITY_NOT_FOUND", f"No custom density named '{key}'.", status_code=404
            )
        del densities[key]
        self._save(densities)
        logger.info(f"Deleted custom density {key}")
        return densities

    def _save(self, densities: Dict[str, float]) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as handle:
            json.dump(densities, handle, indent=2, sort_keys=True)


def _is_valid_density(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


density_store = DensityStore()
