import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from kitchen_scaler.core.logging_config import LOG_LEVEL_ENV, get_logger

logger = get_logger(__name__)

ENV_PREFIX = "KITCHEN_SCALER_"


@dataclass(frozen=True)
class Settings:
    max_yield: float = 10000.0
    density_store_path: str = "data/custom_densities.json"
    log_level: str = "INFO"


def _as_float(value: Any, default: float) -> float:
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return default
    return default


def _as_str(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _config_path() -> Path:
    return Path(__file__).resolve().parents[2] / "config" / "settings.json"


def _read_config_file(config_path: Path) -> Dict[str, Any]:
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as exc:
        logger.warning(f"Invalid settings JSON at {config_path}: {exc}")
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Settings at {config_path} must be a JSON object, ignoring")
        return {}
    return data


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from the JSON config file, then apply environment overrides."""
    load_dotenv(".env")
    data = _read_config_file(path or _config_path())
    defaults = Settings()

    max_yield = _as_float(data.get("max_yield"), defaults.max_yield)
    density_store_path = _as_str(data.get("density_store_path"), defaults.density_store_path)
    log_level = _as_str(data.get("log_level"), defaults.log_level)

    max_yield = _as_float(os.getenv(f"{ENV_PREFIX}MAX_YIELD"), max_yield)
    density_store_path = _as_str(os.getenv(f"{ENV_PREFIX}DENSITY_PATH"), density_store_path)
    log_level = _as_str(os.getenv(LOG_LEVEL_ENV), log_level)

    if max_yield <= 0:
        logger.warning(f"max_yield must be positive, got {max_yield}; using {defaults.max_yield}")
        max_yield = defaults.max_yield

    return Settings(
        max_yield=max_yield,
        density_store_path=density_store_path,
        log_level=log_level.upper()
    )


settings = load_settings()
