"""Application settings read from environment variables."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

logger = logging.getLogger(__name__)

# Resolve the default data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
PROJECT_ROOT = Path(__file__).resolve().parents[3]


def env_int(name: str, default: int) -> int:
    """Read a positive integer setting, falling back to *default* when unusable."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", name, raw, default)
        return default
    if value < 1:
        logger.warning("Ignoring %s=%r: must be at least 1, using %d", name, raw, default)
        return default
    return value


def env_data_dir() -> Path:
    configured = os.getenv("CATALOG_DATA_DIR")
    return Path(configured) if configured else PROJECT_ROOT / "data"


class Settings:
    DATA_DIR: Path = env_data_dir()

    LOW_STOCK_THRESHOLD: int = env_int("LOW_STOCK_THRESHOLD", 10)
    DEFAULT_PAGE_SIZE: int = env_int("DEFAULT_PAGE_SIZE", 10)

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL


settings = Settings()
