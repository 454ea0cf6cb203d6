"""Runtime configuration sourced from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]

DATA_DIR_ENV = "IMS_DATA_DIR"
LOG_LEVEL_ENV = "IMS_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:

    data_dir: Path
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def inventory_path(self) -> Path:
        return self.data_dir / "inventory.json"


def load_settings() -> Settings:
    data_dir = os.getenv(DATA_DIR_ENV)
    return Settings(
        data_dir=Path(data_dir) if data_dir else _PROJECT_ROOT / "data",
        log_level=_log_level_from_env(),
    )


def _log_level_from_env() -> str:
    level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LOG_LEVELS:
        logger.warning(
            "Ignoring %s=%r (expected one of %s); using %s",
            LOG_LEVEL_ENV, level, ", ".join(LOG_LEVELS), DEFAULT_LOG_LEVEL,
        )
        return DEFAULT_LOG_LEVEL
    return level
