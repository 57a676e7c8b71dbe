"""Environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    db_path: str = "cat_calories.db"
    log_level: str = "WARNING"


def load_settings() -> Settings:
    return Settings(
        db_path=os.environ.get("CAT_CALORIES_DB_PATH", Settings.db_path),
        log_level=os.environ.get("CAT_CALORIES_LOG_LEVEL", Settings.log_level).upper(),
    )
