import logging
import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.rules.loader import load_rules
from src.rules.models import Rules

DEFAULT_LOG_LEVEL = "INFO"


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(os.environ.get("FLUID_RULES_PATH", self.base_dir / "rules.yaml"))

        # unknown names fall back to the default so logging.basicConfig cannot fail
        level = os.environ.get("FLUID_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        self.invalid_log_level: str | None = None
        if level not in logging.getLevelNamesMapping():
            self.invalid_log_level = level
            level = DEFAULT_LOG_LEVEL
        self.log_level = level


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return load_rules(settings.rules_path)
