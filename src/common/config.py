"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
DATA_DIR = PROJECT_ROOT / "data"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


class DatabaseSettings(BaseModel):
    """Location of the armor database file."""
    path: str = str(DATA_DIR / "armor.csv")

    @property
    def abs_path(self) -> Path:
        """Resolve database path relative to project root."""
        p = Path(self.path)
        if p.is_absolute():
            return p
        return PROJECT_ROOT / p


class FilterSettings(BaseModel):
    """Candidate filtering applied before optimization."""
    min_defense: float = 1.0
    max_defense: float = 2500.0
    total_size: int = Field(default=6, ge=0)


class OptimizerSettings(BaseModel):
    """Optimization defaults."""
    budget: float = Field(default=500.0, ge=0)
    method: str = "exhaustive"  # greedy | exhaustive | both


class Settings(BaseModel):
    """Top-level application settings."""
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    filter: FilterSettings = Field(default_factory=FilterSettings)
    optimizer: OptimizerSettings = Field(default_factory=OptimizerSettings)

    @classmethod
    def load(cls, settings_path: str | Path | None = None) -> Settings:
        """Load settings from config/settings.yaml, falling back to defaults.

        Environment variables override file values:
        MAXDEFENSE_DATABASE_PATH, MAXDEFENSE_BUDGET, MAXDEFENSE_METHOD.
        """
        path = Path(settings_path) if settings_path else CONFIG_DIR / "settings.yaml"
        data: dict = {}
        if path.exists():
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        return cls(**_apply_env_overrides(data))


def _apply_env_overrides(data: dict) -> dict:
    """Merge environment overrides into raw settings so both are validated alike."""
    merged = dict(data)
    database = merged["database"] = dict(merged.get("database") or {})
    optimizer = merged["optimizer"] = dict(merged.get("optimizer") or {})

    if db_path := os.getenv("MAXDEFENSE_DATABASE_PATH"):
        database["path"] = db_path
    if budget := os.getenv("MAXDEFENSE_BUDGET"):
        optimizer["budget"] = budget
    if method := os.getenv("MAXDEFENSE_METHOD"):
        optimizer["method"] = method
    return merged


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Shared settings instance, loaded on first use."""
    return Settings.load()
