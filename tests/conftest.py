"""Shared test fixtures for MaxDefense."""

import sys
from pathlib import Path

import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.maxdefense.armory.models import ArmorItem


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def sample_armors() -> list[ArmorItem]:
    """Three-item catalog where greedy and exhaustive disagree."""
    return [
        ArmorItem(description="A", cost=10, defense=60),
        ArmorItem(description="B", cost=20, defense=100),
        ArmorItem(description="C", cost=30, defense=120),
    ]


@pytest.fixture
def mixed_armors() -> list[ArmorItem]:
    """A larger catalog with assorted ratios, including a zero-defense item."""
    return [
        ArmorItem(description="dented iron helmet", cost=35, defense=60),
        ArmorItem(description="new enchanted helmet", cost=120, defense=410),
        ArmorItem(description="rusty chainmail", cost=80, defense=150),
        ArmorItem(description="cracked wooden shield", cost=15, defense=0),
        ArmorItem(description="blessed silver amulet", cost=95, defense=330),
        ArmorItem(description="mithril coif", cost=180, defense=640),
        ArmorItem(description="runed bracers", cost=75, defense=260),
        ArmorItem(description="worn traveler boots", cost=20, defense=35),
    ]


@pytest.fixture
def write_database(tmp_path):
    """Write database rows (after the header) to a temp file and return its path."""

    def _write(*rows: str, header: str = "description^cost_gold^defense_points") -> Path:
        path = tmp_path / "armor.csv"
        path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
        return path

    return _write
