"""Tests for the armory module (models, loader, filter)."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from src.maxdefense.armory.filters import filter_armor_vector
from src.maxdefense.armory.loader import load_armor_database
from src.maxdefense.armory.models import ArmorItem
from src.maxdefense.errors import ArmorDatabaseError, MaxDefenseError


class TestArmorItem:
    """Test ArmorItem model."""

    def test_create_item(self):
        item = ArmorItem(description="new enchanted helmet", cost=120, defense=410)
        assert item.description == "new enchanted helmet"
        assert item.cost == 120.0
        assert item.defense == 410.0

    def test_ratio(self):
        item = ArmorItem(description="helm", cost=4, defense=10)
        assert item.ratio == 2.5

    def test_structural_equality(self):
        a = ArmorItem(description="helm", cost=4, defense=10)
        b = ArmorItem(description="helm", cost=4, defense=10)
        assert a == b
        assert hash(a) == hash(b)

    def test_is_frozen(self):
        item = ArmorItem(description="helm", cost=4, defense=10)
        with pytest.raises(ValidationError):
            item.cost = 1

    def test_description_must_be_non_empty(self):
        with pytest.raises(ValidationError):
            ArmorItem(description="", cost=1, defense=1)

    @pytest.mark.parametrize("cost", [0, -5, float("inf"), float("nan")])
    def test_cost_must_be_positive_and_finite(self, cost):
        with pytest.raises(ValidationError):
            ArmorItem(description="helm", cost=cost, defense=1)

    def test_defense_must_be_non_negative(self):
        with pytest.raises(ValidationError):
            ArmorItem(description="helm", cost=1, defense=-1)

    def test_zero_defense_allowed(self):
        assert ArmorItem(description="helm", cost=1, defense=0).defense == 0

    def test_to_dict(self):
        d = ArmorItem(description="helm", cost=4, defense=10).to_dict()
        assert d == {"description": "helm", "cost": 4.0, "defense": 10.0}


class TestLoadArmorDatabase:
    """Test the '^'-separated database loader."""

    def test_loads_rows_in_order(self, write_database):
        path = write_database(
            "dented iron helmet^35^60",
            "new enchanted helmet^120.5^410",
        )
        armors = load_armor_database(path)
        assert [a.description for a in armors] == [
            "dented iron helmet",
            "new enchanted helmet",
        ]
        assert armors[1].cost == 120.5
        assert armors[1].defense == 410.0

    def test_header_only(self, write_database):
        assert load_armor_database(write_database()) == []

    def test_skips_blank_lines(self, write_database):
        path = write_database("helm^1^2", "", "boots^3^4")
        assert len(load_armor_database(path)) == 2

    def test_wrong_field_count_is_an_error(self, write_database):
        path = write_database("helm^1^2", "boots^3")
        with pytest.raises(ArmorDatabaseError, match="line 3; Want 3 but got 2"):
            load_armor_database(path)

    def test_extra_fields_is_an_error(self, write_database):
        path = write_database("helm^1^2^3")
        with pytest.raises(ArmorDatabaseError, match="got 4"):
            load_armor_database(path)

    def test_invalid_values_are_skipped(self, write_database, caplog):
        path = write_database(
            "helm^1^2",
            "free helm^0^5",
            "bad cost^abc^5",
            "cursed helm^5^-3",
            "^5^5",
            "boots^3^4",
        )
        with caplog.at_level(logging.WARNING):
            armors = load_armor_database(path)
        assert [a.description for a in armors] == ["helm", "boots"]
        assert "Skipping line 3" in caplog.text

    def test_missing_file(self, tmp_path):
        with pytest.raises(ArmorDatabaseError, match="Cannot open file"):
            load_armor_database(tmp_path / "missing.csv")

    def test_errors_share_base_class(self, tmp_path):
        with pytest.raises(MaxDefenseError):
            load_armor_database(tmp_path / "missing.csv")

    def test_loads_bundled_database(self, project_root):
        armors = load_armor_database(project_root / "data" / "armor.csv")
        assert len(armors) >= 6
        assert all(a.cost > 0 for a in armors)


class TestFilterArmorVector:
    """Test defense-range and size filtering."""

    def test_inclusive_range(self, mixed_armors):
        filtered = filter_armor_vector(mixed_armors, 60, 330, 100)
        assert [a.defense for a in filtered] == [60, 150, 330, 260]

    def test_drops_zero_defense(self, mixed_armors):
        filtered = filter_armor_vector(mixed_armors, 1, 2500, 100)
        assert all(a.defense >= 1 for a in filtered)
        assert len(filtered) == len(mixed_armors) - 1

    def test_caps_size_keeping_first_matches(self, mixed_armors):
        filtered = filter_armor_vector(mixed_armors, 1, 2500, 3)
        assert [a.description for a in filtered] == [
            "dented iron helmet",
            "new enchanted helmet",
            "rusty chainmail",
        ]

    def test_zero_size(self, mixed_armors):
        assert filter_armor_vector(mixed_armors, 0, 2500, 0) == []

    def test_returns_new_list(self, mixed_armors):
        filtered = filter_armor_vector(mixed_armors, 0, 10_000, 100)
        assert filtered == mixed_armors
        assert filtered is not mixed_armors

    def test_empty_source(self):
        assert filter_armor_vector([], 0, 100, 5) == []
