"""Total cost and defense of an armor subset."""

from __future__ import annotations

from typing import Iterable

from ..armory.models import ArmorItem


def sum_armor_vector(armors: Iterable[ArmorItem]) -> tuple[float, float]:
    """Return ``(total_cost, total_defense)``; both 0.0 for no items."""
    total_cost = total_defense = 0.0
    for armor in armors:
        total_cost += armor.cost
        total_defense += armor.defense
    return total_cost, total_defense
