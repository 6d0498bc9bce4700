"""Greedy armor selection.

Repeatedly takes the remaining item with the best defense-per-gold ratio
that still fits the budget. Fast, but not guaranteed to find the
maximum-defense subset.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..armory.models import ArmorItem
from .models import SelectionResult

logger = logging.getLogger(__name__)

STRATEGY = "greedy"


def _best_fitting_index(
    todo: Sequence[ArmorItem],
    spent: float,
    budget: float,
) -> int | None:
    """Position of the best-ratio item that fits, or None.

    Ties keep the earliest item. Items with ratio 0 never qualify.
    """
    best_index: int | None = None
    best_ratio = 0.0
    for i, armor in enumerate(todo):
        if spent + armor.cost > budget:
            continue
        ratio = armor.ratio
        if ratio > best_ratio:
            best_index = i
            best_ratio = ratio
    return best_index


def greedy_max_defense(
    catalog: Sequence[ArmorItem],
    budget: float,
) -> SelectionResult:
    """Choose armor greedily by defense/cost ratio within ``budget`` gold.

    Args:
        catalog: Armor to choose from. Not modified.
        budget: Gold budget.

    Returns:
        SelectionResult with items in the order they were picked.
    """
    todo = list(catalog)
    chosen: list[ArmorItem] = []
    spent = 0.0

    while todo:
        index = _best_fitting_index(todo, spent, budget)
        if index is None:
            break
        armor = todo.pop(index)
        chosen.append(armor)
        spent += armor.cost

    result = SelectionResult.from_items(chosen, STRATEGY)
    logger.info(
        "Greedy picked %d of %d items: cost=%g, defense=%g (budget %g)",
        len(result), len(catalog), result.total_cost, result.total_defense, budget,
    )
    return result
