"""Exhaustive armor selection.

Tries every subset of the catalog and keeps the affordable one with the
most defense. Subsets are encoded as integer bit patterns: bit ``j`` of
pattern ``bits`` includes item ``j``. Runtime is O(2^n * n), so the
catalog must be filtered down to a handful of items first.
"""

from __future__ import annotations

import logging
from functools import reduce
from typing import Iterator, NamedTuple, Sequence

from ..armory.models import ArmorItem
from ..errors import CatalogTooLargeError
from .aggregator import sum_armor_vector
from .models import SelectionResult

logger = logging.getLogger(__name__)

STRATEGY = "exhaustive"

# Bit patterns must fit in an unsigned 64-bit counter
MAX_EXHAUSTIVE_SIZE = 64


class _SearchState(NamedTuple):
    best: tuple[ArmorItem, ...]
    best_defense: float
    found: bool


def check_enumerable(n: int) -> None:
    """Raise CatalogTooLargeError unless ``n`` items can be enumerated."""
    if n >= MAX_EXHAUSTIVE_SIZE:
        raise CatalogTooLargeError(n, MAX_EXHAUSTIVE_SIZE)


def subset_for_bits(catalog: Sequence[ArmorItem], bits: int) -> tuple[ArmorItem, ...]:
    """Items whose index bit is set in ``bits``, in catalog order."""
    return tuple(armor for j, armor in enumerate(catalog) if (bits >> j) & 1)


def _candidates(catalog: Sequence[ArmorItem]) -> Iterator[tuple[ArmorItem, ...]]:
    for bits in range(1 << len(catalog)):
        yield subset_for_bits(catalog, bits)


def exhaustive_max_defense(
    catalog: Sequence[ArmorItem],
    budget: float,
) -> SelectionResult:
    """Find the maximum-defense subset costing at most ``budget`` gold.

    Among equal-defense subsets the one with the lowest bit pattern wins.

    Args:
        catalog: Armor to choose from; fewer than MAX_EXHAUSTIVE_SIZE items.
        budget: Gold budget.

    Returns:
        SelectionResult with items in catalog order. The empty subset is
        always affordable, so the result may be empty but always exists.

    Raises:
        CatalogTooLargeError: Before any enumeration, if the catalog is
            too large.
    """
    check_enumerable(len(catalog))

    def step(state: _SearchState, candidate: tuple[ArmorItem, ...]) -> _SearchState:
        cost, defense = sum_armor_vector(candidate)
        if cost > budget:
            return state
        if state.found and defense <= state.best_defense:
            return state
        return _SearchState(best=candidate, best_defense=defense, found=True)

    final = reduce(
        step,
        _candidates(catalog),
        _SearchState(best=(), best_defense=0.0, found=False),
    )

    result = SelectionResult.from_items(final.best, STRATEGY)
    logger.info(
        "Exhaustive search over %d subsets picked %d items: cost=%g, defense=%g (budget %g)",
        1 << len(catalog), len(result), result.total_cost, result.total_defense, budget,
    )
    return result
