"""Candidate filtering before optimization.

Drops armor whose defense is irrelevant to the optimization and caps the
catalog size so exhaustive search stays tractable.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .models import ArmorVector, ArmorItem

logger = logging.getLogger(__name__)


def filter_armor_vector(
    source: Iterable[ArmorItem],
    min_defense: float,
    max_defense: float,
    total_size: int,
) -> ArmorVector:
    """Return the first ``total_size`` items with defense in range.

    Args:
        source: Catalog to filter; order is preserved.
        min_defense: Inclusive lower bound on defense.
        max_defense: Inclusive upper bound on defense.
        total_size: Maximum number of items to keep.

    Returns:
        New list holding the matching items.
    """
    filtered: ArmorVector = []
    if total_size <= 0:
        return filtered

    for armor in source:
        if min_defense <= armor.defense <= max_defense:
            filtered.append(armor)
            if len(filtered) >= total_size:
                break

    logger.debug(
        "Filtered to %d items (defense %g..%g, cap %d)",
        len(filtered), min_defense, max_defense, total_size,
    )
    return filtered
