"""Human-readable listings of armor vectors."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from ..armory.models import ArmorItem
from ..optimizer.aggregator import sum_armor_vector

HEADER = "*** Armor Vector ***"
EMPTY_LINE = "[empty armor list]"


def format_armor_vector(armors: Iterable[ArmorItem]) -> list[str]:
    """Render each item followed by the grand totals."""
    armors = list(armors)
    lines = [HEADER]
    if not armors:
        lines.append(EMPTY_LINE)
        return lines

    for armor in armors:
        lines.append(
            f"Ye olde {armor.description} ==> "
            f"Cost of {armor.cost:g} gold; Defense points = {armor.defense:g}"
        )

    total_cost, total_defense = sum_armor_vector(armors)
    lines.append(f"> Grand total cost: {total_cost:g} gold")
    lines.append(f"> Grand total defense: {total_defense:g}")
    return lines


def print_armor_vector(armors: Iterable[ArmorItem], stream: TextIO | None = None) -> None:
    stream = stream or sys.stdout
    for line in format_armor_vector(armors):
        print(line, file=stream)
