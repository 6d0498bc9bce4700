"""Data models for the optimizer module."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from ..armory.models import ArmorItem
from .aggregator import sum_armor_vector


@dataclass(frozen=True)
class SelectionResult:
    """Armor chosen by one optimizer run.

    Totals are derived from ``items`` at construction, so they always
    match the Aggregator over exactly the chosen subset.
    """

    items: tuple[ArmorItem, ...]
    strategy: str  # greedy | exhaustive
    total_cost: float = field(init=False)
    total_defense: float = field(init=False)

    def __post_init__(self) -> None:
        total_cost, total_defense = sum_armor_vector(self.items)
        object.__setattr__(self, "total_cost", total_cost)
        object.__setattr__(self, "total_defense", total_defense)

    @classmethod
    def from_items(cls, items: Iterable[ArmorItem], strategy: str) -> SelectionResult:
        return cls(items=tuple(items), strategy=strategy)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ArmorItem]:
        return iter(self.items)

    def to_dict(self) -> dict:
        return {
            "strategy": self.strategy,
            "total_cost": self.total_cost,
            "total_defense": self.total_defense,
            "items": [item.to_dict() for item in self.items],
        }
