"""Optimizer Module - greedy and exhaustive armor selection."""

from .aggregator import sum_armor_vector
from .exhaustive import MAX_EXHAUSTIVE_SIZE, check_enumerable, exhaustive_max_defense
from .greedy import greedy_max_defense
from .models import SelectionResult

__all__ = [
    "MAX_EXHAUSTIVE_SIZE",
    "SelectionResult",
    "check_enumerable",
    "exhaustive_max_defense",
    "greedy_max_defense",
    "sum_armor_vector",
]
