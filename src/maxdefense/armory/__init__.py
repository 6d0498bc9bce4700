"""Armory Module - armor items, database loading, and filtering."""

from .filters import filter_armor_vector
from .loader import load_armor_database
from .models import ArmorItem, ArmorVector

__all__ = [
    "ArmorItem",
    "ArmorVector",
    "filter_armor_vector",
    "load_armor_database",
]
