"""Report Module - printable armor listings."""

from .printer import format_armor_vector, print_armor_vector

__all__ = ["format_armor_vector", "print_armor_vector"]
