"""
MaxDefense: choose armor that maximizes defense within a gold budget.

Modules:
- armory: ArmorItem model, database loader, candidate filter
- optimizer: greedy and exhaustive selection, subset aggregation
- report: human-readable armor listings
- main: CLI entry point
"""

__version__ = "0.1.0"
