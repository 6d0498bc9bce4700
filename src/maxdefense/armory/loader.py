"""Armor database loader.

The database is a text file with a header row followed by one item per
line, fields separated by ``^``:

    description^cost_gold^defense_points
    new enchanted helmet^18.5^42

Rows with unparsable or invalid values are skipped. A row with the wrong
number of fields means the file is malformed and aborts the load.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from ..errors import ArmorDatabaseError
from .models import ArmorItem, ArmorVector

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "^"
FIELD_COUNT = 3


def load_armor_database(path: str | Path) -> ArmorVector:
    """Load all the valid armor items from the database file.

    Args:
        path: Path to the ``^``-separated database.

    Returns:
        Items in file order.

    Raises:
        ArmorDatabaseError: If the file cannot be opened or a row has the
            wrong field count.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except OSError as exc:
        raise ArmorDatabaseError(
            f"Failed to load armor database; Cannot open file: {path}"
        ) from exc

    items: ArmorVector = []
    skipped = 0

    for line_number, line in enumerate(lines, start=1):
        # First line is a header row
        if line_number == 1 or not line.strip():
            continue

        fields = line.split(FIELD_SEPARATOR)
        if len(fields) != FIELD_COUNT:
            raise ArmorDatabaseError(
                f"Invalid field count at line {line_number}; "
                f"Want {FIELD_COUNT} but got {len(fields)}\nLine: {line}"
            )

        item = _parse_row(fields, line_number)
        if item is None:
            skipped += 1
            continue
        items.append(item)

    logger.info(
        "Loaded %d armor items from %s (%d skipped)", len(items), path, skipped
    )
    return items


def _parse_row(fields: list[str], line_number: int) -> ArmorItem | None:
    """Build an ArmorItem from one row, or None if the values are invalid."""
    description, cost_field, defense_field = fields
    try:
        return ArmorItem(
            description=description,
            cost=float(cost_field),
            defense=float(defense_field),
        )
    except (ValueError, ValidationError) as exc:
        logger.warning("Skipping line %d: %s", line_number, exc)
        return None
