"""CLI entry point for MaxDefense.

Usage:
    python -m src.maxdefense.main
    python -m src.maxdefense.main --database data/armor.csv --budget 500
    python -m src.maxdefense.main --method both --size 10 --min-defense 1 --max-defense 2500
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import Protocol, Sequence

from pydantic import ValidationError

from ..common.config import Settings
from ..common.logging import setup_logging
from .armory.filters import filter_armor_vector
from .armory.loader import load_armor_database
from .armory.models import ArmorItem
from .errors import MaxDefenseError
from .optimizer.exhaustive import exhaustive_max_defense
from .optimizer.greedy import greedy_max_defense
from .optimizer.models import SelectionResult
from .report.printer import print_armor_vector

logger = logging.getLogger(__name__)


class Solver(Protocol):
    def __call__(self, catalog: Sequence[ArmorItem], budget: float) -> SelectionResult: ...


SOLVERS: dict[str, Solver] = {
    "greedy": greedy_max_defense,
    "exhaustive": exhaustive_max_defense,
}
METHOD_CHOICES = [*SOLVERS, "both"]


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="MaxDefense — armor selection within a gold budget"
    )
    parser.add_argument(
        "--database",
        type=str,
        default=str(settings.database.abs_path),
        help="Path to the '^'-separated armor database",
    )
    parser.add_argument(
        "--budget",
        type=float,
        default=settings.optimizer.budget,
        help="Gold budget (default: %(default)s)",
    )
    parser.add_argument(
        "--min-defense",
        type=float,
        default=settings.filter.min_defense,
        help="Minimum defense of a candidate, inclusive (default: %(default)s)",
    )
    parser.add_argument(
        "--max-defense",
        type=float,
        default=settings.filter.max_defense,
        help="Maximum defense of a candidate, inclusive (default: %(default)s)",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=settings.filter.total_size,
        help="Maximum number of candidates to optimize over (default: %(default)s)",
    )
    parser.add_argument(
        "--method",
        choices=METHOD_CHOICES,
        default=settings.optimizer.method,
        help="Optimization strategy (default: %(default)s)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def run_solver(
    method: str,
    catalog: Sequence[ArmorItem],
    budget: float,
) -> tuple[SelectionResult, float]:
    """Run one strategy and return its result with elapsed seconds."""
    solver = SOLVERS[method]
    start = time.perf_counter()
    result = solver(catalog=catalog, budget=budget)
    elapsed = time.perf_counter() - start
    logger.info("%s finished in %.6f s", method, elapsed)
    return result, elapsed


def main(argv: Sequence[str] | None = None) -> int:
    try:
        settings = Settings.load()
    except ValidationError as exc:
        build_parser(Settings()).error(f"Invalid settings: {exc}")
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    if args.budget < 0:
        parser.error("--budget must be non-negative")
    if args.method not in METHOD_CHOICES:
        parser.error(f"Unknown method {args.method!r}; choose from {METHOD_CHOICES}")

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    methods = list(SOLVERS) if args.method == "both" else [args.method]

    try:
        all_armors = load_armor_database(args.database)
        armors = filter_armor_vector(
            all_armors, args.min_defense, args.max_defense, args.size
        )
        logger.info(
            "Optimizing over %d of %d items with a budget of %g gold",
            len(armors), len(all_armors), args.budget,
        )

        for method in methods:
            result, _ = run_solver(method, armors, args.budget)
            logger.info("=== %s ===", method)
            print_armor_vector(result.items)
    except MaxDefenseError as exc:
        parser.error(str(exc))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
