"""
Zoo Console - Entry Point
Parses arguments, populates the zoo, and opens the session.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence
from time import time
import argparse
import logging
import random
import sys

from .config import ZOO, ZooConfig
from .console import Console
from .core import Animal, Gender, InvalidArgumentError, NumberRange, Zoo, ZooFactory
from .reports import create_census_docx, create_census_xlsx

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@dataclass
class Args:
    seed: int
    log_level: str
    census_docx: Optional[str]
    census_xlsx: Optional[str]


def sanitize_seed(org_seed: Optional[int]) -> int:
    if org_seed is None:
        seed = int(time() * 10_000) % 100_000
        logger.info(f"Generated seed: {seed}")
        return seed

    return org_seed


def parse_args(argv: Optional[Sequence[str]] = None) -> Args:
    parser = argparse.ArgumentParser(
        prog="zoo-console",
        description="Walk around a randomly populated zoo.",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed (generated when omitted)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Log level for messages on stderr",
    )
    parser.add_argument(
        "--census-docx",
        metavar="PATH",
        help="Write a Word census of the zoo before opening it",
    )
    parser.add_argument(
        "--census-xlsx",
        metavar="PATH",
        help="Write an Excel census of the zoo before opening it",
    )

    args = parser.parse_args(argv)

    return Args(
        seed=args.seed,
        log_level=args.log_level,
        census_docx=args.census_docx,
        census_xlsx=args.census_xlsx,
    )


def build_templates(config: ZooConfig = ZOO) -> List[Animal]:
    """One template animal per configured species."""
    return [Animal(spec.name, spec.sound, Gender[spec.gender]) for spec in config.species]


def build_zoo(
    rng: random.Random,
    config: ZooConfig = ZOO,
    console: Optional[Console] = None,
) -> Zoo:
    factory = ZooFactory(rng)
    occupancy = NumberRange(config.occupancy_min, config.occupancy_max)
    return factory.create(
        build_templates(config),
        occupancy,
        console=console,
        exit_command=config.exit_command,
    )


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    seed = sanitize_seed(args.seed)

    try:
        zoo = build_zoo(random.Random(seed), console=console)
    except InvalidArgumentError as e:
        logger.error(f"Cannot build zoo: {e}")
        return 2

    try:
        if args.census_docx:
            create_census_docx(zoo, args.census_docx)
        if args.census_xlsx:
            create_census_xlsx(zoo, args.census_xlsx)
    except OSError as e:
        logger.error(f"Cannot write census: {e}")
        return 2

    try:
        zoo.run()
    except (EOFError, KeyboardInterrupt):
        logger.warning("Console input ended, closing the zoo")

    return 0


if __name__ == "__main__":
    sys.exit(main())
