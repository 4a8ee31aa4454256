"""
Zoo Console - Zoo Factory
Populates enclosures by cloning species templates.
"""

from typing import Optional, Sequence
import logging
import random

from .animal import Animal, Gender
from .enclosure import Enclosure, NumberRange
from .errors import InvalidArgumentError
from .zoo import Zoo
from ..config import ZOO
from ..console import Console

logger = logging.getLogger(__name__)


class ZooFactory:
    """
    Builds a zoo from species templates.

    Every enclosure holds clones of one template. Occupant counts and the
    clones' genders are drawn from the injected random source, so a seeded
    `random.Random` reproduces the same zoo.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def populate(self, template: Animal, count: int) -> Enclosure:
        """Create an enclosure of `count` clones with random genders."""
        if template is None:
            raise InvalidArgumentError("Template animal is required")
        if count <= 0:
            raise InvalidArgumentError(f"Occupant count must be positive, got {count}")

        animals = [template.clone(random_gender=True, rng=self.rng) for _ in range(count)]
        return Enclosure(animals)

    def create(
        self,
        templates: Sequence[Animal],
        occupancy: NumberRange,
        console: Optional[Console] = None,
        exit_command: str = ZOO.exit_command,
    ) -> Zoo:
        """Build one enclosure per template, in template order."""
        if templates is None or len(templates) == 0:
            raise InvalidArgumentError("At least one species template is required")
        if occupancy is None:
            raise InvalidArgumentError("Occupancy range is required")
        if occupancy.minimum <= 0:
            raise InvalidArgumentError(f"Occupancy minimum must be positive, got {occupancy.minimum}")

        enclosures = []
        for template in templates:
            count = occupancy.draw(self.rng)
            enclosure = self.populate(template, count)
            enclosures.append(enclosure)
            logger.debug(
                f"Enclosure {len(enclosures)}: {count} x {template.name} "
                f"({enclosure.count(Gender.MALE)} male, {enclosure.count(Gender.FEMALE)} female)"
            )

        total = sum(len(e) for e in enclosures)
        logger.info(f"Zoo populated: {len(enclosures)} enclosures, {total} animals")

        return Zoo(enclosures, console=console, exit_command=exit_command)
