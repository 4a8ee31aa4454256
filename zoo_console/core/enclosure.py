"""
Zoo Console - Enclosures
Fixed groups of same-species animals and the occupancy range used to size them.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple
import random

from .animal import Animal, Gender
from .errors import InvalidArgumentError


@dataclass(frozen=True)
class NumberRange:
    """Inclusive integer range with a positive minimum."""
    minimum: int
    maximum: int

    def __post_init__(self):
        if self.minimum <= 0:
            raise InvalidArgumentError(f"Range minimum must be positive, got {self.minimum}")
        if self.minimum > self.maximum:
            raise InvalidArgumentError(
                f"Range minimum {self.minimum} is greater than maximum {self.maximum}"
            )

    def __contains__(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def draw(self, rng: random.Random) -> int:
        """Draw a value uniformly from the range, both ends included."""
        return rng.randint(self.minimum, self.maximum)


class Enclosure:
    """An aviary: an ordered, fixed collection of animals."""

    def __init__(self, animals: Sequence[Animal]):
        if animals is None:
            raise InvalidArgumentError("Enclosure requires a list of animals")
        self._animals: Tuple[Animal, ...] = tuple(animals)

    @property
    def animals(self) -> Tuple[Animal, ...]:
        return self._animals

    @property
    def species(self) -> Optional[str]:
        return self._animals[0].name if self._animals else None

    def count(self, gender: Gender) -> int:
        return sum(1 for animal in self._animals if animal.gender == gender)

    def __len__(self) -> int:
        return len(self._animals)

    def __iter__(self) -> Iterator[Animal]:
        return iter(self._animals)

    def __getitem__(self, index: int) -> Animal:
        return self._animals[index]

    def __repr__(self) -> str:
        return f"Enclosure(species={self.species!r}, animals={len(self)})"
