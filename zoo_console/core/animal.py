"""
Zoo Console - Animals
Species templates, their clones, and random gender selection.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional
import logging
import random

from .errors import InvalidArgumentError

if TYPE_CHECKING:
    from ..console import Console

logger = logging.getLogger(__name__)

# Used when the caller does not inject a random source
_default_rng = random.Random()


class Gender(Enum):
    """Gender of an animal."""
    MALE = auto()
    FEMALE = auto()


GENDERS = tuple(Gender)


def get_random_gender(rng: Optional[random.Random] = None) -> Gender:
    """Pick a gender uniformly from the closed set of genders."""
    rng = rng or _default_rng
    return GENDERS[rng.randrange(len(GENDERS))]


def _require_text(value, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"Animal {field_name} must be non-empty text, got {value!r}")
    return value


@dataclass(frozen=True, eq=False)
class Animal:
    """
    A single animal: a species template or one of its clones.

    `eq=False` since an enclosure holds several animals that are
    indistinguishable by value.
    """
    name: str
    sound: str
    gender: Gender

    def __post_init__(self):
        _require_text(self.name, "name")
        _require_text(self.sound, "sound")
        if not isinstance(self.gender, Gender):
            raise InvalidArgumentError(f"Animal gender must be a Gender, got {self.gender!r}")

    def clone(self, random_gender: bool = False, rng: Optional[random.Random] = None) -> Animal:
        """
        Create a new animal of the same species.

        With `random_gender` the clone's gender is drawn independently of
        this animal's gender; otherwise it is copied.
        """
        gender = get_random_gender(rng) if random_gender else self.gender
        return Animal(self.name, self.sound, gender)

    def make_sound(self, console: Console):
        """Emit the animal's sound verbatim."""
        console.write(self.sound)
