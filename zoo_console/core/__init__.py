"""
Zoo Console - Core Package
Animals, enclosures, the zoo session, and the factory that populates it.
"""

from .errors import InvalidArgumentError
from .animal import Animal, Gender, GENDERS, get_random_gender
from .enclosure import Enclosure, NumberRange
from .zoo import Zoo, ZooState, Selection
from .factory import ZooFactory

__all__ = [
    # Errors
    "InvalidArgumentError",

    # Animals
    "Animal",
    "Gender",
    "GENDERS",
    "get_random_gender",

    # Enclosures
    "Enclosure",
    "NumberRange",

    # Zoo
    "Zoo",
    "ZooState",
    "Selection",
    "ZooFactory",
]
