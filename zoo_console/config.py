"""
Zoo Console - Configuration
Species seed data, occupancy limits, and the text shown on the console.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class SpeciesSpec:
    """One species kept in the zoo."""
    name: str
    sound: str
    gender: str = "MALE"  # Gender member name of the template


def _default_species() -> List[SpeciesSpec]:
    return [
        SpeciesSpec("snake", "Ш-ш-ш-ш"),
        SpeciesSpec("owl", "ух - хух"),
        SpeciesSpec("tiger", "РРРР"),
        SpeciesSpec("goose", "га-га-га"),
    ]


@dataclass
class ZooConfig:
    """Zoo population parameters."""

    species: List[SpeciesSpec] = field(default_factory=_default_species)

    # Occupants per enclosure, both ends inclusive
    occupancy_min: int = 2
    occupancy_max: int = 6

    # Exact line that closes the session
    exit_command: str = "quit"

    @property
    def species_count(self) -> int:
        return len(self.species)


@dataclass
class ConsoleText:
    """Everything the session prints."""
    enclosure_label: str = "Enclosure {number}"
    prompt: str = "Select an enclosure to approach, or type {command} to close the program."
    entered_nothing: str = "You entered nothing"
    not_a_number: str = 'Could not convert "{raw}" to a number'
    no_such_number: str = 'Number "{number}" does not exist'
    inhabitants_header: str = "Inhabitants of enclosure {number}"
    inhabitant_prefix: str = "{name}. Gender - {gender}. Makes a sound - "
    gender_male: str = "male"
    gender_female: str = "female"


# Global instances
ZOO = ZooConfig()
TEXT = ConsoleText()
