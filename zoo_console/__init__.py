"""
Zoo Console
A console zoo: species populate enclosures with randomly sized groups of
randomly gendered animals, and a text menu lets visitors look inside.
"""

__version__ = "1.0.0"

from .config import (
    ZOO,
    TEXT,
    ZooConfig,
    ConsoleText,
    SpeciesSpec,
)

from .console import Console, TerminalConsole, ScriptedConsole

from .core import (
    InvalidArgumentError,
    Animal,
    Gender,
    GENDERS,
    get_random_gender,
    Enclosure,
    NumberRange,
    Zoo,
    ZooState,
    Selection,
    ZooFactory,
)

__all__ = [
    # Version info
    "__version__",

    # Config
    "ZOO",
    "TEXT",
    "ZooConfig",
    "ConsoleText",
    "SpeciesSpec",

    # Console
    "Console",
    "TerminalConsole",
    "ScriptedConsole",

    # Core classes
    "InvalidArgumentError",
    "Animal",
    "Gender",
    "GENDERS",
    "get_random_gender",
    "Enclosure",
    "NumberRange",
    "Zoo",
    "ZooState",
    "Selection",
    "ZooFactory",
]
