"""
Zoo Console - Zoo
The zoo's enclosures and the interactive session that browses them.
"""

from enum import Enum, auto
from typing import Optional, Sequence, Tuple
import logging
import re

from .animal import Gender
from .enclosure import Enclosure
from .errors import InvalidArgumentError
from ..config import ZOO, TEXT, ConsoleText
from ..console import Console, TerminalConsole

logger = logging.getLogger(__name__)

# Optional sign and ASCII digits only, padding allowed
NUMBER_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")


def parse_number(raw: str) -> Optional[int]:
    """Parse an enclosure number, or return None if `raw` isn't one."""
    if NUMBER_PATTERN.fullmatch(raw) is None:
        return None
    return int(raw)


class ZooState(Enum):
    """Session state. STOPPED is terminal."""
    RUNNING = auto()
    STOPPED = auto()


class Selection(Enum):
    """Outcome of treating an input line as an enclosure number."""
    EMPTY = auto()           # Nothing entered
    NOT_A_NUMBER = auto()    # Not parseable as an integer
    OUT_OF_RANGE = auto()    # No enclosure with that number
    SHOWN = auto()           # Inhabitants displayed


class Zoo:
    """
    A zoo of enclosures browsed from a text console.

    Each session iteration:
    - Clears the screen and lists the enclosures
    - Reads one line
    - Stops on the exact exit command, otherwise shows the selected enclosure

    Invalid selections are reported and the menu is shown again.
    """

    def __init__(
        self,
        enclosures: Sequence[Enclosure],
        console: Optional[Console] = None,
        exit_command: str = ZOO.exit_command,
        text: ConsoleText = TEXT,
    ):
        if enclosures is None:
            raise InvalidArgumentError("Zoo requires a list of enclosures")

        self._enclosures: Tuple[Enclosure, ...] = tuple(enclosures)
        self.console = console or TerminalConsole()
        self.exit_command = exit_command
        self.text = text
        self.state = ZooState.RUNNING

    @property
    def enclosures(self) -> Tuple[Enclosure, ...]:
        return self._enclosures

    @property
    def is_running(self) -> bool:
        return self.state == ZooState.RUNNING

    def run(self):
        """Run the session until the exit command is entered."""
        logger.info(f"Zoo opened with {len(self._enclosures)} enclosures")

        while self.is_running:
            self.step()

        logger.info("Zoo closed")

    def step(self) -> ZooState:
        """Run one menu iteration."""
        if not self.is_running:
            return self.state

        self.console.clear()
        self.show_enclosures()
        self.console.write_line(self.text.prompt.format(command=self.exit_command))
        line = self.console.read_line()

        if line == self.exit_command:
            self.state = ZooState.STOPPED
        else:
            self.select(line)

        return self.state

    def select(self, raw: str) -> Selection:
        """Show the enclosure numbered by `raw`, or report why it can't."""
        if raw == "":
            self.console.write_line(self.text.entered_nothing)
            outcome = Selection.EMPTY
        else:
            number = parse_number(raw)

            if number is None:
                self.console.write_line(self.text.not_a_number.format(raw=raw))
                outcome = Selection.NOT_A_NUMBER
            elif 0 < number <= len(self._enclosures):
                self.console.clear()
                self.show_animals(number)
                outcome = Selection.SHOWN
            else:
                self.console.write_line(self.text.no_such_number.format(number=number))
                outcome = Selection.OUT_OF_RANGE

        if outcome != Selection.SHOWN:
            logger.info(f"Rejected selection {raw!r}: {outcome.name}")
        else:
            logger.debug(f"Showing enclosure {raw}")

        self.console.wait_for_key()
        return outcome

    def show_enclosures(self):
        for number in range(1, len(self._enclosures) + 1):
            self.console.write_line(self.text.enclosure_label.format(number=number))

    def show_animals(self, number: int):
        """Print the inhabitants of the 1-based enclosure `number`."""
        enclosure = self._enclosures[number - 1]
        self.console.write_line(self.text.inhabitants_header.format(number=number))

        for animal in enclosure:
            self.console.write(self.text.inhabitant_prefix.format(
                name=animal.name,
                gender=self.gender_word(animal.gender),
            ))
            animal.make_sound(self.console)
            self.console.write_line()

    def gender_word(self, gender: Gender) -> str:
        if gender == Gender.MALE:
            return self.text.gender_male
        return self.text.gender_female
