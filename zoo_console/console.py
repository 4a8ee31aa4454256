"""
Zoo Console - Console I/O
Input source and output sink used by the interactive zoo session.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, TextIO
import logging
import os
import sys

logger = logging.getLogger(__name__)

CLEAR_SEQUENCE = "\033[2J\033[H"


class Console(ABC):
    """
    Text console the zoo talks to.

    Implementations provide:
    - Line input
    - Unformatted and line output
    - Screen clearing
    - Blocking until a single key is pressed
    """

    @abstractmethod
    def read_line(self) -> str:
        """Read one line of input without its trailing newline."""
        pass

    @abstractmethod
    def write(self, text: str):
        pass

    def write_line(self, text: str = ""):
        self.write(text + "\n")

    @abstractmethod
    def clear(self):
        pass

    @abstractmethod
    def wait_for_key(self):
        """Block until the user presses a key."""
        pass


class TerminalConsole(Console):
    """Console backed by the process's stdin and stdout."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def read_line(self) -> str:
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("Console input closed")
        return line.rstrip("\r\n")

    def write(self, text: str):
        self.stdout.write(text)

    def clear(self):
        if self.stdout.isatty():
            self.stdout.write(CLEAR_SEQUENCE)
        self.stdout.flush()

    def wait_for_key(self):
        self.stdout.flush()

        if not self.stdin.isatty():
            # Piped input: a keypress is the next line
            if not self.stdin.readline():
                raise EOFError("Console input closed")
            return

        if os.name == "nt":
            import msvcrt
            msvcrt.getwch()
            return

        import termios
        import tty

        fd = self.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setcbreak(fd)
            char = self.stdin.read(1)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

        if char == "\x03":
            raise KeyboardInterrupt
        if char == "\x04" or not char:
            raise EOFError("Console input closed")


class ScriptedConsole(Console):
    """
    Console that replays prepared input lines and records what was written.

    Used to drive a session without a terminal. Raises EOFError once the
    script is exhausted, as `input()` does at end of file.
    """

    def __init__(self, lines: Iterable[str] = ()):
        self.lines: List[str] = list(lines)
        self.output: List[str] = []
        self.clear_count = 0
        self.key_waits = 0
        self.lines_read = 0

    def read_line(self) -> str:
        if self.lines_read >= len(self.lines):
            raise EOFError("Script exhausted")
        line = self.lines[self.lines_read]
        self.lines_read += 1
        return line

    def write(self, text: str):
        self.output.append(text)

    def clear(self):
        self.clear_count += 1
        # Keep a marker so tests can split output per screen
        self.output.append(CLEAR_SEQUENCE)

    def wait_for_key(self):
        self.key_waits += 1

    @property
    def text(self) -> str:
        return "".join(self.output)

    @property
    def screens(self) -> List[str]:
        """Output split at each clear, skipping empty screens."""
        return [screen for screen in self.text.split(CLEAR_SEQUENCE) if screen]
