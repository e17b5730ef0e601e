"""Shell environment: the variable list, the last exit status and the abort flag."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .textutil import split_words


def parse_environ(envp: Iterable[str]) -> dict[str, str]:
    """Build the variable table from ``NAME=value`` strings.

    Each entry is split on ``=`` with empty pieces dropped; only the first two
    pieces are used, and entries with fewer than two are ignored. When a name
    appears more than once, the first occurrence wins.
    """
    variables: dict[str, str] = {}
    for entry in envp:
        parts = split_words(entry, "=")
        if len(parts) >= 2:
            variables.setdefault(parts[0], parts[1])
    return variables


@dataclass
class Environment:
    """State carried from one command line to the next."""

    envp: list[str] = field(default_factory=list)
    variables: dict[str, str] = field(init=False)
    exit_status: int = 0
    exec_flag: bool = False

    def __post_init__(self) -> None:
        self.envp = list(self.envp)
        self.variables = parse_environ(self.envp)

    def get(self, name: str) -> str | None:
        """Return the value of ``name``, or None if it is not set."""
        return self.variables.get(name)

    def set(self, name: str, value: str) -> None:
        """Set ``name``; a new name is appended after the existing ones."""
        self.variables[name] = value

    def unset(self, name: str) -> None:
        """Remove ``name`` if it is set."""
        self.variables.pop(name, None)

    def items(self) -> Iterator[tuple[str, str]]:
        """Iterate over ``(name, value)`` pairs in insertion order."""
        return iter(list(self.variables.items()))

    def report_error(self, message: str | None, status: int) -> None:
        """Print ``message``, mark the line as aborted and record ``status``.

        A message of None leaves the state untouched.
        """
        if message is None:
            return
        print(message)
        self.exec_flag = True
        self.exit_status = status