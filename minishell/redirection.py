"""Opening redirection targets, heredocs and pipes for a parsed command list."""

from __future__ import annotations

import os
import sys
import tempfile
from collections.abc import Callable

from .parser import STDIN_FILENO, STDOUT_FILENO, Command
from .signals import received

ReadLine = Callable[[str], "str | None"]

HEREDOC_PROMPT = "heredoc> "


class RedirectionError(Exception):
    """Raised when a redirection target cannot be opened."""


def read_heredoc(delimiter: str, read_line: ReadLine) -> str:
    """Read lines until ``delimiter`` or end of input; return them newline-terminated."""
    lines: list[str] = []
    while True:
        line = read_line(HEREDOC_PROMPT)
        if line is None or line == delimiter:
            break
        lines.append(line + "\n")
    return "".join(lines)


def _target(command: Command, following: Command) -> str:
    return following.args[0] if following.args else ""


def _open(path: str, flags: int) -> int | None:
    try:
        return os.open(path, flags, 0o644)
    except OSError as error:
        print(f"open: {error.strerror}", file=sys.stderr)
        return None


def _heredoc_fd(text: str) -> int:
    with tempfile.TemporaryFile() as handle:
        handle.write(text.encode())
        handle.flush()
        handle.seek(0)
        return os.dup(handle.fileno())


def close_command_fds(command: Command) -> None:
    """Close the command's descriptors that are not stdin or stdout."""
    if command.input_fd >= 0 and command.input_fd != STDIN_FILENO:
        try:
            os.close(command.input_fd)
        except OSError:
            pass
        command.input_fd = -1
    if command.output_fd >= 0 and command.output_fd != STDOUT_FILENO:
        try:
            os.close(command.output_fd)
        except OSError:
            pass
        command.output_fd = -1


def apply_redirections(commands: list[Command], read_line: ReadLine) -> list[Command]:
    """Open files, heredocs and pipes for each command followed by another.

    The word after ``>``, ``>>``, ``<`` or ``<<`` names the file or delimiter.
    If any file cannot be opened, every descriptor is closed and
    RedirectionError is raised.
    """
    failed = False
    for command, following in zip(commands, commands[1:]):
        operator = command.operator
        if operator == ">":
            fd = _open(_target(command, following), os.O_WRONLY | os.O_CREAT | os.O_TRUNC)
            command.output_fd = -1 if fd is None else fd
            failed |= fd is None
        elif operator == ">>":
            fd = _open(_target(command, following), os.O_WRONLY | os.O_CREAT | os.O_APPEND)
            command.output_fd = -1 if fd is None else fd
            failed |= fd is None
        elif operator == "<":
            fd = _open(_target(command, following), os.O_RDONLY)
            command.input_fd = -1 if fd is None else fd
            failed |= fd is None
        elif operator == "<<":
            text = read_heredoc(_target(command, following), read_line)
            command.input_fd = _heredoc_fd(text)
        elif operator == "|":
            read_end, write_end = os.pipe()
            command.output_fd = write_end
            following.input_fd = read_end
    if failed:
        received.value = 1
        for command in commands:
            close_command_fds(command)
        raise RedirectionError("cannot open redirection target")
    return commands


def fix_structure(commands: list[Command]) -> list[Command]:
    """Fold redirection targets on the first command out of the list.

    ``cmd < file | ...`` and ``cmd << word <op> ...`` hand the target's output
    to the first command and drop the target; a first command redirected to a
    plain target keeps only itself.
    """
    if len(commands) < 2:
        return commands
    head, following = commands[0], commands[1]
    if (head.operator == "<" and following.operator == "|") or (
        head.operator == "<<" and following.operator
    ):
        head.output_fd = following.output_fd
        return [head, *commands[2:]]
    if head.operator and not following.operator and head.operator != "|":
        for dropped in commands[1:]:
            close_command_fds(dropped)
        return [head]
    return commands