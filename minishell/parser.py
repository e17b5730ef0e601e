"""Grouping tokens into commands separated by operators."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .environment import Environment
from .tokenizer import is_operator, tokenize

STDIN_FILENO = 0
STDOUT_FILENO = 1


@dataclass
class Command:
    """One command: its words, the operator after it and its descriptors."""

    args: list[str] = field(default_factory=list)
    operator: str | None = None
    input_fd: int = STDIN_FILENO
    output_fd: int = STDOUT_FILENO
    heredoc_delimiter: str | None = None


def parse_tokens(tokens: Iterable[str]) -> list[Command]:
    """Split ``tokens`` at operators into commands.

    Each command takes the words up to the next operator and that operator.
    After ``<<`` the following word is also kept as the heredoc delimiter.
    A new command is started only if tokens remain, so a trailing operator
    stays on the last command. No tokens give one empty command.
    """
    items = list(tokens)
    commands = [Command()]
    i = 0
    while i < len(items):
        command = commands[-1]
        start = i
        while i < len(items) and not is_operator(items[i]):
            i += 1
        command.args = items[start:i]
        if i < len(items):
            command.operator = items[i]
            i += 1
            if command.operator == "<<" and i < len(items):
                command.heredoc_delimiter = items[i]
        if i < len(items):
            commands.append(Command())
    return commands


def parse(text: str, env: Environment) -> list[Command]:
    """Tokenize and group ``text``; an aborted line gives one empty command."""
    if env.exec_flag:
        return [Command()]
    return parse_tokens(tokenize(text, env))