"""The interactive loop: read a line, check it, parse it, run it."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence

from .builtins import ShellExit
from .environment import Environment
from .executor import run_commands
from .parser import parse
from .redirection import RedirectionError, apply_redirections, fix_structure
from .signals import install_handlers, received
from .validation import check_input

PROMPT = " -- minishell -- $ "


def _read_line(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


def read_input(env: Environment, read_line: Callable[[str], str | None] = _read_line) -> str:
    """Read one line; end of input prints ``exit`` and raises ShellExit(0)."""
    line = read_line(PROMPT)
    if line is None:
        print("exit")
        raise ShellExit(0)
    if received.value == 130:
        env.exit_status = 1
    return line


def run_line(line: str, env: Environment) -> None:
    """Check, parse and run one command line."""
    received.reset()
    check_input(line, env)
    commands = parse(line, env)
    try:
        commands = fix_structure(apply_redirections(commands, _read_line))
    except RedirectionError:
        commands = []
    try:
        run_commands(commands, env)
    finally:
        env.exec_flag = False


def main(argv: Sequence[str] | None = None) -> int:
    """Run the shell until ``exit`` or end of input; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        print("Error: too many arguments")
        return 1
    try:
        import readline  # noqa: F401  (enables line editing and history)
    except ImportError:
        pass
    env = Environment([f"{name}={value}" for name, value in os.environ.items()])
    install_handlers()
    while True:
        try:
            run_line(read_input(env), env)
        except ShellExit as done:
            return done.status


if __name__ == "__main__":
    sys.exit(main())