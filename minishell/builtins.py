"""Commands built into the shell."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import TextIO

from .environment import Environment
from .textutil import atoi, has_alpha, split_words

CLEAR_SEQUENCE = "\033[2J\033[H"


class ShellExit(Exception):
    """Raised by ``exit`` to end the shell with ``status``."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def _perror(message: str, error: OSError | None = None) -> None:
    if error is not None and error.strerror:
        print(f"{message}: {error.strerror}", file=sys.stderr)
    else:
        print(message, file=sys.stderr)


def is_n_flag(arg: str) -> bool:
    """Return True for an optional ``-`` followed by one or more ``n``."""
    body = arg[1:] if arg.startswith("-") else arg
    return bool(body) and set(body) == {"n"}


def echo(args: Sequence[str], out: TextIO | None = None) -> None:
    """Print the arguments separated by spaces; ``-n`` drops the newline."""
    stream = _stream(out)
    if len(args) < 2:
        stream.write("\n")
        return
    if is_n_flag(args[1]):
        if len(args) < 3:
            return
        stream.write(" ".join(args[2:]))
    else:
        stream.write(" ".join(args[1:]) + "\n")


def pwd(out: TextIO | None = None) -> None:
    """Print the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError as error:
        _perror("getcwd", error)
        return
    _stream(out).write(cwd + "\n")


def env_builtin(env: Environment, out: TextIO | None = None) -> None:
    """Print every variable as ``NAME=value``."""
    stream = _stream(out)
    for name, value in env.items():
        stream.write(f"{name}={value}\n")


def clear(out: TextIO | None = None) -> None:
    """Clear the terminal and move the cursor home."""
    _stream(out).write(CLEAR_SEQUENCE)


def _cd_target(args: Sequence[str], env: Environment, stream: TextIO) -> str | None:
    if len(args) < 2:
        home = env.get("HOME")
        if home is None:
            _perror("cd: HOME not set")
        return home
    if args[1] == "-":
        previous = os.environ.get("OLDPWD")
        if previous is None:
            _perror("cd: OLDPWD not set")
        else:
            stream.write(previous + "\n")
        return previous
    return args[1]


def _update_existing(env: Environment, name: str, value: str) -> None:
    if env.get(name) is not None:
        env.set(name, value)


def cd(args: Sequence[str], env: Environment, out: TextIO | None = None) -> None:
    """Change directory to the argument, ``$HOME`` or, for ``-``, ``$OLDPWD``.

    On success PWD and OLDPWD are updated in the process environment and,
    where already present, in the shell's variables.
    """
    stream = _stream(out)
    try:
        old_pwd = os.getcwd()
    except OSError as error:
        _perror("getcwd", error)
        return
    path = _cd_target(args, env, stream)
    try:
        if path is None or not os.access(path, os.X_OK):
            raise NotADirectoryError(path)
        os.chdir(path)
    except OSError:
        env.report_error("cd: permission denied: ", 1)
        return
    try:
        cwd = os.getcwd()
    except OSError as error:
        _perror("getcwd", error)
        return
    os.environ["OLDPWD"] = old_pwd
    _update_existing(env, "OLDPWD", old_pwd)
    os.environ["PWD"] = cwd
    _update_existing(env, "PWD", cwd)


def exit_builtin(
    args: Sequence[str], env: Environment, out: TextIO | None = None
) -> None:
    """Print ``exit`` and raise ShellExit with the status the arguments ask for."""
    stream = _stream(out)
    if len(args) > 2:
        stream.write("exit\nexit: too many arguments\n")
        raise ShellExit(1)
    argument = args[1] if len(args) > 1 else None
    if has_alpha(argument):
        stream.write("exit\nexit: wrong type\n")
        raise ShellExit(255)
    stream.write("exit\n")
    if argument is not None:
        raise ShellExit(atoi(argument) & 0xFF)
    raise ShellExit(0)


def _should_add(env: Environment, name: str, value: str, has_equals: bool) -> bool:
    for existing_name, existing_value in env.items():
        if existing_name == name and existing_value == value:
            return False
        if existing_name == name and has_equals:
            env.set(name, value)
            return False
        if not has_equals:
            return False
    return True


def export(args: Sequence[str], env: Environment, out: TextIO | None = None) -> None:
    """List variables, or set each ``NAME=value`` argument.

    An argument starting with ``=`` stops the command with status 1.
    """
    stream = _stream(out)
    if len(args) < 2:
        for name, value in env.items():
            stream.write(f'declare -x {name}="{value}"\n')
        return
    for arg in args[1:]:
        parts = split_words(arg, "=")
        if arg.startswith("=") or not parts:
            env.exit_status = 1
            _perror("export: not a valid identifier")
            return
        name = parts[0]
        value = parts[1] if len(parts) > 1 else ""
        if _should_add(env, name, value, "=" in arg):
            env.set(name, value)


def unset(args: Sequence[str], env: Environment) -> None:
    """Remove each named variable."""
    for name in args[1:]:
        env.unset(name)