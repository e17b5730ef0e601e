"""Running parsed commands: builtins in the shell, others in child processes."""

from __future__ import annotations

import contextlib
import os
import signal
import subprocess
import sys
from collections.abc import Iterator
from typing import TextIO

from . import builtins
from .environment import Environment
from .parser import STDIN_FILENO, STDOUT_FILENO, Command
from .redirection import close_command_fds
from .signals import received
from .textutil import split_words

PARENT_BUILTINS = frozenset({"cd", "export", "unset", "exit"})
COMMAND_NOT_FOUND = 127


def is_parent_builtin(name: str) -> bool:
    """Return True for builtins that must run in the shell process itself."""
    return name in PARENT_BUILTINS


def exit_status_from_wait(status: int) -> int | None:
    """Turn a wait status into a shell exit status, ``128 + signal`` when killed."""
    if os.WIFEXITED(status):
        return os.WEXITSTATUS(status)
    if os.WIFSIGNALED(status):
        return 128 + os.WTERMSIG(status)
    return None


def find_executable(name: str, env: Environment) -> str | None:
    """Return ``name`` itself if executable, else the first match in PATH."""
    if os.path.isfile(name) and os.access(name, os.X_OK):
        return name
    path = env.get("PATH")
    if path is None:
        return None
    for directory in split_words(path, ":"):
        candidate = f"{directory}/{name}"
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate
    return None


@contextlib.contextmanager
def _output(command: Command) -> Iterator[TextIO]:
    if command.output_fd in (STDOUT_FILENO, -1):
        yield sys.stdout
        sys.stdout.flush()
        return
    with os.fdopen(command.output_fd, "w", closefd=False) as stream:
        yield stream


def run_builtin_in_parent(command: Command, env: Environment) -> None:
    """Run ``cd``, ``export``, ``unset`` or ``exit`` in the shell process."""
    name = command.args[0]
    try:
        with _output(command) as out:
            if name == "cd":
                builtins.cd(command.args, env, out)
            elif name == "export":
                builtins.export(command.args, env, out)
            elif name == "unset":
                builtins.unset(command.args, env)
            elif name == "exit":
                builtins.exit_builtin(command.args, env, out)
    finally:
        close_command_fds(command)


def _subprocess_env(env: Environment) -> dict[str, str]:
    result: dict[str, str] = {}
    for entry in env.envp:
        name, sep, value = entry.partition("=")
        if sep:
            result.setdefault(name, value)
    return result


def _start(command: Command, env: Environment) -> subprocess.Popen | int:
    name = command.args[0]
    with _output(command) as out:
        if name == "echo":
            builtins.echo(command.args, out)
            return 0
        if name in ("pwd", "PWD"):
            builtins.pwd(out)
            return 0
        if name == "env":
            builtins.env_builtin(env, out)
            return 0
        if name == "clear":
            builtins.clear(out)
            return 0
        path = find_executable(name, env)
        if path is None:
            out.write(f"{name}: command not found\n")
            return COMMAND_NOT_FOUND
    try:
        return subprocess.Popen(
            command.args,
            executable=path,
            stdin=None if command.input_fd == STDIN_FILENO else command.input_fd,
            stdout=None if command.output_fd == STDOUT_FILENO else command.output_fd,
            env=_subprocess_env(env),
        )
    except OSError as error:
        print(f"execve failed: {error.strerror}", file=sys.stderr)
        return 1


def _wait(started: subprocess.Popen | int) -> int:
    if isinstance(started, int):
        return started
    code = started.wait()
    return 128 - code if code < 0 else code


@contextlib.contextmanager
def _ignoring_interrupts() -> Iterator[None]:
    try:
        previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    except ValueError:
        yield
        return
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def run_child(command: Command, env: Environment) -> None:
    """Run one command outside the shell and record its exit status."""
    started = _start(command, env)
    close_command_fds(command)
    with _ignoring_interrupts():
        env.exit_status = _wait(started)


def run_pipeline(commands: list[Command], env: Environment) -> int:
    """Run the pipeline starting at ``commands[0]``; return how many it used."""
    count = 1
    for command in commands:
        if command.operator != "|" or count >= len(commands):
            break
        count += 1
    members = commands[:count]
    started = [_start(command, env) for command in members]
    for command in members:
        close_command_fds(command)
    with _ignoring_interrupts():
        for process in started:
            env.exit_status = _wait(process)
    return count


def run_commands(commands: list[Command] | None, env: Environment) -> None:
    """Run each command in turn, grouping ``|`` chains into pipelines."""
    if not commands:
        env.exit_status = received.value
        return
    if not commands[0].args:
        return
    i = 0
    while i < len(commands) and not env.exec_flag:
        command = commands[i]
        if not command.args:
            close_command_fds(command)
            i += 1
            continue
        if is_parent_builtin(command.args[0]):
            run_builtin_in_parent(command, env)
            i += 1
        elif command.operator == "|" and i + 1 < len(commands):
            i += run_pipeline(commands[i:], env)
        else:
            run_child(command, env)
            i += 1