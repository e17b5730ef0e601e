"""Signal handling for the interactive prompt and for child processes."""

from __future__ import annotations

import signal
import sys
from dataclasses import dataclass
from types import FrameType


@dataclass
class SignalFlag:
    """The last signal received, stored as ``128 + signum``; 0 means none."""

    value: int = 0

    def reset(self) -> None:
        """Forget any signal received so far."""
        self.value = 0

    def record(self, signum: int) -> None:
        """Remember that ``signum`` was received."""
        self.value = 128 + int(signum)


received = SignalFlag()


def _redisplay_prompt() -> None:
    if not sys.stdin.isatty():
        return
    try:
        import readline
    except ImportError:
        return
    readline.redisplay()


def prompt_handler(signum: int, frame: FrameType | None) -> None:
    """Handle a signal at the prompt: start a fresh line and record it."""
    sys.stdout.write("\n")
    sys.stdout.flush()
    _redisplay_prompt()
    received.record(signum)


def child_handler(signum: int, frame: FrameType | None) -> None:
    """Handle a signal in a child: start a fresh line and exit with ``128 + signum``."""
    sys.stdout.write("\n")
    sys.stdout.flush()
    received.record(signum)
    raise SystemExit(received.value)


def install_handlers() -> None:
    """Install the prompt handler for SIGINT and ignore SIGQUIT."""
    signal.signal(signal.SIGINT, prompt_handler)
    if hasattr(signal, "siginterrupt"):
        signal.siginterrupt(signal.SIGINT, False)
    if hasattr(signal, "SIGQUIT"):
        signal.signal(signal.SIGQUIT, signal.SIG_IGN)