"""Checks run on a command line before it is parsed."""

from __future__ import annotations

from .environment import Environment
from .textutil import is_space
from .tokenizer import OPERATORS

_QUOTES = frozenset("\"'")
_REDIRECT_OR_PIPE = frozenset("<>|")
_FORBIDDEN = frozenset("{}[]()&;*")


def has_unclosed_quotes(text: str) -> bool:
    """Return True if a single or double quote in ``text`` is never closed."""
    open_quote: str | None = None
    for char in text:
        if open_quote is None:
            if char in _QUOTES:
                open_quote = char
        elif char == open_quote:
            open_quote = None
    return open_quote is not None


def check_syntax(text: str, env: Environment) -> bool:
    """Reject a line that starts or ends with ``|``, ``>`` or ``<``."""
    if not text:
        return False
    ends = (text[0], text[-1])
    if "|" in ends:
        env.report_error("Error: syntax error pipes", 1)
        return True
    if ">" in ends or "<" in ends:
        env.report_error("Error: syntax error redirection", 1)
        return True
    return False


def check_operator_end(text: str, env: Environment) -> bool:
    """Reject a line whose last operator is followed only by whitespace."""
    found = False
    length = len(text)
    i = 0
    while i < length:
        operator = next((op for op in OPERATORS if text.startswith(op, i)), None)
        if operator is None:
            i += 1
            continue
        i += len(operator)
        while i < length and is_space(text[i]):
            i += 1
        if i >= length:
            env.report_error("Error: syntax error operator", 1)
            found = True
    return found


def check_invalid_chars(text: str, env: Environment) -> bool:
    """Reject a line holding any of ``{ } [ ] ( ) & ; *``, quoted or not."""
    if any(char in _FORBIDDEN for char in text):
        env.report_error("Error: syntax error", 1)
        return True
    return False


def check_operator_spacing(text: str, env: Environment) -> bool:
    """Reject operators that follow one another, with or without spaces.

    Checking stops at the first quote character. Operators separated by
    spaces give status 1; operators written together give status 2.
    """
    length = len(text)
    quoted = False
    i = 0
    while i < length:
        if text[i] in _QUOTES:
            quoted = True
        if text[i] in _REDIRECT_OR_PIPE and not quoted:
            if i + 1 < length and text[i] == text[i + 1]:
                i += 2
            else:
                i += 1
            if i < length and text[i] == " ":
                while i < length and text[i] == " ":
                    i += 1
                if i < length and text[i] in _REDIRECT_OR_PIPE:
                    env.report_error("Error: syntax error", 1)
                    return True
            if i < length and text[i] in _REDIRECT_OR_PIPE:
                env.report_error("Error: syntax error", 2)
                return True
        i += 1
    return False


def check_input(text: str, env: Environment) -> bool:
    """Run every check on ``text``; return True if the line must not run.

    An empty line is rejected silently. After the first failing check the
    remaining ones are skipped.
    """
    if not text:
        return True
    if has_unclosed_quotes(text):
        env.report_error("Error: unclosed quotes", 2)
        return True
    for check in (
        check_syntax,
        check_operator_end,
        check_invalid_chars,
        check_operator_spacing,
    ):
        if env.exec_flag:
            break
        check(text, env)
    return env.exec_flag