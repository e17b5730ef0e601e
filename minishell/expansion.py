"""Expansion of ``$NAME`` and ``$?`` in a token."""

from __future__ import annotations

from .environment import Environment

_NAME_STOP = frozenset(" \"'")


def lookup_variable(name: str, env: Environment) -> str | None:
    """Return the value of ``name`` in ``env``, or None if it is not set."""
    return env.get(name)


def _replace(text: str, index: int, env: Environment) -> str | None:
    start = index + 1
    if start >= len(text) or text[start] in _NAME_STOP:
        return "$"
    end = start
    while end < len(text) and text[end] not in _NAME_STOP:
        end += 1
    return lookup_variable(text[start:end], env)


def expand_dollar(text: str, env: Environment) -> str | None:
    """Return the expansion of the last ``$`` in ``text``.

    ``$?`` gives the last exit status. Any other ``$`` is expanded only until a
    double quote has been seen; the name runs up to a space, a quote or the end
    of the text. A lone ``$`` stays ``$``, and an unset name gives None. When
    ``text`` holds no expandable ``$`` the result is None.
    """
    in_quote = False
    result: str | None = None
    for index, char in enumerate(text):
        if char == '"':
            in_quote = True
        if char == "$" and text[index + 1 : index + 2] == "?":
            result = str(env.exit_status)
        elif char == "$" and not in_quote:
            result = _replace(text, index, env)
    return result