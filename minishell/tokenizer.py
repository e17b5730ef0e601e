"""Splitting a command line into words and operators, with ``$`` expansion."""

from __future__ import annotations

from .environment import Environment
from .expansion import expand_dollar

OPERATORS = (">>", ">", "<", "<<", "|")
_META = frozenset("|&;><")
_QUOTES = frozenset("\"'")


def is_operator(token: str | None) -> bool:
    """Return True if ``token`` is one of ``>``, ``>>``, ``<``, ``<<`` or ``|``."""
    return token is not None and token in OPERATORS


def count_tokens(text: str) -> int:
    """Count the tokens in ``text``.

    Operators count one each (``>>`` and ``<<`` as a single token). A word is
    counted where it starts outside quotes; a quoted word is counted at its
    closing quote. A doubled quote character is treated as one character.
    """
    count = 0
    in_word = False
    quoted = False
    length = len(text)
    i = 0
    while i < length:
        char = text[i]
        if char in _QUOTES:
            if i + 1 < length and text[i + 1] == char:
                i += 1
            else:
                quoted = not quoted
        char = text[i]
        if char in "><":
            if i + 1 < length and text[i + 1] == char:
                i += 1
            count += 1
        elif char in _META:
            count += 1
        char = text[i]
        if char not in _META and char != " " and not in_word and not quoted:
            in_word = True
            count += 1
        elif char == " " or char in _META:
            in_word = False
        i += 1
    return count


def _skip_quoted(text: str, index: int) -> int:
    quote = text[index]
    end = text.find(quote, index + 1)
    return len(text) if end < 0 else end + 1


def token_length(text: str, start: int) -> int:
    """Return the length of the token starting at ``start``.

    An operator gives its own length. For a word, characters between quotes
    (and the quotes themselves) are skipped without being counted.
    """
    length = len(text)
    if start < length and text[start] in _META:
        if text.startswith(">>", start) or text.startswith("<<", start):
            return 2
        return 1
    count = 0
    i = start
    while i < length and text[i] != " " and text[i] not in _META:
        if text[i] in _QUOTES:
            i = _skip_quoted(text, i)
        else:
            i += 1
            count += 1
    return count


def cut_token(text: str, start: int) -> str:
    """Return the text from ``start`` up to the next space or the end."""
    end = text.find(" ", start)
    return text[start:] if end < 0 else text[start:end]


def _read_quoted(text: str, index: int, env: Environment) -> tuple[str | None, int]:
    length = len(text)
    quote = ""
    while index < length and text[index] in _QUOTES:
        quote = text[index]
        index += 1
    end = text.find(quote, index) if quote else -1
    if end < 0:
        end = length
    token = text[index:end]
    index = end + 1
    if token.startswith("$") and quote == '"':
        return expand_dollar(token, env), index
    return token, index


def tokenize(text: str, env: Environment) -> list[str]:
    """Split ``text`` into tokens, expanding ``$`` where it applies.

    A token that expands to nothing (an unset variable) ends the list: it and
    every token after it are dropped.
    """
    tokens: list[str] = []
    length = len(text)
    i = 0
    for _ in range(count_tokens(text)):
        while i < length and text[i] == " ":
            i += 1
        token: str | None
        current = text[i : i + 1]
        if current == "$":
            size = token_length(text, i)
            token = expand_dollar(cut_token(text, i), env)
            i += size
        elif current in _QUOTES:
            token, i = _read_quoted(text, i, env)
        else:
            size = token_length(text, i)
            token = text[i : i + size]
            i += size
        if token is None:
            break
        tokens.append(token)
    return tokens