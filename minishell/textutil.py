"""Small text helpers shared by the shell: splitting, integer parsing, classes of characters."""

from __future__ import annotations

WHITESPACE = frozenset(" \t\n\v\f\r")


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep`` and drop the empty pieces."""
    return [word for word in text.split(sep) if word]


def is_space(char: str) -> bool:
    """Return True for a single whitespace character: space, tab, newline, VT, FF or CR."""
    return len(char) == 1 and char in WHITESPACE


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first character that is not a digit. No digits give 0.
    """
    stripped = text.lstrip("".join(WHITESPACE))
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for char in stripped:
        if "0" <= char <= "9":
            digits.append(char)
        else:
            break
    if not digits:
        return 0
    return sign * int("".join(digits))


def has_alpha(text: str | None) -> bool:
    """Return True if ``text`` holds at least one ASCII letter."""
    if text is None:
        return False
    return any(("a" <= char <= "z") or ("A" <= char <= "Z") for char in text)