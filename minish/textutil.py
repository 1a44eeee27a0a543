"""Small string helpers used by the shell: number parsing, splitting, trimming."""

from __future__ import annotations

from itertools import zip_longest

_WHITESPACE = " \t\n\v\f\r"
_U64 = 1 << 64


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C runtime helper does.

    Leading whitespace and one sign are skipped, digits are read until the
    first non-digit. If the value overflows an unsigned 64-bit accumulator,
    ``-1`` is returned for positive input and ``0`` for negative input.
    The result is truncated to a signed 32-bit integer.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and "0" <= text[pos] <= "9":
        previous = result
        result = (result * 10 + ord(text[pos]) - ord("0")) % _U64
        if previous != result // 10:
            return 0 if sign == -1 else -1
        pos += 1
    return _to_int32(_to_int32(result) * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``.

    A start past the end of the string yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must be non-negative")
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the first match, or ``None`` when there is none.
    An empty needle matches at index 0.
    """
    if not needle:
        return 0
    if length < 0:
        raise ValueError("length must be non-negative")
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    if n <= 0:
        return 0
    for left, right in zip_longest(a[:n], b[:n], fillvalue="\0"):
        if left != right:
            return ord(left) - ord(right)
    return 0