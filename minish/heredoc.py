"""Heredoc delimiters: quote detection and quote removal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

_QUOTES = "'\""


@dataclass(frozen=True)
class Delimiter:
    """A heredoc delimiter with its quotes removed.

    ``quoted`` records whether the delimiter as written held any quotes.
    """

    text: str
    quoted: bool = False


def is_quoted(text: str | None) -> bool:
    """True when ``text`` holds a single or double quote anywhere."""
    return bool(text) and any(ch in _QUOTES for ch in text)


def remove_quotes(text: str) -> str:
    """Drop matching quote pairs from ``text``, keeping what they enclose.

    Inside a quoted span the other kind of quote is taken literally.
    An unclosed quote raises ``ValueError``.
    """
    parts: list[str] = []
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch in _QUOTES:
            end = text.find(ch, pos + 1)
            if end < 0:
                raise ValueError(f"unclosed quote in {text!r}")
            parts.append(text[pos + 1:end])
            pos = end + 1
        else:
            parts.append(ch)
            pos += 1
    return "".join(parts)


def make_delimiter(value: str) -> Delimiter:
    """Build a delimiter, removing quotes and noting whether there were any."""
    if is_quoted(value):
        return Delimiter(remove_quotes(value), True)
    return Delimiter(value, False)


def build_delimiters(values: Iterable[str]) -> list[Delimiter]:
    """Build delimiters for each value, in order."""
    return [make_delimiter(value) for value in values]