"""The shell's environment: an ordered table of variables, some without a value."""

from __future__ import annotations

from typing import Iterable


def is_valid_identifier(name: str) -> bool:
    """True when ``name`` is a letter or underscore followed by letters, digits or underscores."""
    if not name:
        return False

    def ascii_alpha(ch: str) -> bool:
        return ("a" <= ch <= "z") or ("A" <= ch <= "Z")

    first, rest = name[0], name[1:]
    if first != "_" and not ascii_alpha(first):
        return False
    return all(ch == "_" or ascii_alpha(ch) or "0" <= ch <= "9" for ch in rest)


def split_assignment(arg: str) -> tuple[str, str | None]:
    """Split ``NAME=value`` at the first ``=``; without one the value is ``None``."""
    key, equals, value = arg.partition("=")
    return key, (value if equals else None)


class Environment:
    """Variables in insertion order; a variable may exist without a value."""

    def __init__(self, entries: Iterable[tuple[str, str | None]] | None = None) -> None:
        self._vars: dict[str, str | None] = {}
        for key, value in entries or ():
            self.set(key, value)

    @classmethod
    def from_strings(cls, entries: Iterable[str]) -> "Environment":
        """Build from ``NAME=value`` strings, leaving out any ``OLDPWD`` entry."""
        return cls(
            split_assignment(entry)
            for entry in entries
            if not entry.startswith("OLDPWD")
        )

    def get(self, key: str) -> str | None:
        """The value of ``key``, or ``None`` when it is unset or has no value."""
        return self._vars.get(key)

    def set(self, key: str, value: str | None) -> None:
        """Set ``key``; an existing variable keeps its position."""
        self._vars[key] = value

    def remove(self, key: str) -> bool:
        """Remove ``key``; return whether it was present."""
        return self._vars.pop(key, _MISSING) is not _MISSING

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __len__(self) -> int:
        return len(self._vars)

    def to_strings(self) -> list[str]:
        """``NAME=value`` strings for every variable that has a value."""
        return [f"{key}={value}" for key, value in self._vars.items() if value is not None]

    def env_lines(self) -> list[str]:
        """The lines ``env`` prints: variables that have a value."""
        return [f"{key}={value}" for key, value in self._vars.items() if key and value is not None]

    def export_lines(self) -> list[str]:
        """The lines ``export`` prints with no arguments: every variable."""
        return [
            f'declare -x {key}="{value if value is not None else ""}"'
            for key, value in self._vars.items()
        ]


_MISSING = object()