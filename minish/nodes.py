"""Syntax tree nodes for parsed command lines and the logic of ``&&`` and ``||``."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Sequence, Union


class NodeType(Enum):
    """Kinds of nodes in a parsed command line."""

    COMMAND = "command"
    PIPE = "pipe"
    AND = "and"
    OR = "or"
    SUBSHELL = "subshell"


class RedirectType(Enum):
    """Kinds of redirection, keyed by their operator text."""

    INPUT = "<"
    OUTPUT = ">"
    APPEND = ">>"
    HEREDOC = "<<"

    @property
    def reads(self) -> bool:
        """True when the redirection feeds standard input."""
        return self in (RedirectType.INPUT, RedirectType.HEREDOC)


@dataclass
class Redirect:
    """One redirection: its kind and the file (or heredoc delimiter) it names."""

    kind: RedirectType
    file: str

    @property
    def fd(self) -> int:
        """The descriptor the redirection replaces: 0 for input, 1 for output."""
        return 0 if self.kind.reads else 1

    @classmethod
    def from_tokens(cls, tokens: Sequence[str], index: int) -> "Redirect":
        """Build a redirection from the operator at ``index`` and the word after it."""
        if not 0 <= index < len(tokens):
            raise IndexError("redirection index out of range")
        try:
            kind = RedirectType(tokens[index])
        except ValueError:
            raise ValueError(f"not a redirection operator: {tokens[index]!r}") from None
        if index + 1 >= len(tokens):
            raise ValueError(f"missing file after {tokens[index]!r}")
        return cls(kind, tokens[index + 1])


@dataclass
class Command:
    """A simple command: its words, redirections and heredoc delimiters."""

    argv: list[str] = field(default_factory=list)
    redirects: list[Redirect] = field(default_factory=list)
    heredocs: list = field(default_factory=list)

    @property
    def type(self) -> NodeType:
        return NodeType.COMMAND


@dataclass
class Subshell:
    """A parenthesised command line run in a child shell."""

    root: "Node"
    redirects: list[Redirect] = field(default_factory=list)
    heredocs: list = field(default_factory=list)

    @property
    def type(self) -> NodeType:
        return NodeType.SUBSHELL


@dataclass
class Pipe:
    """Two nodes joined by ``|``."""

    left: "Node"
    right: "Node"
    pipe_fd: int | None = None

    @property
    def type(self) -> NodeType:
        return NodeType.PIPE


@dataclass
class And:
    """Two nodes joined by ``&&``."""

    left: "Node"
    right: "Node"

    @property
    def type(self) -> NodeType:
        return NodeType.AND


@dataclass
class Or:
    """Two nodes joined by ``||``."""

    left: "Node"
    right: "Node"

    @property
    def type(self) -> NodeType:
        return NodeType.OR


Node = Union[Command, Subshell, Pipe, And, Or]


def run_and(node: And, execute: Callable[[Node], int]) -> int:
    """Run the left side, then the right side only if the left one succeeded."""
    status = execute(node.left)
    if status == 0:
        status = execute(node.right)
    return status


def run_or(node: Or, execute: Callable[[Node], int]) -> int:
    """Run the left side, then the right side only if the left one failed."""
    status = execute(node.left)
    if status != 0:
        status = execute(node.right)
    return status