"""The shell's built-in commands."""

from __future__ import annotations

import os
import sys
from typing import Callable, TextIO

from .environment import Environment, is_valid_identifier, split_assignment

BUILTINS = ("cd", "pwd", "export", "unset", "env", "exit", "echo")
_U64 = 1 << 64


class ShellExit(Exception):
    """Raised by ``exit`` to end the shell with ``status``."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def echo_flag_count(args: list[str]) -> int:
    """How many leading arguments are ``-n`` style flags (a dash and only ``n``s)."""
    count = 0
    for arg in args:
        if not arg.startswith("-") or any(ch != "n" for ch in arg[1:]):
            break
        count += 1
    return count


def echo(argv: list[str], out: TextIO | None = None) -> int:
    """Print the arguments separated by spaces; ``-n`` flags suppress the newline."""
    out = _stream(out)
    flags = echo_flag_count(argv[1:])
    out.write(" ".join(argv[1 + flags:]))
    if flags == 0:
        out.write("\n")
    return 0


def is_number(text: str) -> bool:
    """True for an optional sign followed by decimal digits."""
    digits = text[1:] if text[:1] in ("-", "+") else text
    if text[:1] in ("-", "+") and not digits:
        return False
    return all("0" <= ch <= "9" for ch in digits)


def parse_exit_status(text: str) -> int:
    """Turn an ``exit`` argument into a status byte.

    Raises ``ValueError`` when the number does not fit in 64 bits.
    """
    pos = 0
    while pos < len(text) and (text[pos] == " " or "\t" <= text[pos] <= "\r"):
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        previous = result
        result = (result * 10 + ord(text[pos]) - ord("0")) % _U64
        if previous != result // 10:
            raise ValueError(f"numeric argument required: {text}")
        pos += 1
    return (result * sign) & 0xFF


def exit_builtin(argv: list[str], out: TextIO | None = None) -> int:
    """Leave the shell by raising ``ShellExit``; too many arguments returns 1."""
    out = _stream(out)
    out.write("exit\n")
    if len(argv) >= 2:
        arg = argv[1]
        if not is_number(arg):
            out.write(f"bash: exit: {arg}: numeric argument required\n")
            raise ShellExit(255)
        if len(argv) > 2:
            out.write("bash: exit: too many arguments\n")
            return 1
        try:
            status = parse_exit_status(arg)
        except ValueError:
            out.write(f"bash: exit: {arg}: numeric argument required\n")
            raise ShellExit(255) from None
        raise ShellExit(status)
    raise ShellExit(0)


def pwd(out: TextIO | None = None) -> int:
    """Print the working directory."""
    try:
        cwd = os.getcwd()
    except OSError:
        return 1
    _stream(out).write(cwd + "\n")
    return 0


def cd(argv: list[str], env: Environment, out: TextIO | None = None) -> int:
    """Change directory to the argument, or to ``HOME`` when there is none."""
    out = _stream(out)
    if len(argv) == 1:
        home = env.get("HOME")
        if not home:
            out.write("bash: cd: HOME not set\n")
            return 1
        try:
            os.chdir(home)
        except OSError:
            return 1
        return 0
    target = argv[1]
    if not os.access(target, os.R_OK):
        return 1
    previous = os.getcwd()
    try:
        os.chdir(target)
    except OSError:
        return 1
    env.set("OLDPWD", previous)
    env.set("PWD", os.getcwd())
    return 0


def export(argv: list[str], env: Environment, out: TextIO | None = None) -> int:
    """Set variables from ``NAME[=value]`` arguments, or list them all."""
    out = _stream(out)
    if len(argv) == 1:
        for line in env.export_lines():
            out.write(line + "\n")
        return 0
    status = 0
    for arg in argv[1:]:
        key, value = split_assignment(arg)
        if is_valid_identifier(key):
            env.set(key, value)
        else:
            out.write(f"bash: export: `{arg}': not a valid identifier\n")
            status = 1
    return status


def unset(argv: list[str], env: Environment, out: TextIO | None = None) -> int:
    """Remove the named variables; invalid names are reported."""
    out = _stream(out)
    if len(env) == 0:
        return 0
    status = 0
    for key in argv[1:]:
        if not is_valid_identifier(key):
            out.write(f"bash: unset: `{key}': not a valid identifier\n")
            status = 1
            continue
        env.remove(key)
    return status


def print_env(env: Environment, out: TextIO | None = None) -> int:
    """Print every variable that has a value."""
    out = _stream(out)
    for line in env.env_lines():
        out.write(line + "\n")
    return 0


def is_builtin(argv: list[str] | None) -> bool:
    """True when the command names a built-in."""
    return bool(argv) and argv[0] in BUILTINS


def run_builtin(argv: list[str], env: Environment, out: TextIO | None = None) -> int:
    """Run a built-in command and return its status."""
    if not is_builtin(argv):
        raise ValueError(f"not a builtin: {argv[0] if argv else ''!r}")
    name = argv[0]
    handlers: dict[str, Callable[[], int]] = {
        "cd": lambda: cd(argv, env, out),
        "pwd": lambda: pwd(out),
        "env": lambda: print_env(env, out),
        "unset": lambda: unset(argv, env, out) if len(argv) > 1 else 0,
        "export": lambda: export(argv, env, out),
        "echo": lambda: echo(argv, out),
        "exit": lambda: exit_builtin(argv, out),
    }
    return handlers[name]()