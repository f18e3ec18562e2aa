"""Builtin commands: echo, pwd, env, cd and exit."""

from __future__ import annotations

import os
import sys
from typing import TextIO

from .environment import Environment

_SPACES = " \t\n\v\f\r"


class ShellExit(Exception):
    """Raised by the exit builtin to end the shell with *status*."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def atoi(text: str) -> int:
    """Parse a leading, optionally signed, decimal integer; 0 if none."""
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = ""
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits += char
    return sign * int(digits) if digits else 0


def is_numeric(text: str | None) -> bool:
    """True if *text* is an optional sign followed only by digits."""
    if not text:
        return False
    body = text[1:] if text[0] in "+-" else text
    return all("0" <= char <= "9" for char in body)


def is_n_option(arg: str | None) -> bool:
    """True if *arg* is ``-`` followed only by ``n`` characters."""
    if not arg or arg[0] != "-":
        return False
    return all(char == "n" for char in arg[1:])


def echo(argv: list[str], out: TextIO | None = None) -> int:
    """Print the arguments separated by spaces; ``-n`` drops the newline."""
    out = out if out is not None else sys.stdout
    args = argv[1:]
    newline = True
    while args and is_n_option(args[0]):
        newline = False
        args = args[1:]
    out.write(" ".join(args))
    if newline:
        out.write("\n")
    return 0


def pwd(out: TextIO | None = None, err: TextIO | None = None) -> int:
    """Print the current working directory."""
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    try:
        cwd = os.getcwd()
    except OSError:
        err.write("pwd: failed to get current directory\n")
        return 1
    out.write(cwd + "\n")
    return 0


def env(environment: Environment, out: TextIO | None = None) -> int:
    """Print every environment entry on its own line."""
    out = out if out is not None else sys.stdout
    for entry in environment:
        out.write(entry + "\n")
    return 0


def cd(environment: Environment, args: list[str], err: TextIO | None = None) -> int:
    """Change directory to ``args[1]`` or ``$HOME``; update OLDPWD and PWD."""
    err = err if err is not None else sys.stderr
    try:
        old = os.getcwd()
    except OSError:
        err.write("cd: error getting current directory\n")
        return 1
    target = args[1] if len(args) > 1 and args[1] else environment.get("HOME")
    try:
        if target is None:
            raise FileNotFoundError
        os.chdir(target)
    except OSError:
        err.write("cd: No such file or directory\n")
        return 1
    environment.set("OLDPWD", old, True)
    try:
        new = os.getcwd()
    except OSError:
        err.write("cd: error getting current directory\n")
        return 1
    environment.set("PWD", new, True)
    return 0


def exit_shell(
    argv: list[str], out: TextIO | None = None, err: TextIO | None = None
) -> None:
    """Print ``exit`` and raise ShellExit with the requested status."""
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    out.write("exit\n")
    if len(argv) < 2:
        raise ShellExit(0)
    arg = argv[1]
    if not is_numeric(arg):
        err.write(f"minishell: exit: {arg}: numeric argument required\n")
        raise ShellExit(255)
    raise ShellExit(atoi(arg) & 0xFF)