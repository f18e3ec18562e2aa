"""Turning an input line into a list of commands."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import IntEnum

from .quoting import ReadLine, WordScanner

DEFAULT_BUILTINS: tuple[str, ...] = ("exit", "echo", "cd")
TOKENS: tuple[str, ...] = ("|",)
BIN_PREFIX = "/bin/"


class CommandKind(IntEnum):
    """How a command word was recognised."""

    BIN = 1
    """Not a builtin and not an existing file: looked up under ``/bin/``."""
    PATH = 2
    """An existing file, run by the path as written."""
    BUILTIN = 3
    """One of the shell's builtin names."""


@dataclass
class Command:
    """One command of a line, with its parameters and a trailing token."""

    command: str
    kind: CommandKind
    parameters: list[str] = field(default_factory=list)
    token: str | None = None

    def argv(self) -> list[str]:
        """Return the command followed by its parameters."""
        return [self.command, *self.parameters]


def classify_word(
    word: str, builtins: Iterable[str] | None = DEFAULT_BUILTINS
) -> CommandKind:
    """Decide what kind of command *word* names."""
    if builtins is not None and word in builtins:
        return CommandKind.BUILTIN
    try:
        exists = bool(word) and os.access(word, os.F_OK)
    except ValueError:
        exists = False
    return CommandKind.PATH if exists else CommandKind.BIN


def is_token(word: str, tokens: Iterable[str] = TOKENS) -> bool:
    """True if *word* is one of the separating tokens."""
    return word in tokens


def parse_line(
    line: str | None,
    builtins: Iterable[str] | None = DEFAULT_BUILTINS,
    read_line: ReadLine | None = None,
    environ: Mapping[str, str] | None = None,
) -> list[Command]:
    """Split *line* into commands.

    The first word, and the first word after each token, starts a new
    command; a token is recorded on the command before it; every other
    word is a parameter of the current command.
    """
    if not line:
        return []
    builtin_names = tuple(builtins) if builtins is not None else None
    commands: list[Command] = []
    expecting_command = True
    for word in WordScanner(line, read_line, environ).words():
        if expecting_command:
            kind = classify_word(word, builtin_names)
            name = BIN_PREFIX + word if kind is CommandKind.BIN else word
            commands.append(Command(name, kind))
            expecting_command = False
        elif is_token(word):
            commands[-1].token = word
            expecting_command = True
        else:
            commands[-1].parameters.append(word)
    return commands